"""Comment entity.

Comments live inside a Thread and have no storage or lookup path of their
own; they are created and removed only through their parent thread.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threadify.domain.model.common import DomainModel
from threadify.domain.value import CommentId, UserId, Username


class Comment(DomainModel):
    """Comment embedded in a thread.

    ``author_id`` is None when the author's account no longer exists; such
    comments cannot be removed by anyone because ownership can't be proven.
    """

    id: CommentId
    text: str = Field(min_length=1, max_length=10000)
    author_id: Optional[UserId] = None
    username: Optional[Username] = None  # Denormalized at creation
    created_at: datetime = Field(default_factory=datetime.now)
