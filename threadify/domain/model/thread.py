"""Thread aggregate root.

A thread owns its comments and likes. They are loaded, stored and deleted
together with the thread and are only mutated through it.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threadify.domain.model.comment import Comment
from threadify.domain.model.common import DomainModel
from threadify.domain.model.like import Like
from threadify.domain.value import CommentId, ThreadId, UserId, Username


class Thread(DomainModel):
    """Thread aggregate root.

    Business rules:
    - ``owner_id`` is set at creation and never changes
    - ``username`` is copied from the owner at creation and never re-synced
    - at most one like per user
    """

    id: ThreadId
    text: str = Field(min_length=1, max_length=10000)
    owner_id: UserId
    username: Optional[Username] = None
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def find_comment(self, comment_id: CommentId) -> Optional[Comment]:
        """Return the comment with the given ID, if it belongs to this thread."""
        return next((c for c in self.comments if c.id == comment_id), None)

    def find_like(self, user_id: UserId) -> Optional[Like]:
        """Return the like left by ``user_id``, if any."""
        return next((like for like in self.likes if like.liked_by_id == user_id), None)

    def is_liked_by(self, user_id: UserId) -> bool:
        return self.find_like(user_id) is not None
