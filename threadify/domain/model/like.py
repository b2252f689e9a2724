"""Like entity."""

from datetime import datetime

from pydantic import Field

from threadify.domain.model.common import DomainModel
from threadify.domain.value import LikeId, UserId


class Like(DomainModel):
    """A user's like on a thread.

    A thread holds at most one like per user; the number of likes is the
    length of the thread's like list.
    """

    id: LikeId
    liked_by_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)


class LikeToggleResult(DomainModel):
    """Outcome of toggling a like.

    ``liked`` is True when the toggle added the user's like and False when
    it removed it. ``likes`` is the thread's like list after the toggle.
    """

    liked: bool
    likes: list[Like]
