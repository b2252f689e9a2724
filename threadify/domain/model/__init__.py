"""Domain model entities for Threadify."""

from threadify.domain.model.comment import Comment
from threadify.domain.model.like import Like, LikeToggleResult
from threadify.domain.model.photo import ProfilePhoto
from threadify.domain.model.thread import Thread
from threadify.domain.model.user import User

__all__ = [
    "User",
    "Thread",
    "Comment",
    "Like",
    "LikeToggleResult",
    "ProfilePhoto",
]
