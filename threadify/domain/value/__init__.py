"""Domain value objects for Threadify."""

from threadify.domain.value.identifiers import (
    CommentId,
    LikeId,
    PhotoId,
    ThreadId,
    UserId,
)
from threadify.domain.value.identity import Identity
from threadify.domain.value.types import Email, Username

__all__ = [
    # Identifiers
    "UserId",
    "ThreadId",
    "CommentId",
    "LikeId",
    "PhotoId",
    # Types
    "Email",
    "Username",
    "Identity",
]
