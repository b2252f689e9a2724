"""In-memory repository implementations for testing."""

from .photo import InMemoryPhotoRepository
from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryPhotoRepository",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
]
