"""PostgreSQL repository implementations."""

from threadify.persistence.repository.photo import PostgresPhotoRepository
from threadify.persistence.repository.thread import PostgresThreadRepository
from threadify.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresThreadRepository",
    "PostgresPhotoRepository",
]
