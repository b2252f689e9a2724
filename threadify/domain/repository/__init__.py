"""Repository interfaces for Threadify domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from threadify.domain.repository.photo import PhotoRepository
from threadify.domain.repository.thread import ThreadRepository
from threadify.domain.repository.transaction import TransactionHooks
from threadify.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "ThreadRepository",
    "PhotoRepository",
    "TransactionHooks",
]
