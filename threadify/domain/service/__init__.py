"""Domain services."""

from .base import Service
from .like_service import LikeService
from .ownership import OwnershipGuard
from .password_service import PasswordHasher
from .photo_service import PhotoService, PhotoStorage
from .thread_service import ThreadService
from .token_service import TokenService
from .user_service import UserService

__all__ = [
    "LikeService",
    "OwnershipGuard",
    "PasswordHasher",
    "PhotoService",
    "PhotoStorage",
    "Service",
    "ThreadService",
    "TokenService",
    "UserService",
]
