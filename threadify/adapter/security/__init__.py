"""Password hashing adapter."""

from .bcrypt import BcryptPasswordHasher

__all__ = ["BcryptPasswordHasher"]
