"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threadify.domain.model.user import User
from threadify.domain.value import Email, PhotoId, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate (the credential store).

    Mutations after creation are targeted single-field updates so that a
    password change can never overwrite a concurrently rotated token.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's normalized email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> Optional[User]:
        """Find the user whose current session token equals ``token``.

        Args:
            token: Opaque session token

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The saved user

        Raises:
            IntegrityError: If the email is already registered
        """
        pass

    @abstractmethod
    async def set_token(self, user_id: UserId, token: Optional[str]) -> Optional[User]:
        """Atomically replace the user's session token.

        A single read-modify-write at the storage level: the old token stops
        resolving the moment the new one is installed.

        Args:
            user_id: The user's unique identifier
            token: New token, or None to sign out

        Returns:
            The updated user, or None if the user doesn't exist
        """
        pass

    @abstractmethod
    async def update_password(
        self, user_id: UserId, hashed_password: str
    ) -> Optional[User]:
        """Replace the stored password hash.

        Args:
            user_id: The user's unique identifier
            hashed_password: New bcrypt hash

        Returns:
            The updated user, or None if the user doesn't exist
        """
        pass

    @abstractmethod
    async def update_username(
        self, user_id: UserId, username: Optional[Username]
    ) -> Optional[User]:
        """Replace the user's display name.

        Args:
            user_id: The user's unique identifier
            username: New display name (None to clear)

        Returns:
            The updated user, or None if the user doesn't exist
        """
        pass

    @abstractmethod
    async def swap_profile_photo(
        self, user_id: UserId, photo_id: Optional[PhotoId]
    ) -> Optional[PhotoId]:
        """Atomically point the user at a new profile photo.

        Args:
            user_id: The user's unique identifier
            photo_id: New photo ID, or None to clear

        Returns:
            The previously referenced photo ID, if any
        """
        pass
