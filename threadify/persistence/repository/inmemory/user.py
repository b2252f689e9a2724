"""In-memory user repository for testing."""

import asyncio
from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from threadify.domain.model.user import User
from threadify.domain.repository.user import UserRepository
from threadify.domain.value import Email, PhotoId, UserId, Username
from threadify.util.locks import KeyedLock


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._locks = KeyedLock()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their (normalized) email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_token(self, token: str) -> Optional[User]:
        for user in self._users.values():
            if user.token is not None and user.token == token:
                return user
        return None

    async def add(self, user: User) -> User:
        """Insert a new user.

        Raises:
            IntegrityError: If the email is already registered
        """
        if await self.find_by_email(user.email):
            raise IntegrityError("Duplicate email", None, Exception())

        self._users[user.id] = user
        return user

    async def _update(self, user_id: UserId, **values) -> Optional[User]:
        async with self._locks.hold(user_id):
            user = self._users.get(user_id)
            if not user:
                return None
            await asyncio.sleep(0)

            updated = user.model_copy(update={**values, "updated_at": datetime.now()})
            self._users[user_id] = updated
            return updated

    async def set_token(self, user_id: UserId, token: Optional[str]) -> Optional[User]:
        return await self._update(user_id, token=token)

    async def update_password(
        self, user_id: UserId, hashed_password: str
    ) -> Optional[User]:
        return await self._update(user_id, hashed_password=hashed_password)

    async def update_username(
        self, user_id: UserId, username: Optional[Username]
    ) -> Optional[User]:
        return await self._update(user_id, username=username)

    async def swap_profile_photo(
        self, user_id: UserId, photo_id: Optional[PhotoId]
    ) -> Optional[PhotoId]:
        async with self._locks.hold(user_id):
            user = self._users.get(user_id)
            if not user:
                return None
            await asyncio.sleep(0)

            self._users[user_id] = user.model_copy(
                update={"profile_photo_id": photo_id, "updated_at": datetime.now()}
            )
            return user.profile_photo_id
