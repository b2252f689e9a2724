"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from threadify.domain.model import User
from threadify.domain.repository import UserRepository
from threadify.domain.value import Email, PhotoId, UserId, Username
from threadify.persistence.mappers import row_to_user, user_to_dict
from threadify.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_one(self, *criteria) -> Optional[User]:
        stmt = select(users_table).where(*criteria)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_one(users_table.c.id == user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        return await self._find_one(users_table.c.email == email.root)

    async def find_by_token(self, token: str) -> Optional[User]:
        return await self._find_one(users_table.c.token == token)

    async def add(self, user: User) -> User:
        """Insert a new user.

        The unique index on ``email`` raises IntegrityError on duplicates.
        """
        stmt = users_table.insert().values(**user_to_dict(user))
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def _update(self, user_id: UserId, **values) -> Optional[User]:
        """Apply a single-statement update and return the new row."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(**values, updated_at=func.now())
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        await self.session.flush()
        return row_to_user(dict(row)) if row else None

    async def set_token(self, user_id: UserId, token: Optional[str]) -> Optional[User]:
        """Replace the token in one UPDATE so no stale write can follow it."""
        return await self._update(user_id, token=token)

    async def update_password(
        self, user_id: UserId, hashed_password: str
    ) -> Optional[User]:
        return await self._update(user_id, hashed_password=hashed_password)

    async def update_username(
        self, user_id: UserId, username: Optional[Username]
    ) -> Optional[User]:
        return await self._update(
            user_id, username=username.root if username else None
        )

    async def swap_profile_photo(
        self, user_id: UserId, photo_id: Optional[PhotoId]
    ) -> Optional[PhotoId]:
        """Swap the photo reference under a row lock and return the old one."""
        stmt = (
            select(users_table.c.profile_photo_id)
            .where(users_table.c.id == user_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        previous = result.scalar_one_or_none()

        await self._update(user_id, profile_photo_id=photo_id)
        return PhotoId(previous) if previous else None
