"""PostgreSQL implementation of Photo repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from threadify.domain.model import ProfilePhoto
from threadify.domain.repository import PhotoRepository
from threadify.domain.value import PhotoId
from threadify.persistence.mappers import photo_to_dict, row_to_photo
from threadify.persistence.tables import profile_photos_table


class PostgresPhotoRepository(PhotoRepository):
    """PostgreSQL implementation of PhotoRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, photo_id: PhotoId) -> Optional[ProfilePhoto]:
        stmt = select(profile_photos_table).where(profile_photos_table.c.id == photo_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_photo(dict(row)) if row else None

    async def save(self, photo: ProfilePhoto) -> ProfilePhoto:
        stmt = profile_photos_table.insert().values(**photo_to_dict(photo))
        await self.session.execute(stmt)
        await self.session.flush()
        return photo

    async def delete(self, photo_id: PhotoId) -> bool:
        stmt = (
            delete(profile_photos_table)
            .where(profile_photos_table.c.id == photo_id)
            .returning(profile_photos_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.scalar_one_or_none() is not None
