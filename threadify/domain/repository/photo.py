"""Profile photo repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threadify.domain.model.photo import ProfilePhoto
from threadify.domain.value import PhotoId


class PhotoRepository(ABC):
    """Repository for profile photo metadata."""

    @abstractmethod
    async def find_by_id(self, photo_id: PhotoId) -> Optional[ProfilePhoto]:
        """Find photo metadata by ID."""
        pass

    @abstractmethod
    async def save(self, photo: ProfilePhoto) -> ProfilePhoto:
        """Insert photo metadata."""
        pass

    @abstractmethod
    async def delete(self, photo_id: PhotoId) -> bool:
        """Delete photo metadata.

        Returns:
            True if a row was deleted
        """
        pass
