"""In-memory photo repository for testing."""

from typing import Optional

from threadify.domain.model import ProfilePhoto
from threadify.domain.repository.photo import PhotoRepository
from threadify.domain.value import PhotoId


class InMemoryPhotoRepository(PhotoRepository):
    """In-memory implementation of PhotoRepository for testing."""

    def __init__(self) -> None:
        self._photos: dict[PhotoId, ProfilePhoto] = {}

    async def find_by_id(self, photo_id: PhotoId) -> Optional[ProfilePhoto]:
        return self._photos.get(photo_id)

    async def save(self, photo: ProfilePhoto) -> ProfilePhoto:
        self._photos[photo.id] = photo
        return photo

    async def delete(self, photo_id: PhotoId) -> bool:
        return self._photos.pop(photo_id, None) is not None
