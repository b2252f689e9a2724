"""Profile photo byte storage.

Photos are written to a local directory, one file per photo ID.
"""

import asyncio
from pathlib import Path

import logfire

from threadify.adapter.error import StorageError
from threadify.domain.service.photo_service import PhotoStorage
from threadify.domain.value import PhotoId


class FilesystemPhotoStorage(PhotoStorage):
    """Stores photo bytes under ``root/<photo_id>``."""

    def __init__(self, root: Path) -> None:
        """Initialize storage.

        Args:
            root: Directory to hold photo files (created on first write)
        """
        self.root = root

    def _path(self, photo_id: PhotoId) -> Path:
        return self.root / photo_id.hex

    async def write(self, photo_id: PhotoId, data: bytes) -> None:
        path = self._path(photo_id)
        try:
            await asyncio.to_thread(self._write_file, path, data)
        except OSError as e:
            logfire.error("Photo write failed", photo_id=str(photo_id), error=str(e))
            raise StorageError(f"Failed to store photo {photo_id}") from e

    async def read(self, photo_id: PhotoId) -> bytes | None:
        path = self._path(photo_id)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            return None
        except OSError as e:
            logfire.error("Photo read failed", photo_id=str(photo_id), error=str(e))
            raise StorageError(f"Failed to read photo {photo_id}") from e

    async def delete(self, photo_id: PhotoId) -> None:
        path = self._path(photo_id)
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            logfire.error("Photo delete failed", photo_id=str(photo_id), error=str(e))
            raise StorageError(f"Failed to delete photo {photo_id}") from e

    def _write_file(self, path: Path, data: bytes) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        # Write then rename so readers never see a partial file
        tmp = path.with_suffix(".tmp")
        tmp.write_bytes(data)
        tmp.replace(path)


class MockPhotoStorage(PhotoStorage):
    """In-memory photo storage for testing."""

    def __init__(self) -> None:
        self._files: dict[PhotoId, bytes] = {}

    async def write(self, photo_id: PhotoId, data: bytes) -> None:
        self._files[photo_id] = data

    async def read(self, photo_id: PhotoId) -> bytes | None:
        return self._files.get(photo_id)

    async def delete(self, photo_id: PhotoId) -> None:
        self._files.pop(photo_id, None)
