"""Unit tests for FilesystemPhotoStorage."""

from uuid import uuid4

import pytest

from threadify.adapter.storage import FilesystemPhotoStorage
from threadify.domain.value import PhotoId


class TestFilesystemPhotoStorage:
    @pytest.mark.asyncio
    async def test_write_read_delete(self, tmp_path):
        # Arrange
        storage = FilesystemPhotoStorage(root=tmp_path / "photos")
        photo_id = PhotoId(uuid4())

        # Act
        await storage.write(photo_id, b"image-bytes")
        data = await storage.read(photo_id)
        await storage.delete(photo_id)

        # Assert
        assert data == b"image-bytes"
        assert await storage.read(photo_id) is None
        assert list((tmp_path / "photos").iterdir()) == []

    @pytest.mark.asyncio
    async def test_overwrite_replaces_bytes(self, tmp_path):
        storage = FilesystemPhotoStorage(root=tmp_path)
        photo_id = PhotoId(uuid4())

        await storage.write(photo_id, b"old")
        await storage.write(photo_id, b"new")

        assert await storage.read(photo_id) == b"new"

    @pytest.mark.asyncio
    async def test_missing_photo_reads_as_none(self, tmp_path):
        storage = FilesystemPhotoStorage(root=tmp_path)

        assert await storage.read(PhotoId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_deleting_missing_photo_is_a_no_op(self, tmp_path):
        storage = FilesystemPhotoStorage(root=tmp_path)

        await storage.delete(PhotoId(uuid4()))
