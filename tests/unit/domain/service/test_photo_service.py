"""Unit tests for PhotoService."""

from uuid import uuid4

import pytest

from threadify.domain.error import BadRequestError, NotFoundError
from threadify.domain.repository import (
    PhotoRepository,
    TransactionHooks,
    UserRepository,
)
from threadify.domain.service import PhotoService, PhotoStorage
from threadify.domain.value import UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


async def _signed_up(unit_env):
    user_repo = await unit_env.get(UserRepository)
    user = await user_repo.add(make_user())
    return user.to_identity()


class TestUpload:
    @pytest.mark.asyncio
    async def test_upload_stores_bytes_and_points_user_at_photo(self, unit_env):
        # Arrange
        photo_service = await unit_env.get(PhotoService)
        user_repo = await unit_env.get(UserRepository)
        identity = await _signed_up(unit_env)

        # Act
        photo = await photo_service.upload(identity, "me.png", "image/png", PNG)

        # Assert
        assert photo.owner_id == identity.user_id
        assert photo.size == len(PNG)
        user = await user_repo.find_by_id(identity.user_id)
        assert user.profile_photo_id == photo.id
        stored, data = await photo_service.get_for_user(identity.user_id)
        assert stored == photo
        assert data == PNG

    @pytest.mark.asyncio
    async def test_new_upload_discards_previous_photo(self, unit_env):
        # Arrange
        photo_service = await unit_env.get(PhotoService)
        photo_repo = await unit_env.get(PhotoRepository)
        storage = await unit_env.get(PhotoStorage)
        identity = await _signed_up(unit_env)
        old = await photo_service.upload(identity, "old.png", "image/png", PNG)
        hooks = await unit_env.get(TransactionHooks)

        # Act
        new = await photo_service.upload(identity, "new.jpg", "image/jpeg", b"jpeg")
        await hooks.committed()

        # Assert
        assert await photo_repo.find_by_id(old.id) is None
        assert await storage.read(old.id) is None
        _, data = await photo_service.get_for_user(identity.user_id)
        assert data == b"jpeg"
        assert new.content_type == "image/jpeg"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content_type,data",
        [("text/plain", b"hello"), ("image/png", b"")],
    )
    async def test_rejects_non_images_and_empty_files(
        self, unit_env, content_type, data
    ):
        photo_service = await unit_env.get(PhotoService)
        identity = await _signed_up(unit_env)

        with pytest.raises(BadRequestError):
            await photo_service.upload(identity, "file", content_type, data)

    @pytest.mark.asyncio
    async def test_rejects_oversized_upload(self, unit_env):
        photo_service = await unit_env.get(PhotoService)
        identity = await _signed_up(unit_env)
        limit = photo_service.storage_settings.max_photo_bytes

        with pytest.raises(BadRequestError):
            await photo_service.upload(
                identity, "big.png", "image/png", b"\x00" * (limit + 1)
            )


class TestFilesFollowTransaction:
    @pytest.mark.asyncio
    async def test_failed_save_removes_written_file(self, unit_env, monkeypatch):
        # Arrange
        photo_service = await unit_env.get(PhotoService)
        photo_repo = await unit_env.get(PhotoRepository)
        storage = await unit_env.get(PhotoStorage)
        identity = await _signed_up(unit_env)
        attempted = []

        async def failing_save(photo):
            attempted.append(photo.id)
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(photo_repo, "save", failing_save)

        # Act
        with pytest.raises(RuntimeError, match="database unavailable"):
            await photo_service.upload(identity, "me.png", "image/png", PNG)

        # Assert
        assert len(attempted) == 1
        assert await storage.read(attempted[0]) is None

    @pytest.mark.asyncio
    async def test_failed_user_update_removes_written_file(
        self, unit_env, monkeypatch
    ):
        # Arrange
        photo_service = await unit_env.get(PhotoService)
        user_repo = await unit_env.get(UserRepository)
        storage = await unit_env.get(PhotoStorage)
        identity = await _signed_up(unit_env)
        attempted = []

        async def failing_swap(user_id, photo_id):
            attempted.append(photo_id)
            raise RuntimeError("lock timeout")

        monkeypatch.setattr(user_repo, "swap_profile_photo", failing_swap)

        # Act
        with pytest.raises(RuntimeError, match="lock timeout"):
            await photo_service.upload(identity, "me.png", "image/png", PNG)

        # Assert
        assert await storage.read(attempted[0]) is None

    @pytest.mark.asyncio
    async def test_rollback_keeps_replaced_file_and_drops_new_one(self, unit_env):
        # Arrange
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)
        hooks = await unit_env.get(TransactionHooks)
        identity = await _signed_up(unit_env)
        old = await photo_service.upload(identity, "old.png", "image/png", PNG)
        await hooks.committed()

        # Act
        new = await photo_service.upload(identity, "new.png", "image/png", b"new")
        before_outcome = await storage.read(old.id)
        await hooks.rolled_back()

        # Assert
        assert before_outcome == PNG
        assert await storage.read(old.id) == PNG
        assert await storage.read(new.id) is None

    @pytest.mark.asyncio
    async def test_replaced_file_is_deleted_only_after_commit(self, unit_env):
        # Arrange
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)
        hooks = await unit_env.get(TransactionHooks)
        identity = await _signed_up(unit_env)
        old = await photo_service.upload(identity, "old.png", "image/png", PNG)
        await hooks.committed()

        # Act
        new = await photo_service.upload(identity, "new.png", "image/png", b"new")

        # Assert
        assert await storage.read(old.id) == PNG
        await hooks.committed()
        assert await storage.read(old.id) is None
        assert await storage.read(new.id) == b"new"


class TestGetAndDelete:
    @pytest.mark.asyncio
    async def test_user_without_photo_is_not_found(self, unit_env):
        photo_service = await unit_env.get(PhotoService)
        identity = await _signed_up(unit_env)

        with pytest.raises(NotFoundError):
            await photo_service.get_for_user(identity.user_id)

    @pytest.mark.asyncio
    async def test_unknown_user_is_not_found(self, unit_env):
        photo_service = await unit_env.get(PhotoService)

        with pytest.raises(NotFoundError):
            await photo_service.get_for_user(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_removes_current_photo(self, unit_env):
        # Arrange
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)
        identity = await _signed_up(unit_env)
        hooks = await unit_env.get(TransactionHooks)
        photo = await photo_service.upload(identity, "me.png", "image/png", PNG)

        # Act
        await photo_service.delete_current(identity)
        await hooks.committed()

        # Assert
        assert await storage.read(photo.id) is None
        with pytest.raises(NotFoundError):
            await photo_service.get_for_user(identity.user_id)
        with pytest.raises(NotFoundError):
            await photo_service.delete_current(identity)
