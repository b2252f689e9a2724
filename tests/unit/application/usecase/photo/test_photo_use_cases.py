"""Unit tests for profile photo use cases."""

import pytest
from dishka import AsyncContainer

from threadify.application.usecase.photo import (
    DeletePhotoRequest,
    DeletePhotoUseCase,
    GetPhotoRequest,
    GetPhotoUseCase,
    UploadPhotoRequest,
    UploadPhotoUseCase,
)
from threadify.domain.error import BadRequestError, NotFoundError
from threadify.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


class TestPhotoUseCases:
    @pytest.mark.asyncio
    async def test_upload_get_delete(self, unit_env: AsyncContainer):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.add(make_user())
        identity = user.to_identity()
        upload = await unit_env.get(UploadPhotoUseCase)
        get = await unit_env.get(GetPhotoUseCase)
        delete = await unit_env.get(DeletePhotoUseCase)

        # Act
        uploaded = await upload.execute(
            UploadPhotoRequest(
                identity=identity,
                filename="me.png",
                content_type="image/png",
                data=PNG,
            )
        )
        fetched = await get.execute(GetPhotoRequest(user_id=str(user.id)))
        await delete.execute(DeletePhotoRequest(identity=identity))

        # Assert
        assert uploaded.photo.owner_id == str(user.id)
        assert uploaded.photo.size == len(PNG)
        assert fetched.content_type == "image/png"
        assert fetched.filename == "me.png"
        assert fetched.data == PNG
        with pytest.raises(NotFoundError):
            await get.execute(GetPhotoRequest(user_id=str(user.id)))

    @pytest.mark.asyncio
    async def test_non_image_upload_is_rejected(self, unit_env: AsyncContainer):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.add(make_user())
        upload = await unit_env.get(UploadPhotoUseCase)

        with pytest.raises(BadRequestError):
            await upload.execute(
                UploadPhotoRequest(
                    identity=user.to_identity(),
                    filename="notes.txt",
                    content_type="text/plain",
                    data=b"hello",
                )
            )
