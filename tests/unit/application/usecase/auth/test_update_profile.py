"""Unit tests for UpdateProfileUseCase."""

import pytest
from dishka import AsyncContainer

from threadify.application.usecase.auth import (
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from threadify.domain.error import BadRequestError
from threadify.domain.repository import ThreadRepository, UserRepository
from tests.conftest import make_thread, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateProfileUseCase:
    @pytest.mark.asyncio
    async def test_rename_leaves_existing_threads_alone(self, unit_env: AsyncContainer):
        """Threads keep the username they were created with."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        use_case = await unit_env.get(UpdateProfileUseCase)
        user = await user_repo.add(make_user(username="alice"))
        identity = user.to_identity()
        thread = await thread_repo.save(make_thread(identity))

        # Act
        response = await use_case.execute(
            UpdateProfileRequest(identity=identity, username="  alicia ")
        )

        # Assert
        assert response.user.username == "alicia"
        stored = await thread_repo.find_by_id(thread.id)
        assert stored.username.root == "alice"

    @pytest.mark.asyncio
    async def test_clearing_username(self, unit_env: AsyncContainer):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(UpdateProfileUseCase)
        user = await user_repo.add(make_user(username="alice"))

        response = await use_case.execute(
            UpdateProfileRequest(identity=user.to_identity(), username=None)
        )

        assert response.user.username is None

    @pytest.mark.asyncio
    async def test_overlong_username_is_rejected(self, unit_env: AsyncContainer):
        user_repo = await unit_env.get(UserRepository)
        use_case = await unit_env.get(UpdateProfileUseCase)
        user = await user_repo.add(make_user())

        with pytest.raises(BadRequestError):
            await use_case.execute(
                UpdateProfileRequest(identity=user.to_identity(), username="x" * 51)
            )
