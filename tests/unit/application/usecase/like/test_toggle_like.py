"""Unit tests for ToggleLikeUseCase."""

from uuid import uuid4

import pytest
from dishka import AsyncContainer

from threadify.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from threadify.domain.error import NotFoundError
from threadify.domain.repository import ThreadRepository
from tests.conftest import make_thread
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestToggleLikeUseCase:
    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env: AsyncContainer, alice, bob):
        # Arrange
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread(alice))
        use_case = await unit_env.get(ToggleLikeUseCase)
        request = ToggleLikeRequest(identity=bob, thread_id=str(thread.id))

        # Act
        liked = await use_case.execute(request)
        unliked = await use_case.execute(request)

        # Assert
        assert liked.liked is True
        assert [like.liked_by_id for like in liked.likes] == [str(bob.user_id)]
        assert unliked.liked is False
        assert unliked.likes == []

    @pytest.mark.asyncio
    async def test_owner_can_like_own_thread(self, unit_env: AsyncContainer, alice):
        thread_repo = await unit_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread(alice))
        use_case = await unit_env.get(ToggleLikeUseCase)

        response = await use_case.execute(
            ToggleLikeRequest(identity=alice, thread_id=str(thread.id))
        )

        assert response.liked is True

    @pytest.mark.asyncio
    async def test_missing_thread(self, unit_env: AsyncContainer, bob):
        use_case = await unit_env.get(ToggleLikeUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleLikeRequest(identity=bob, thread_id=str(uuid4()))
            )
