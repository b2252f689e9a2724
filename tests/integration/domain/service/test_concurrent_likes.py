"""Integration tests for concurrent like toggles against PostgreSQL."""

import asyncio

import pytest

from threadify.domain.repository import ThreadRepository, UserRepository
from threadify.domain.service import LikeService
from tests.conftest import make_thread, make_user


async def _seed(container):
    async with container() as request_container:
        user_repo = await request_container.get(UserRepository)
        thread_repo = await request_container.get(ThreadRepository)
        user = await user_repo.add(make_user())
        identity = user.to_identity()
        thread = await thread_repo.save(make_thread(identity))
    return identity, thread


async def _toggle_in_own_request(container, identity, thread_id):
    async with container() as request_container:
        like_service = await request_container.get(LikeService)
        return await like_service.toggle_like(identity, thread_id)


class TestConcurrentLikeToggles:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("requests", [2, 3, 5, 6])
    async def test_same_user_toggling_concurrently_alternates(
        self, integration_container, requests
    ):
        # Arrange
        identity, thread = await _seed(integration_container)

        # Act
        results = await asyncio.gather(
            *(
                _toggle_in_own_request(integration_container, identity, thread.id)
                for _ in range(requests)
            )
        )

        # Assert
        async with integration_container() as request_container:
            thread_repo = await request_container.get(ThreadRepository)
            stored = await thread_repo.find_by_id(thread.id)

        liked_by = [like.liked_by_id for like in stored.likes]
        assert len(liked_by) == requests % 2
        assert len(set(liked_by)) == len(liked_by)
        # Toggles are serialized by the thread row lock
        assert sum(result.liked for result in results) == (requests + 1) // 2

    @pytest.mark.asyncio
    async def test_different_users_liking_concurrently_all_count(
        self, integration_container
    ):
        # Arrange
        _, thread = await _seed(integration_container)
        likers = []
        for n in range(4):
            async with integration_container() as request_container:
                user_repo = await request_container.get(UserRepository)
                user = await user_repo.add(
                    make_user(email=f"liker{n}@example.com", username=f"liker{n}")
                )
                likers.append(user.to_identity())

        # Act
        await asyncio.gather(
            *(
                _toggle_in_own_request(integration_container, liker, thread.id)
                for liker in likers
            )
        )

        # Assert
        async with integration_container() as request_container:
            thread_repo = await request_container.get(ThreadRepository)
            stored = await thread_repo.find_by_id(thread.id)

        assert {like.liked_by_id for like in stored.likes} == {
            liker.user_id for liker in likers
        }
        assert len(stored.likes) == len(likers)
