"""Like domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from threadify.domain.error import NotFoundError
from threadify.domain.model import Like, LikeToggleResult
from threadify.domain.repository import ThreadRepository
from threadify.domain.value import Identity, LikeId, ThreadId

from .base import Service


class LikeService(Service):
    """Domain service for toggling likes on threads.

    Toggling alternates between liked and not liked: after N toggles by
    the same user the thread holds N mod 2 likes from that user. The
    presence check and the write are delegated to one atomic repository
    operation, so concurrent toggles cannot both see "not liked" and both
    insert.
    """

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize like service.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    async def toggle_like(
        self, identity: Identity, thread_id: ThreadId
    ) -> LikeToggleResult:
        """Like the thread if ``identity`` hasn't yet, otherwise unlike it.

        Args:
            identity: Acting identity
            thread_id: Thread to like or unlike

        Returns:
            Whether the thread is now liked and its resulting likes

        Raises:
            NotFoundError: If thread not found
        """
        with logfire.span(
            "like_service.toggle_like",
            thread_id=str(thread_id),
            user_id=str(identity.user_id),
        ):
            candidate = Like(
                id=LikeId(uuid4()),
                liked_by_id=identity.user_id,
                created_at=datetime.now(),
            )

            result = await self.thread_repository.toggle_like(thread_id, candidate)
            if result is None:
                logfire.warn("Like on missing thread", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))

            logfire.info(
                "Like toggled",
                thread_id=str(thread_id),
                liked=result.liked,
                like_count=len(result.likes),
            )
            return result
