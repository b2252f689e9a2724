"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from threadify.application.usecase.views import LikeView
from threadify.domain.service import LikeService
from threadify.domain.value import Identity, ThreadId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    identity: Identity
    thread_id: str


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    liked: bool  # True if this call added the caller's like
    likes: list[LikeView]


class ToggleLikeUseCase:
    """Use case for liking or unliking a thread."""

    def __init__(self, like_service: LikeService) -> None:
        """Initialize toggle like use case.

        Args:
            like_service: Like domain service
        """
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If thread not found
        """
        result = await self.like_service.toggle_like(
            request.identity, ThreadId(UUID(request.thread_id))
        )
        return ToggleLikeResponse(
            liked=result.liked,
            likes=[LikeView.from_like(like) for like in result.likes],
        )
