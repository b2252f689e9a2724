"""List threads use case."""

from pydantic import BaseModel, Field

from threadify.application.usecase.views import ThreadView
from threadify.domain.service import ThreadService


class ListThreadsRequest(BaseModel):
    """List threads request."""

    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListThreadsResponse(BaseModel):
    """List threads response."""

    threads: list[ThreadView]
    total: int
    limit: int
    offset: int


class ListThreadsUseCase:
    """Use case for listing threads, newest first, with pagination."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize list threads use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: ListThreadsRequest) -> ListThreadsResponse:
        threads = await self.thread_service.list_threads(
            limit=request.limit, offset=request.offset
        )
        total = await self.thread_service.count_threads()

        return ListThreadsResponse(
            threads=[ThreadView.from_thread(t) for t in threads],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
