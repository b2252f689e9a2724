"""Get thread use case."""

from uuid import UUID

from pydantic import BaseModel

from threadify.application.usecase.views import ThreadView
from threadify.domain.service import ThreadService
from threadify.domain.value import ThreadId


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str


class GetThreadResponse(BaseModel):
    """Get thread response."""

    thread: ThreadView


class GetThreadUseCase:
    """Use case for reading one thread with its comments and likes."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> GetThreadResponse:
        """Execute get thread flow.

        Raises:
            NotFoundError: If thread not found
        """
        thread = await self.thread_service.get_thread(
            ThreadId(UUID(request.thread_id))
        )
        return GetThreadResponse(thread=ThreadView.from_thread(thread))
