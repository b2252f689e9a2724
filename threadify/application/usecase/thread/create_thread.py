"""Create thread use case."""

from pydantic import BaseModel, Field

from threadify.application.usecase.views import ThreadView
from threadify.domain.service import ThreadService
from threadify.domain.value import Identity


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    identity: Identity
    text: str = Field(min_length=1, max_length=10000)


class CreateThreadResponse(BaseModel):
    """Create thread response."""

    thread: ThreadView


class CreateThreadUseCase:
    """Use case for starting a new thread owned by the caller."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateThreadRequest) -> CreateThreadResponse:
        thread = await self.thread_service.create_thread(
            request.identity, request.text
        )
        return CreateThreadResponse(thread=ThreadView.from_thread(thread))
