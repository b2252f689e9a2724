"""Update thread use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from threadify.application.usecase.views import ThreadView
from threadify.domain.service import ThreadService
from threadify.domain.value import Identity, ThreadId


class ThreadPatch(BaseModel):
    """Fields a thread owner may change.

    Anything else in the payload (owner, ID, timestamps) is ignored.
    """

    text: str = Field(min_length=1, max_length=10000)


class UpdateThreadRequest(BaseModel):
    """Update thread request."""

    identity: Identity
    thread_id: str
    patch: ThreadPatch


class UpdateThreadResponse(BaseModel):
    """Update thread response."""

    thread: ThreadView


class UpdateThreadUseCase:
    """Use case for editing a thread's text."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize update thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: UpdateThreadRequest) -> UpdateThreadResponse:
        """Execute update thread flow.

        Raises:
            NotFoundError: If thread not found
            NotAuthorizedError: If the caller doesn't own the thread
        """
        thread = await self.thread_service.update_text(
            request.identity,
            ThreadId(UUID(request.thread_id)),
            request.patch.text,
        )
        return UpdateThreadResponse(thread=ThreadView.from_thread(thread))
