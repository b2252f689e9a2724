"""Delete thread use case."""

from uuid import UUID

from pydantic import BaseModel

from threadify.domain.service import ThreadService
from threadify.domain.value import Identity, ThreadId


class DeleteThreadRequest(BaseModel):
    """Delete thread request."""

    identity: Identity
    thread_id: str


class DeleteThreadUseCase:
    """Use case for deleting a thread with its comments and likes."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: DeleteThreadRequest) -> None:
        """Execute delete thread flow.

        Raises:
            NotFoundError: If thread not found
            NotAuthorizedError: If the caller doesn't own the thread
        """
        await self.thread_service.delete_thread(
            request.identity, ThreadId(UUID(request.thread_id))
        )
