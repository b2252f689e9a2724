"""Add comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from threadify.application.usecase.views import CommentView
from threadify.domain.service import ThreadService
from threadify.domain.value import Identity, ThreadId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    identity: Identity
    thread_id: str
    text: str = Field(min_length=1, max_length=10000)


class AddCommentResponse(BaseModel):
    """Add comment response."""

    comment: CommentView


class AddCommentUseCase:
    """Use case for commenting on a thread.

    Any authenticated user may comment on any thread.
    """

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize add comment use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            NotFoundError: If thread not found
        """
        comment = await self.thread_service.add_comment(
            request.identity, ThreadId(UUID(request.thread_id)), request.text
        )
        return AddCommentResponse(comment=CommentView.from_comment(comment))
