"""Remove comment use case."""

from uuid import UUID

from pydantic import BaseModel

from threadify.domain.service import ThreadService
from threadify.domain.value import CommentId, Identity, ThreadId


class RemoveCommentRequest(BaseModel):
    """Remove comment request."""

    identity: Identity
    thread_id: str
    comment_id: str


class RemoveCommentUseCase:
    """Use case for removing a comment written by the caller."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: RemoveCommentRequest) -> None:
        """Execute remove comment flow.

        Raises:
            NotFoundError: If the thread or comment is not found
            NotAuthorizedError: If the caller didn't write the comment
        """
        await self.thread_service.remove_comment(
            request.identity,
            ThreadId(UUID(request.thread_id)),
            CommentId(UUID(request.comment_id)),
        )
