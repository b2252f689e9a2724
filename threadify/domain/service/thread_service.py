"""Thread domain service.

Owns the thread lifecycle (create, update, delete) and the comments
embedded in each thread. Every mutation checks existence first and
ownership second.
"""

from datetime import datetime
from uuid import uuid4

import logfire

from threadify.domain.error import NotFoundError
from threadify.domain.model import Comment, Thread
from threadify.domain.repository import ThreadRepository
from threadify.domain.value import CommentId, Identity, ThreadId

from .base import Service
from .ownership import OwnershipGuard


class ThreadService(Service):
    """Domain service for thread and comment operations."""

    def __init__(
        self, thread_repository: ThreadRepository, ownership_guard: OwnershipGuard
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            ownership_guard: Ownership guard
        """
        self.thread_repository = thread_repository
        self.ownership_guard = ownership_guard

    async def get_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Raises:
            NotFoundError: If thread not found
        """
        with logfire.span("thread_service.get_thread", thread_id=str(thread_id)):
            thread = await self.thread_repository.find_by_id(thread_id)
            if thread is None:
                logfire.warn("Thread not found", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))
            return thread

    async def list_threads(self, limit: int = 30, offset: int = 0) -> list[Thread]:
        """List threads, newest first."""
        with logfire.span("thread_service.list_threads", limit=limit, offset=offset):
            return await self.thread_repository.find_all(limit=limit, offset=offset)

    async def count_threads(self) -> int:
        return await self.thread_repository.count()

    async def create_thread(self, identity: Identity, text: str) -> Thread:
        """Create a thread owned by ``identity``.

        The owner's current username is copied onto the thread and kept
        even if the owner later renames.
        """
        with logfire.span(
            "thread_service.create_thread", user_id=str(identity.user_id)
        ):
            now = datetime.now()
            thread = Thread(
                id=ThreadId(uuid4()),
                text=text,
                owner_id=identity.user_id,
                username=identity.username,
                likes=[],
                comments=[],
                created_at=now,
                updated_at=now,
            )
            saved = await self.thread_repository.save(thread)
            logfire.info(
                "Thread created",
                thread_id=str(saved.id),
                owner_id=str(saved.owner_id),
            )
            return saved

    async def update_text(
        self, identity: Identity, thread_id: ThreadId, text: str
    ) -> Thread:
        """Replace a thread's text.

        Raises:
            NotFoundError: If thread not found
            NotAuthorizedError: If ``identity`` doesn't own the thread
        """
        with logfire.span(
            "thread_service.update_text",
            thread_id=str(thread_id),
            user_id=str(identity.user_id),
        ):
            thread = await self.get_thread(thread_id)
            self.ownership_guard.require_ownership(
                identity, thread.owner_id, "thread", thread.id
            )

            updated = await self.thread_repository.update_text(thread_id, text)
            if updated is None:
                # Deleted between the check and the write
                raise NotFoundError("Thread", str(thread_id))

            logfire.info("Thread updated", thread_id=str(thread_id))
            return updated

    async def delete_thread(self, identity: Identity, thread_id: ThreadId) -> None:
        """Delete a thread with all of its comments and likes.

        Raises:
            NotFoundError: If thread not found
            NotAuthorizedError: If ``identity`` doesn't own the thread
        """
        with logfire.span(
            "thread_service.delete_thread",
            thread_id=str(thread_id),
            user_id=str(identity.user_id),
        ):
            thread = await self.get_thread(thread_id)
            self.ownership_guard.require_ownership(
                identity, thread.owner_id, "thread", thread.id
            )

            if not await self.thread_repository.delete(thread_id):
                raise NotFoundError("Thread", str(thread_id))

            logfire.info(
                "Thread deleted",
                thread_id=str(thread_id),
                comment_count=len(thread.comments),
                like_count=len(thread.likes),
            )

    async def add_comment(
        self, identity: Identity, thread_id: ThreadId, text: str
    ) -> Comment:
        """Append a comment by ``identity`` to any existing thread.

        Raises:
            NotFoundError: If thread not found
        """
        with logfire.span(
            "thread_service.add_comment",
            thread_id=str(thread_id),
            user_id=str(identity.user_id),
        ):
            comment = Comment(
                id=CommentId(uuid4()),
                text=text,
                author_id=identity.user_id,
                username=identity.username,
                created_at=datetime.now(),
            )

            updated = await self.thread_repository.push_comment(thread_id, comment)
            if updated is None:
                logfire.warn("Comment on missing thread", thread_id=str(thread_id))
                raise NotFoundError("Thread", str(thread_id))

            logfire.info(
                "Comment added", thread_id=str(thread_id), comment_id=str(comment.id)
            )
            return comment

    async def remove_comment(
        self, identity: Identity, thread_id: ThreadId, comment_id: CommentId
    ) -> None:
        """Remove a comment written by ``identity``.

        Thread ownership is irrelevant; only the comment's author may remove
        it.

        Raises:
            NotFoundError: If the thread or the comment is not found
            NotAuthorizedError: If ``identity`` didn't write the comment
        """
        with logfire.span(
            "thread_service.remove_comment",
            thread_id=str(thread_id),
            comment_id=str(comment_id),
            user_id=str(identity.user_id),
        ):
            thread = await self.get_thread(thread_id)

            comment = thread.find_comment(comment_id)
            if comment is None:
                logfire.warn(
                    "Comment not found",
                    thread_id=str(thread_id),
                    comment_id=str(comment_id),
                )
                raise NotFoundError("Comment", str(comment_id))

            self.ownership_guard.require_ownership(
                identity, comment.author_id, "comment", comment.id
            )

            if not await self.thread_repository.pull_comment(thread_id, comment_id):
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment removed", thread_id=str(thread_id), comment_id=str(comment_id)
            )
