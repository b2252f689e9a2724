"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from threadify.domain.model.comment import Comment
from threadify.domain.model.like import Like, LikeToggleResult
from threadify.domain.model.thread import Thread
from threadify.domain.value import CommentId, ThreadId


class ThreadRepository(ABC):
    """Repository for the Thread aggregate.

    Comments and likes are reachable only through their thread. Every
    operation that changes the embedded collections is atomic per thread:
    implementations serialize writers on the same thread so that a decision
    based on the current collection and the write that follows it cannot
    interleave with another writer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread (with its comments and likes) by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Thread]:
        """Find threads, newest first.

        Args:
            limit: Maximum number of threads to return
            offset: Number of threads to skip

        Returns:
            List of threads with their comments and likes
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all threads."""
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Insert a new thread together with any embedded children.

        Args:
            thread: The thread to insert

        Returns:
            The saved thread
        """
        pass

    @abstractmethod
    async def update_text(self, thread_id: ThreadId, text: str) -> Optional[Thread]:
        """Replace the thread's text and bump ``updated_at``.

        Only the text changes; owner and embedded collections are untouched.

        Args:
            thread_id: ID of the thread to update
            text: New text content

        Returns:
            Updated thread, or None if the thread doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, thread_id: ThreadId) -> bool:
        """Delete a thread and everything embedded in it.

        Args:
            thread_id: The thread ID to delete

        Returns:
            True if a thread was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def push_comment(
        self, thread_id: ThreadId, comment: Comment
    ) -> Optional[Thread]:
        """Append a comment to the thread's comment list.

        Args:
            thread_id: Parent thread ID
            comment: Comment to append

        Returns:
            Updated thread, or None if the thread doesn't exist
        """
        pass

    @abstractmethod
    async def pull_comment(self, thread_id: ThreadId, comment_id: CommentId) -> bool:
        """Remove a comment from the thread's comment list.

        Args:
            thread_id: Parent thread ID
            comment_id: Comment to remove

        Returns:
            True if a comment was removed, False otherwise
        """
        pass

    @abstractmethod
    async def toggle_like(
        self, thread_id: ThreadId, like: Like
    ) -> Optional[LikeToggleResult]:
        """Pull the liker's existing like if present, else push ``like``.

        The presence check and the write are one atomic step per thread.

        Args:
            thread_id: Thread being liked or unliked
            like: Like to insert when the user hasn't liked the thread yet

        Returns:
            Toggle outcome with the thread's resulting likes, or None if the
            thread doesn't exist
        """
        pass
