"""In-memory thread repository for testing.

Every write to a thread's comments or likes runs under that thread's lock,
with a suspension point between the read and the write so that unlocked
code would interleave under ``asyncio.gather``.
"""

import asyncio
from datetime import datetime
from typing import List, Optional

from threadify.domain.model import Comment, Like, LikeToggleResult, Thread
from threadify.domain.repository.thread import ThreadRepository
from threadify.domain.value import CommentId, ThreadId
from threadify.util.locks import KeyedLock


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}
        self._locks = KeyedLock()

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        return self._threads.get(thread_id)

    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Thread]:
        """Newest first; insertion order breaks timestamp ties."""
        ordered = sorted(
            enumerate(self._threads.values()),
            key=lambda pair: (pair[1].created_at, pair[0]),
            reverse=True,
        )
        return [thread for _, thread in ordered[offset : offset + limit]]

    async def count(self) -> int:
        return len(self._threads)

    async def save(self, thread: Thread) -> Thread:
        self._threads[thread.id] = thread
        return thread

    async def update_text(self, thread_id: ThreadId, text: str) -> Optional[Thread]:
        async with self._locks.hold(thread_id):
            thread = self._threads.get(thread_id)
            if not thread:
                return None
            await asyncio.sleep(0)

            updated = thread.model_copy(
                update={"text": text, "updated_at": datetime.now()}
            )
            self._threads[thread_id] = updated
            return updated

    async def delete(self, thread_id: ThreadId) -> bool:
        async with self._locks.hold(thread_id):
            return self._threads.pop(thread_id, None) is not None

    async def push_comment(
        self, thread_id: ThreadId, comment: Comment
    ) -> Optional[Thread]:
        async with self._locks.hold(thread_id):
            thread = self._threads.get(thread_id)
            if not thread:
                return None
            await asyncio.sleep(0)

            updated = thread.model_copy(
                update={"comments": [*thread.comments, comment]}
            )
            self._threads[thread_id] = updated
            return updated

    async def pull_comment(self, thread_id: ThreadId, comment_id: CommentId) -> bool:
        async with self._locks.hold(thread_id):
            thread = self._threads.get(thread_id)
            if not thread or not thread.find_comment(comment_id):
                return False
            await asyncio.sleep(0)

            self._threads[thread_id] = thread.model_copy(
                update={"comments": [c for c in thread.comments if c.id != comment_id]}
            )
            return True

    async def toggle_like(
        self, thread_id: ThreadId, like: Like
    ) -> Optional[LikeToggleResult]:
        async with self._locks.hold(thread_id):
            thread = self._threads.get(thread_id)
            if not thread:
                return None
            await asyncio.sleep(0)

            if thread.is_liked_by(like.liked_by_id):
                likes = [
                    other for other in thread.likes
                    if other.liked_by_id != like.liked_by_id
                ]
                liked = False
            else:
                likes = [*thread.likes, like]
                liked = True

            self._threads[thread_id] = thread.model_copy(update={"likes": likes})
            return LikeToggleResult(liked=liked, likes=likes)
