"""PostgreSQL implementation of Thread repository.

Each thread is stored as a root row plus ordered child rows for its
comments and likes. Writers that change the child collections first lock
the root row with ``SELECT ... FOR UPDATE``; the lock is held until the
request transaction commits, so writers on the same thread run one at a
time while writers on different threads never block each other.
"""

from collections import defaultdict
from typing import Any, List, Optional
from uuid import UUID

import logfire
from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from threadify.domain.model import Comment, Like, LikeToggleResult, Thread
from threadify.domain.repository import ThreadRepository
from threadify.domain.value import CommentId, ThreadId
from threadify.persistence.mappers import (
    comment_to_dict,
    like_to_dict,
    row_to_like,
    row_to_thread,
    thread_to_dict,
)
from threadify.persistence.tables import (
    thread_comments_table,
    thread_likes_table,
    threads_table,
)


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_children(
        self, table, thread_ids: list[UUID]
    ) -> dict[UUID, list[dict[str, Any]]]:
        """Fetch child rows for multiple threads in a single query.

        Returns:
            Dict mapping thread_id -> rows in position order
        """
        if not thread_ids:
            return {}

        stmt = (
            select(table)
            .where(table.c.thread_id.in_(thread_ids))
            .order_by(table.c.thread_id, table.c.position)
        )
        result = await self.session.execute(stmt)

        children: dict[UUID, list[dict[str, Any]]] = defaultdict(list)
        for row in result.mappings():
            children[row["thread_id"]].append(dict(row))
        return children

    async def _assemble(self, rows: list[dict[str, Any]]) -> List[Thread]:
        thread_ids = [row["id"] for row in rows]
        comments = await self._fetch_children(thread_comments_table, thread_ids)
        likes = await self._fetch_children(thread_likes_table, thread_ids)
        return [
            row_to_thread(row, comments.get(row["id"], []), likes.get(row["id"], []))
            for row in rows
        ]

    async def _lock(self, thread_id: ThreadId) -> bool:
        """Lock the thread row for the rest of the transaction.

        Returns:
            True if the thread exists
        """
        stmt = (
            select(threads_table.c.id)
            .where(threads_table.c.id == thread_id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def _next_position(self, table, thread_id: ThreadId) -> int:
        stmt = select(func.coalesce(func.max(table.c.position) + 1, 0)).where(
            table.c.thread_id == thread_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        with logfire.span("thread_repository.find_by_id", thread_id=str(thread_id)):
            stmt = select(threads_table).where(threads_table.c.id == thread_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            if not row:
                return None

            threads = await self._assemble([dict(row)])
            return threads[0]

    async def find_all(self, limit: int = 30, offset: int = 0) -> List[Thread]:
        with logfire.span("thread_repository.find_all", limit=limit, offset=offset):
            stmt = (
                select(threads_table)
                .order_by(threads_table.c.created_at.desc(), threads_table.c.id)
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return await self._assemble([dict(row) for row in result.mappings()])

    async def count(self) -> int:
        stmt = select(func.count()).select_from(threads_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, thread: Thread) -> Thread:
        with logfire.span("thread_repository.save", thread_id=str(thread.id)):
            await self.session.execute(
                insert(threads_table).values(**thread_to_dict(thread))
            )
            if thread.comments:
                await self.session.execute(
                    insert(thread_comments_table),
                    [
                        comment_to_dict(c, thread.id, i)
                        for i, c in enumerate(thread.comments)
                    ],
                )
            if thread.likes:
                await self.session.execute(
                    insert(thread_likes_table),
                    [like_to_dict(like, thread.id, i) for i, like in enumerate(thread.likes)],
                )
            await self.session.flush()
            return thread

    async def update_text(self, thread_id: ThreadId, text: str) -> Optional[Thread]:
        with logfire.span("thread_repository.update_text", thread_id=str(thread_id)):
            stmt = (
                threads_table.update()
                .where(threads_table.c.id == thread_id)
                .values(text=text, updated_at=func.now())
                .returning(threads_table)
            )
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            await self.session.flush()
            if not row:
                return None

            threads = await self._assemble([dict(row)])
            return threads[0]

    async def delete(self, thread_id: ThreadId) -> bool:
        """Delete the thread; child rows go with it via ON DELETE CASCADE."""
        with logfire.span("thread_repository.delete", thread_id=str(thread_id)):
            stmt = (
                delete(threads_table)
                .where(threads_table.c.id == thread_id)
                .returning(threads_table.c.id)
            )
            result = await self.session.execute(stmt)
            deleted = result.scalar_one_or_none() is not None
            await self.session.flush()
            return deleted

    async def push_comment(
        self, thread_id: ThreadId, comment: Comment
    ) -> Optional[Thread]:
        with logfire.span("thread_repository.push_comment", thread_id=str(thread_id)):
            if not await self._lock(thread_id):
                return None

            position = await self._next_position(thread_comments_table, thread_id)
            await self.session.execute(
                insert(thread_comments_table).values(
                    **comment_to_dict(comment, thread_id, position)
                )
            )
            await self.session.flush()
            return await self.find_by_id(thread_id)

    async def pull_comment(self, thread_id: ThreadId, comment_id: CommentId) -> bool:
        with logfire.span(
            "thread_repository.pull_comment",
            thread_id=str(thread_id),
            comment_id=str(comment_id),
        ):
            if not await self._lock(thread_id):
                return False

            stmt = (
                delete(thread_comments_table)
                .where(
                    thread_comments_table.c.thread_id == thread_id,
                    thread_comments_table.c.id == comment_id,
                )
                .returning(thread_comments_table.c.id)
            )
            result = await self.session.execute(stmt)
            removed = result.scalar_one_or_none() is not None
            await self.session.flush()
            return removed

    async def toggle_like(
        self, thread_id: ThreadId, like: Like
    ) -> Optional[LikeToggleResult]:
        """Pull-if-present else push, under the thread row lock."""
        with logfire.span(
            "thread_repository.toggle_like",
            thread_id=str(thread_id),
            user_id=str(like.liked_by_id),
        ):
            if not await self._lock(thread_id):
                return None

            stmt = (
                delete(thread_likes_table)
                .where(
                    thread_likes_table.c.thread_id == thread_id,
                    thread_likes_table.c.liked_by_id == like.liked_by_id,
                )
                .returning(thread_likes_table.c.id)
            )
            result = await self.session.execute(stmt)
            liked = result.scalar_one_or_none() is None

            if liked:
                position = await self._next_position(thread_likes_table, thread_id)
                await self.session.execute(
                    insert(thread_likes_table).values(
                        **like_to_dict(like, thread_id, position)
                    )
                )
            await self.session.flush()

            likes = await self._fetch_children(thread_likes_table, [thread_id])
            return LikeToggleResult(
                liked=liked,
                likes=[row_to_like(row) for row in likes.get(thread_id, [])],
            )
