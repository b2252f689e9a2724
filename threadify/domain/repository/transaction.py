"""Side effects tied to the outcome of the request's transaction.

Repositories write inside one transaction that commits when the request
ends. Work outside the database, such as deleting photo files, is queued
here and runs only once that outcome is known.
"""

from collections.abc import Awaitable, Callable

import logfire

Action = Callable[[], Awaitable[None]]


class TransactionHooks:
    """Actions to run after the request's transaction commits or rolls back."""

    def __init__(self) -> None:
        self._on_commit: list[Action] = []
        self._on_rollback: list[Action] = []

    def on_commit(self, action: Action) -> None:
        """Queue ``action`` to run once the transaction has committed."""
        self._on_commit.append(action)

    def on_rollback(self, action: Action) -> None:
        """Queue ``action`` to run if the transaction rolls back."""
        self._on_rollback.append(action)

    async def committed(self) -> None:
        await self._run(self._on_commit, "commit")

    async def rolled_back(self) -> None:
        await self._run(self._on_rollback, "rollback")

    async def _run(self, actions: list[Action], outcome: str) -> None:
        pending = list(actions)
        self._on_commit.clear()
        self._on_rollback.clear()

        for action in pending:
            try:
                await action()
            except Exception:
                # The transaction outcome is final; remaining actions still run
                logfire.exception("Transaction hook failed", outcome=outcome)
