"""Unit tests for TransactionHooks."""

import pytest

from threadify.domain.repository import TransactionHooks


def _recorder(log, name):
    async def action():
        log.append(name)

    return action


class TestTransactionHooks:
    @pytest.mark.asyncio
    async def test_commit_runs_only_commit_actions_in_order(self):
        # Arrange
        hooks = TransactionHooks()
        log = []
        hooks.on_commit(_recorder(log, "first"))
        hooks.on_rollback(_recorder(log, "undo"))
        hooks.on_commit(_recorder(log, "second"))

        # Act
        await hooks.committed()

        # Assert
        assert log == ["first", "second"]

    @pytest.mark.asyncio
    async def test_rollback_runs_only_rollback_actions(self):
        hooks = TransactionHooks()
        log = []
        hooks.on_commit(_recorder(log, "cleanup"))
        hooks.on_rollback(_recorder(log, "undo"))

        await hooks.rolled_back()

        assert log == ["undo"]

    @pytest.mark.asyncio
    async def test_actions_run_at_most_once(self):
        hooks = TransactionHooks()
        log = []
        hooks.on_commit(_recorder(log, "cleanup"))

        await hooks.committed()
        await hooks.committed()
        await hooks.rolled_back()

        assert log == ["cleanup"]

    @pytest.mark.asyncio
    async def test_failing_action_does_not_stop_the_rest(self):
        # Arrange
        hooks = TransactionHooks()
        log = []

        async def broken():
            raise OSError("disk gone")

        hooks.on_commit(broken)
        hooks.on_commit(_recorder(log, "after"))

        # Act
        await hooks.committed()

        # Assert
        assert log == ["after"]
