"""Mock persistence providers for testing."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from threadify.domain.repository import (
    PhotoRepository,
    ThreadRepository,
    TransactionHooks,
    UserRepository,
)
from threadify.persistence.repository.inmemory import (
    InMemoryPhotoRepository,
    InMemoryThreadRepository,
    InMemoryUserRepository,
)
from threadify.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so that state survives across the requests of one test
    client; every test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    async def get_transaction_hooks(self) -> AsyncIterator[TransactionHooks]:
        """Provide transaction hooks, run when the request scope closes."""
        hooks = TransactionHooks()
        try:
            yield hooks
        except Exception:
            await hooks.rolled_back()
            raise
        await hooks.committed()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository()

    @provide(scope=Scope.APP)
    def get_photo_repository(self) -> PhotoRepository:
        """Provide in-memory photo repository."""
        return InMemoryPhotoRepository()
