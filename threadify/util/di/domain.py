"""Domain layer DI providers."""

from dishka import Scope, provide

from threadify.adapter.security import BcryptPasswordHasher
from threadify.config import AuthSettings, StorageSettings
from threadify.domain.repository import (
    PhotoRepository,
    ThreadRepository,
    TransactionHooks,
    UserRepository,
)
from threadify.domain.service import (
    LikeService,
    OwnershipGuard,
    PasswordHasher,
    PhotoService,
    PhotoStorage,
    ThreadService,
    TokenService,
    UserService,
)
from threadify.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_hasher(self, auth_settings: AuthSettings) -> PasswordHasher:
        """Provide bcrypt password hasher."""
        return BcryptPasswordHasher(rounds=auth_settings.bcrypt_rounds)

    @provide(scope=Scope.APP)
    def get_ownership_guard(self) -> OwnershipGuard:
        """Provide ownership guard (stateless)."""
        return OwnershipGuard()

    @provide
    def get_token_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> TokenService:
        """Provide session token domain service."""
        return TokenService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, password_hasher=password_hasher
        )

    @provide
    def get_thread_service(
        self, thread_repository: ThreadRepository, ownership_guard: OwnershipGuard
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository, ownership_guard=ownership_guard
        )

    @provide
    def get_like_service(self, thread_repository: ThreadRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(thread_repository=thread_repository)

    @provide
    def get_photo_service(
        self,
        photo_repository: PhotoRepository,
        user_repository: UserRepository,
        photo_storage: PhotoStorage,
        storage_settings: StorageSettings,
        ownership_guard: OwnershipGuard,
        transaction_hooks: TransactionHooks,
    ) -> PhotoService:
        """Provide profile photo domain service."""
        return PhotoService(
            photo_repository=photo_repository,
            user_repository=user_repository,
            photo_storage=photo_storage,
            storage_settings=storage_settings,
            ownership_guard=ownership_guard,
            transaction_hooks=transaction_hooks,
        )
