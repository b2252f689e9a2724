"""Session token domain service."""

import secrets

import logfire

from threadify.config import AuthSettings
from threadify.domain.error import InvalidTokenError, NotFoundError
from threadify.domain.repository import UserRepository
from threadify.domain.value import Identity, UserId

from .base import Service


class TokenService(Service):
    """Resolves bearer tokens to identities and manages the session token.

    Each user has at most one active token. Issuing a new one replaces the
    old value in a single storage update, so signing in on a new device
    immediately logs out every other session.
    """

    def __init__(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize token service.

        Args:
            user_repository: User repository
            auth_settings: Authentication settings
        """
        self.user_repository = user_repository
        self.auth_settings = auth_settings

    async def authenticate(self, token: str | None) -> Identity:
        """Resolve a bearer token to the identity of its owner.

        Args:
            token: Opaque token from the request

        Returns:
            Identity of the token's owner

        Raises:
            InvalidTokenError: If no user currently holds this token
        """
        with logfire.span("token_service.authenticate"):
            if not token:
                logfire.warn("Missing bearer token")
                raise InvalidTokenError()

            user = await self.user_repository.find_by_token(token)
            if user is None:
                logfire.warn("Bearer token did not match any user")
                raise InvalidTokenError()

            logfire.debug("Bearer token resolved", user_id=str(user.id))
            return user.to_identity()

    async def issue_token(self, user_id: UserId) -> str:
        """Generate a new token and install it as the user's only session.

        Args:
            user_id: User signing in

        Returns:
            The new token value

        Raises:
            NotFoundError: If the user doesn't exist
        """
        with logfire.span("token_service.issue_token", user_id=str(user_id)):
            token = secrets.token_hex(self.auth_settings.token_bytes)
            user = await self.user_repository.set_token(user_id, token)
            if user is None:
                logfire.warn("Token issued for missing user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            logfire.info("Session token rotated", user_id=str(user_id))
            return token

    async def revoke_token(self, user_id: UserId) -> None:
        """Clear the user's session token. Revoking twice is a no-op.

        Args:
            user_id: User signing out
        """
        with logfire.span("token_service.revoke_token", user_id=str(user_id)):
            await self.user_repository.set_token(user_id, None)
            logfire.info("Session token revoked", user_id=str(user_id))
