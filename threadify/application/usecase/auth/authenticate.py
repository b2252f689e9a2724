"""Authenticate use case."""

from pydantic import BaseModel

from threadify.domain.service import TokenService
from threadify.domain.value import Identity


class AuthenticateRequest(BaseModel):
    """Authenticate request."""

    token: str | None  # Bearer token from the Authorization header


class AuthenticateUseCase:
    """Use case for resolving a bearer token to the acting identity.

    Runs once per request; the resulting identity is handed to the use
    case that serves the request.
    """

    def __init__(self, token_service: TokenService) -> None:
        """Initialize authenticate use case.

        Args:
            token_service: Token domain service
        """
        self.token_service = token_service

    async def execute(self, request: AuthenticateRequest) -> Identity:
        """Execute authentication.

        Raises:
            InvalidTokenError: If the token is missing, unknown or revoked
        """
        return await self.token_service.authenticate(request.token)
