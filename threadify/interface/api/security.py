"""Bearer token extraction for authenticated routes."""

from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from threadify.application.usecase.auth import (
    AuthenticateRequest,
    AuthenticateUseCase,
)
from threadify.domain.value import Identity

# auto_error=False so a missing header reaches the authenticator and fails
# with the same 401 as an unknown token
bearer_scheme = HTTPBearer(auto_error=False)


async def authenticate(
    use_case: AuthenticateUseCase,
    credentials: HTTPAuthorizationCredentials | None,
) -> Identity:
    """Resolve the request's ``Authorization: Bearer`` header to an identity.

    Raises:
        InvalidTokenError: If the header is missing or the token is unknown
    """
    token = credentials.credentials if credentials else None
    return await use_case.execute(AuthenticateRequest(token=token))
