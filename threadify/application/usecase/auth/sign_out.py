"""Sign-out use case."""

from pydantic import BaseModel

from threadify.domain.service import TokenService
from threadify.domain.value import Identity


class SignOutRequest(BaseModel):
    """Sign-out request."""

    identity: Identity


class SignOutUseCase:
    """Use case for revoking the caller's session token."""

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    async def execute(self, request: SignOutRequest) -> None:
        await self.token_service.revoke_token(request.identity.user_id)
