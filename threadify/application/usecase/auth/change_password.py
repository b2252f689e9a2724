"""Change password use case."""

from pydantic import BaseModel

from threadify.domain.service import UserService
from threadify.domain.value import Identity


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    identity: Identity
    old: str
    new: str | None = None


class ChangePasswordUseCase:
    """Use case for changing the caller's password.

    The session token is left untouched.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ChangePasswordRequest) -> None:
        """Execute change password flow.

        Raises:
            InvalidCredentialsError: If the old password is wrong or the new
                one is missing
        """
        await self.user_service.change_password(
            request.identity.user_id, request.old, request.new
        )
