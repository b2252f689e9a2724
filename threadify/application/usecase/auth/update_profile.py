"""Update profile use case."""

from pydantic import BaseModel

from threadify.application.usecase.views import UserView
from threadify.domain.error import BadRequestError
from threadify.domain.service import UserService
from threadify.domain.value import Identity, Username


class UpdateProfileRequest(BaseModel):
    """Update profile request."""

    identity: Identity
    username: str | None = None


class UpdateProfileResponse(BaseModel):
    """Update profile response."""

    user: UserView


class UpdateProfileUseCase:
    """Use case for changing the caller's display name.

    Threads and comments keep the name they were created with.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Execute update profile flow.

        Raises:
            BadRequestError: If the username is malformed
        """
        try:
            username = Username(request.username) if request.username else None
        except ValueError as e:
            raise BadRequestError(str(e))

        user = await self.user_service.update_username(
            request.identity.user_id, username
        )
        return UpdateProfileResponse(user=UserView.from_user(user))
