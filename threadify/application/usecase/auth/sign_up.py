"""Sign-up use case."""

from pydantic import BaseModel

from threadify.application.usecase.views import UserView
from threadify.domain.error import BadRequestError
from threadify.domain.service import UserService
from threadify.domain.value import Email, Username


class SignUpRequest(BaseModel):
    """Sign-up request."""

    email: str
    password: str | None = None
    password_confirmation: str | None = None
    username: str | None = None


class SignUpResponse(BaseModel):
    """Sign-up response."""

    user: UserView


class SignUpUseCase:
    """Use case for registering a new account with email and password."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize sign-up use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: SignUpRequest) -> SignUpResponse:
        """Execute sign-up flow.

        Raises:
            BadRequestError: If the email or username is malformed, the
                password is missing or unconfirmed, or the email is taken
        """
        try:
            email = Email(request.email)
            username = Username(request.username) if request.username else None
        except ValueError as e:
            raise BadRequestError(str(e))

        user = await self.user_service.register(
            email=email,
            password=request.password,
            password_confirmation=request.password_confirmation,
            username=username,
        )
        return SignUpResponse(user=UserView.from_user(user))
