"""Sign-in use case."""

import logfire
from pydantic import BaseModel

from threadify.application.usecase.views import UserView
from threadify.domain.error import InvalidCredentialsError
from threadify.domain.service import TokenService, UserService
from threadify.domain.value import Email


class SignInRequest(BaseModel):
    """Sign-in request."""

    email: str
    password: str


class SignedInUserView(UserView):
    """User view that carries the freshly issued session token."""

    token: str


class SignInResponse(BaseModel):
    """Sign-in response."""

    user: SignedInUserView


class SignInUseCase:
    """Use case for exchanging email and password for a session token.

    Signing in rotates the token, so any earlier session of the same user
    stops working.
    """

    def __init__(self, user_service: UserService, token_service: TokenService) -> None:
        """Initialize sign-in use case.

        Args:
            user_service: User domain service
            token_service: Token domain service
        """
        self.user_service = user_service
        self.token_service = token_service

    async def execute(self, request: SignInRequest) -> SignInResponse:
        """Execute sign-in flow.

        Steps:
        1. Verify email and password (via UserService)
        2. Issue a new token, replacing the old one (via TokenService)

        Raises:
            InvalidCredentialsError: If the email or password is wrong
        """
        try:
            email = Email(request.email)
        except ValueError:
            # A malformed email can't belong to any account
            raise InvalidCredentialsError()

        user = await self.user_service.verify_credentials(email, request.password)
        token = await self.token_service.issue_token(user.id)

        logfire.info("User signed in", user_id=str(user.id))

        view = UserView.from_user(user)
        return SignInResponse(user=SignedInUserView(**view.model_dump(), token=token))
