"""Authentication and account routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, Security, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from threadify.application.usecase.auth import (
    AuthenticateUseCase,
    ChangePasswordRequest,
    ChangePasswordUseCase,
    SignInRequest,
    SignInResponse,
    SignInUseCase,
    SignOutRequest,
    SignOutUseCase,
    SignUpRequest,
    SignUpResponse,
    SignUpUseCase,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)
from threadify.interface.api.security import authenticate, bearer_scheme

router = APIRouter(tags=["auth"], route_class=DishkaRoute)


class SignUpCredentials(BaseModel):
    email: str
    password: str | None = None
    password_confirmation: str | None = None
    username: str | None = None


class SignUpAPIRequest(BaseModel):
    """API request for signing up."""

    credentials: SignUpCredentials


class SignInCredentials(BaseModel):
    email: str
    password: str


class SignInAPIRequest(BaseModel):
    """API request for signing in."""

    credentials: SignInCredentials


class Passwords(BaseModel):
    old: str
    new: str | None = None


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing the password."""

    passwords: Passwords


class ProfilePatch(BaseModel):
    username: str | None = None


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the profile."""

    profile: ProfilePatch


@router.post(
    "/sign-up", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED
)
async def sign_up(
    request: SignUpAPIRequest,
    sign_up_use_case: FromDishka[SignUpUseCase],
) -> SignUpResponse:
    """Register a new account.

    The response never includes the password or its hash.
    """
    credentials = request.credentials
    return await sign_up_use_case.execute(
        SignUpRequest(
            email=credentials.email,
            password=credentials.password,
            password_confirmation=credentials.password_confirmation,
            username=credentials.username,
        )
    )


@router.post(
    "/sign-in", response_model=SignInResponse, status_code=status.HTTP_201_CREATED
)
async def sign_in(
    request: SignInAPIRequest,
    sign_in_use_case: FromDishka[SignInUseCase],
) -> SignInResponse:
    """Exchange email and password for a bearer token.

    Any token issued earlier to the same user stops working.
    """
    return await sign_in_use_case.execute(
        SignInRequest(
            email=request.credentials.email,
            password=request.credentials.password,
        )
    )


@router.patch("/change-password", status_code=status.HTTP_204_NO_CONTENT)
async def change_password(
    request: ChangePasswordAPIRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> Response:
    identity = await authenticate(authenticate_use_case, credentials)
    await change_password_use_case.execute(
        ChangePasswordRequest(
            identity=identity,
            old=request.passwords.old,
            new=request.passwords.new,
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    sign_out_use_case: FromDishka[SignOutUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> Response:
    """Revoke the caller's token."""
    identity = await authenticate(authenticate_use_case, credentials)
    await sign_out_use_case.execute(SignOutRequest(identity=identity))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/profile", response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> UpdateProfileResponse:
    """Change the caller's display name."""
    identity = await authenticate(authenticate_use_case, credentials)
    return await update_profile_use_case.execute(
        UpdateProfileRequest(identity=identity, username=request.profile.username)
    )
