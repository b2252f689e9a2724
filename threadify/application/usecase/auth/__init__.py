"""Authentication and account use cases."""

from .authenticate import AuthenticateRequest, AuthenticateUseCase
from .change_password import ChangePasswordRequest, ChangePasswordUseCase
from .sign_in import SignInRequest, SignInResponse, SignInUseCase, SignedInUserView
from .sign_out import SignOutRequest, SignOutUseCase
from .sign_up import SignUpRequest, SignUpResponse, SignUpUseCase
from .update_profile import (
    UpdateProfileRequest,
    UpdateProfileResponse,
    UpdateProfileUseCase,
)

__all__ = [
    "AuthenticateRequest",
    "AuthenticateUseCase",
    "ChangePasswordRequest",
    "ChangePasswordUseCase",
    "SignedInUserView",
    "SignInRequest",
    "SignInResponse",
    "SignInUseCase",
    "SignOutRequest",
    "SignOutUseCase",
    "SignUpRequest",
    "SignUpResponse",
    "SignUpUseCase",
    "UpdateProfileRequest",
    "UpdateProfileResponse",
    "UpdateProfileUseCase",
]
