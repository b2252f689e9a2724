"""Integration test for the account flow with a real database."""

import pytest
from dishka import AsyncContainer

from threadify.application.usecase.auth import (
    AuthenticateRequest,
    AuthenticateUseCase,
    SignInRequest,
    SignInUseCase,
    SignUpRequest,
    SignUpUseCase,
)
from threadify.domain.error import BadRequestError, InvalidTokenError
from threadify.domain.repository import UserRepository
from threadify.domain.value import Email


class TestSignInIntegration:
    @pytest.mark.asyncio
    async def test_sign_up_sign_in_authenticate(self, integration_env: AsyncContainer):
        """Sign-up persists the user; sign-in stores a token that resolves back."""
        # Arrange
        sign_up = await integration_env.get(SignUpUseCase)
        sign_in = await integration_env.get(SignInUseCase)
        authenticate = await integration_env.get(AuthenticateUseCase)
        user_repo = await integration_env.get(UserRepository)

        # Act
        created = await sign_up.execute(
            SignUpRequest(
                email="alice@example.com",
                password="pw",
                password_confirmation="pw",
                username="alice",
            )
        )
        first = await sign_in.execute(
            SignInRequest(email="alice@example.com", password="pw")
        )
        second = await sign_in.execute(
            SignInRequest(email="ALICE@example.com", password="pw")
        )
        identity = await authenticate.execute(
            AuthenticateRequest(token=second.user.token)
        )

        # Assert
        assert str(identity.user_id) == created.user.id
        stored = await user_repo.find_by_email(Email("alice@example.com"))
        assert stored.token == second.user.token
        with pytest.raises(InvalidTokenError):
            await authenticate.execute(AuthenticateRequest(token=first.user.token))

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, integration_env: AsyncContainer):
        sign_up = await integration_env.get(SignUpUseCase)
        request = SignUpRequest(
            email="bob@example.com", password="pw", password_confirmation="pw"
        )
        await sign_up.execute(request)

        with pytest.raises(BadRequestError):
            await sign_up.execute(request)
