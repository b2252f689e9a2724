"""Unit tests for UserService."""

import pytest

from threadify.domain.error import (
    BadRequestError,
    InvalidCredentialsError,
    NotFoundError,
)
from threadify.domain.repository import UserRepository
from threadify.domain.service import PasswordHasher, UserService
from threadify.domain.value import Email, Username
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_stores_hash_not_plaintext(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        hasher = await unit_env.get(PasswordHasher)

        # Act
        user = await user_service.register(
            Email("Alice@Example.com"), "s3cret!", "s3cret!", Username("alice")
        )

        # Assert
        assert user.email.root == "alice@example.com"
        assert user.hashed_password != "s3cret!"
        assert "s3cret!" not in repr(user)
        assert await hasher.verify("s3cret!", user.hashed_password)
        assert user.token is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "password,confirmation",
        [(None, None), ("", ""), ("s3cret!", "different"), ("s3cret!", None)],
    )
    async def test_missing_or_unconfirmed_password_is_rejected(
        self, unit_env, password, confirmation
    ):
        user_service = await unit_env.get(UserService)

        with pytest.raises(BadRequestError):
            await user_service.register(
                Email("alice@example.com"), password, confirmation
            )

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register(Email("alice@example.com"), "pw", "pw")

        # Act & Assert - email match ignores case
        with pytest.raises(BadRequestError, match="already registered"):
            await user_service.register(Email("ALICE@example.com"), "pw", "pw")


class TestVerifyCredentials:
    """Tests for verify_credentials method."""

    @pytest.mark.asyncio
    async def test_correct_password_returns_user(self, unit_env):
        user_service = await unit_env.get(UserService)
        registered = await user_service.register(
            Email("alice@example.com"), "pw", "pw"
        )

        user = await user_service.verify_credentials(Email("alice@example.com"), "pw")

        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_alike(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register(Email("alice@example.com"), "pw", "pw")

        # Act
        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await user_service.verify_credentials(Email("alice@example.com"), "nope")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await user_service.verify_credentials(Email("nobody@example.com"), "pw")

        # Assert
        assert str(wrong_password.value) == str(unknown_email.value)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "email,password",
        [
            ("alice@example.com", "nope"),
            ("nobody@example.com", "pw"),
            ("alice@example.com", ""),
        ],
    )
    async def test_every_rejection_runs_one_verification(
        self, unit_env, monkeypatch, email, password
    ):
        # Arrange
        user_service = await unit_env.get(UserService)
        hasher = await unit_env.get(PasswordHasher)
        await user_service.register(Email("alice@example.com"), "pw", "pw")
        real_verify = hasher.verify
        digests = []

        async def counting_verify(plaintext, digest):
            digests.append(digest)
            return await real_verify(plaintext, digest)

        monkeypatch.setattr(hasher, "verify", counting_verify)

        # Act
        with pytest.raises(InvalidCredentialsError):
            await user_service.verify_credentials(Email(email), password)

        # Assert
        assert len(digests) == 1

    @pytest.mark.asyncio
    async def test_unknown_email_verifies_against_dummy_digest(
        self, unit_env, monkeypatch
    ):
        user_service = await unit_env.get(UserService)
        hasher = await unit_env.get(PasswordHasher)
        digests = []

        async def recording_verify(plaintext, digest):
            digests.append(digest)
            return False

        monkeypatch.setattr(hasher, "verify", recording_verify)

        with pytest.raises(InvalidCredentialsError):
            await user_service.verify_credentials(Email("nobody@example.com"), "pw")

        assert digests == [hasher.dummy_digest]
        assert hasher.dummy_digest.startswith("$2b$")


class TestChangePassword:
    """Tests for change_password method."""

    @pytest.mark.asyncio
    async def test_new_password_replaces_old(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user = await user_service.register(Email("alice@example.com"), "old", "old")

        # Act
        await user_service.change_password(user.id, "old", "new")

        # Assert
        await user_service.verify_credentials(Email("alice@example.com"), "new")
        with pytest.raises(InvalidCredentialsError):
            await user_service.verify_credentials(Email("alice@example.com"), "old")

    @pytest.mark.asyncio
    async def test_keeps_session_token(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_service.register(Email("alice@example.com"), "old", "old")
        await user_repo.set_token(user.id, "a" * 32)

        await user_service.change_password(user.id, "old", "new")

        assert (await user_repo.find_by_token("a" * 32)).id == user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("old,new", [("wrong", "new"), ("old", None), ("old", "")])
    async def test_wrong_old_or_missing_new_is_rejected(self, unit_env, old, new):
        user_service = await unit_env.get(UserService)
        user = await user_service.register(Email("alice@example.com"), "old", "old")

        with pytest.raises(InvalidCredentialsError):
            await user_service.change_password(user.id, old, new)

        await user_service.verify_credentials(Email("alice@example.com"), "old")


class TestUpdateUsername:
    @pytest.mark.asyncio
    async def test_updates_username(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.add(make_user(username="alice"))

        updated = await user_service.update_username(user.id, Username("alicia"))

        assert updated.username == Username("alicia")
        assert updated.hashed_password == user.hashed_password

    @pytest.mark.asyncio
    async def test_missing_user_raises_not_found(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.update_username(make_user().id, Username("x"))
