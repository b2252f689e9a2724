"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from threadify.domain.error import (
    BadRequestError,
    InvalidCredentialsError,
    NotFoundError,
)
from threadify.domain.model import User
from threadify.domain.repository import UserRepository
from threadify.domain.value import Email, UserId, Username

from .base import Service
from .password_service import PasswordHasher


class UserService(Service):
    """Domain service for user credentials and profile."""

    def __init__(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            password_hasher: Password hashing adapter
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def register(
        self,
        email: Email,
        password: str | None,
        password_confirmation: str | None,
        username: Username | None = None,
    ) -> User:
        """Create a new user with a hashed password.

        Args:
            email: Sign-up email
            password: Chosen password
            password_confirmation: Must equal ``password``
            username: Optional display name

        Returns:
            The created user

        Raises:
            BadRequestError: If the password is missing, the confirmation
                doesn't match, or the email is already registered
        """
        with logfire.span("user_service.register", email=email.root):
            if not password or password != password_confirmation:
                logfire.warn("Sign-up password missing or unconfirmed")
                raise BadRequestError(
                    "Password is required and must match password_confirmation"
                )

            if await self.user_repository.find_by_email(email):
                logfire.warn("Sign-up with registered email", email=email.root)
                raise BadRequestError("Email is already registered")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                email=email,
                username=username,
                hashed_password=await self.password_hasher.hash(password),
                token=None,
                created_at=now,
                updated_at=now,
            )

            try:
                saved = await self.user_repository.add(user)
            except IntegrityError:
                # Lost a race with a concurrent sign-up for the same email
                logfire.warn("Duplicate sign-up attempt", email=email.root)
                raise BadRequestError("Email is already registered")

            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def verify_credentials(self, email: Email, password: str) -> User:
        """Return the user whose email and password match.

        Unknown email and wrong password fail identically, and both pay for
        exactly one password verification.

        Raises:
            InvalidCredentialsError: If the pair doesn't match a user
        """
        with logfire.span("user_service.verify_credentials", email=email.root):
            user = await self.user_repository.find_by_email(email)
            digest = (
                user.hashed_password
                if user is not None
                else self.password_hasher.dummy_digest
            )
            matches = await self.password_hasher.verify(password, digest)

            if user is None or not password or not matches:
                logfire.warn("Sign-in rejected", email=email.root)
                raise InvalidCredentialsError()

            return user

    async def change_password(
        self, user_id: UserId, old_password: str, new_password: str | None
    ) -> None:
        """Replace the user's password after checking the current one.

        Raises:
            InvalidCredentialsError: If the old password is wrong or the new
                password is missing
            NotFoundError: If the user doesn't exist
        """
        with logfire.span("user_service.change_password", user_id=str(user_id)):
            user = await self.get_by_id(user_id)

            correct = await self.password_hasher.verify(
                old_password, user.hashed_password
            )
            if not new_password or not correct:
                logfire.warn("Password change rejected", user_id=str(user_id))
                raise InvalidCredentialsError()

            digest = await self.password_hasher.hash(new_password)
            if await self.user_repository.update_password(user_id, digest) is None:
                raise NotFoundError("User", str(user_id))

            logfire.info("Password changed", user_id=str(user_id))

    async def update_username(
        self, user_id: UserId, username: Username | None
    ) -> User:
        """Change the user's display name.

        Threads and comments created earlier keep the name they were
        created with.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        with logfire.span("user_service.update_username", user_id=str(user_id)):
            user = await self.user_repository.update_username(user_id, username)
            if user is None:
                logfire.warn("Username update for missing user", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            logfire.info("Username updated", user_id=str(user_id))
            return user
