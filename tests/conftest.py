"""Test configuration and fixtures."""

import os
from datetime import datetime
from uuid import uuid4

import pytest

from threadify.domain.model import Thread, User
from threadify.domain.value import Email, Identity, ThreadId, UserId, Username

# Cheapest bcrypt cost so hashing doesn't dominate test time
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "test")


def make_identity(username: str | None = "alice") -> Identity:
    """Identity for a user that need not exist in any repository."""
    user_id = UserId(uuid4())
    return Identity(
        user_id=user_id,
        email=Email(f"{user_id.hex[:8]}@example.com"),
        username=Username(username) if username else None,
    )


def make_user(
    email: str = "alice@example.com",
    hashed_password: str = "not-a-real-hash",
    username: str | None = "alice",
    token: str | None = None,
) -> User:
    now = datetime.now()
    return User(
        id=UserId(uuid4()),
        email=Email(email),
        username=Username(username) if username else None,
        hashed_password=hashed_password,
        token=token,
        created_at=now,
        updated_at=now,
    )


def make_thread(owner: Identity, text: str = "First thread") -> Thread:
    now = datetime.now()
    return Thread(
        id=ThreadId(uuid4()),
        text=text,
        owner_id=owner.user_id,
        username=owner.username,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def alice() -> Identity:
    return make_identity("alice")


@pytest.fixture
def bob() -> Identity:
    return make_identity("bob")
