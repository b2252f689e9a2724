"""Unit tests for domain error to HTTP status mapping."""

import pytest

from threadify.domain.error import (
    BadRequestError,
    DomainError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotAuthorizedError,
    NotFoundError,
)
from threadify.interface.api.errors import status_for


@pytest.mark.parametrize(
    "error,expected",
    [
        (BadRequestError("bad"), 400),
        (InvalidCredentialsError(), 401),
        (InvalidTokenError(), 401),
        (NotAuthorizedError("thread", "t", "u"), 403),
        (NotFoundError("Thread", "t"), 404),
        (DomainError("other"), 400),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected
