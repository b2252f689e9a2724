"""Authenticated identity."""

from typing import Optional

from threadify.domain.value.common import ValueObject
from threadify.domain.value.identifiers import UserId
from threadify.domain.value.types import Email, Username


class Identity(ValueObject):
    """The user a bearer token resolved to.

    Produced once per request by the token service and handed explicitly
    to every operation that needs to know who is acting.
    """

    user_id: UserId
    email: Email
    username: Optional[Username] = None
