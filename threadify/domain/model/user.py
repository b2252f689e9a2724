"""User aggregate root.

Users sign up with email and password and hold at most one active
session token at a time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threadify.domain.model.common import DomainModel
from threadify.domain.value import Email, Identity, PhotoId, UserId, Username


class User(DomainModel):
    """User aggregate root.

    ``token`` is the single active session credential. Installing a new
    value invalidates the previous one; ``None`` means signed out.
    """

    id: UserId
    email: Email
    username: Optional[Username] = None
    hashed_password: str = Field(repr=False)
    token: Optional[str] = Field(default=None, repr=False)
    profile_photo_id: Optional[PhotoId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def to_identity(self) -> Identity:
        """Identity view of this user for downstream authorization."""
        return Identity(user_id=self.id, email=self.email, username=self.username)
