"""Profile photo entity."""

from datetime import datetime

from pydantic import Field

from threadify.domain.model.common import DomainModel
from threadify.domain.value import PhotoId, UserId


class ProfilePhoto(DomainModel):
    """Metadata for an uploaded profile photo.

    The image bytes live in photo storage under the photo's ID.
    """

    id: PhotoId
    owner_id: UserId
    filename: str = Field(min_length=1, max_length=255)
    content_type: str
    size: int = Field(ge=0)
    uploaded_at: datetime = Field(default_factory=datetime.now)
