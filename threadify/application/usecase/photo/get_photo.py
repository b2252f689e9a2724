"""Get profile photo use case."""

from uuid import UUID

from pydantic import BaseModel

from threadify.domain.service import PhotoService
from threadify.domain.value import UserId


class GetPhotoRequest(BaseModel):
    """Get profile photo request."""

    user_id: str


class GetPhotoResponse(BaseModel):
    """Get profile photo response."""

    content_type: str
    filename: str
    data: bytes


class GetPhotoUseCase:
    """Use case for fetching any user's current profile photo."""

    def __init__(self, photo_service: PhotoService) -> None:
        self.photo_service = photo_service

    async def execute(self, request: GetPhotoRequest) -> GetPhotoResponse:
        """Execute get photo flow.

        Raises:
            NotFoundError: If the user or their photo is not found
        """
        photo, data = await self.photo_service.get_for_user(
            UserId(UUID(request.user_id))
        )
        return GetPhotoResponse(
            content_type=photo.content_type, filename=photo.filename, data=data
        )
