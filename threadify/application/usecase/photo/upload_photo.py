"""Upload profile photo use case."""

from pydantic import BaseModel

from threadify.application.usecase.views import PhotoView
from threadify.domain.service import PhotoService
from threadify.domain.value import Identity


class UploadPhotoRequest(BaseModel):
    """Upload profile photo request."""

    identity: Identity
    filename: str
    content_type: str
    data: bytes


class UploadPhotoResponse(BaseModel):
    """Upload profile photo response."""

    photo: PhotoView


class UploadPhotoUseCase:
    """Use case for replacing the caller's profile photo."""

    def __init__(self, photo_service: PhotoService) -> None:
        """Initialize upload photo use case.

        Args:
            photo_service: Photo domain service
        """
        self.photo_service = photo_service

    async def execute(self, request: UploadPhotoRequest) -> UploadPhotoResponse:
        """Execute upload flow.

        Raises:
            BadRequestError: If the upload is not an acceptable image
        """
        photo = await self.photo_service.upload(
            request.identity,
            request.filename,
            request.content_type,
            request.data,
        )
        return UploadPhotoResponse(photo=PhotoView.from_photo(photo))
