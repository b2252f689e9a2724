"""Delete profile photo use case."""

from pydantic import BaseModel

from threadify.domain.service import PhotoService
from threadify.domain.value import Identity


class DeletePhotoRequest(BaseModel):
    """Delete profile photo request."""

    identity: Identity


class DeletePhotoUseCase:
    """Use case for removing the caller's current profile photo."""

    def __init__(self, photo_service: PhotoService) -> None:
        self.photo_service = photo_service

    async def execute(self, request: DeletePhotoRequest) -> None:
        await self.photo_service.delete_current(request.identity)
