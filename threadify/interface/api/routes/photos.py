"""Profile photo routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, File, Response, Security, UploadFile, status
from fastapi.security import HTTPAuthorizationCredentials

from threadify.application.usecase.auth import AuthenticateUseCase
from threadify.application.usecase.photo import (
    DeletePhotoRequest,
    DeletePhotoUseCase,
    GetPhotoRequest,
    GetPhotoUseCase,
    UploadPhotoRequest,
    UploadPhotoResponse,
    UploadPhotoUseCase,
)
from threadify.config import StorageSettings
from threadify.interface.api.security import authenticate, bearer_scheme

router = APIRouter(tags=["photos"], route_class=DishkaRoute)


@router.post(
    "/profile-photo",
    response_model=UploadPhotoResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_profile_photo(
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    upload_photo_use_case: FromDishka[UploadPhotoUseCase],
    storage_settings: FromDishka[StorageSettings],
    file: UploadFile = File(...),
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> UploadPhotoResponse:
    """Replace the caller's profile photo with the uploaded image.

    At most one byte past the size limit is read, enough for the upload to
    be rejected as oversized.
    """
    identity = await authenticate(authenticate_use_case, credentials)
    data = await file.read(storage_settings.max_photo_bytes + 1)
    return await upload_photo_use_case.execute(
        UploadPhotoRequest(
            identity=identity,
            filename=file.filename or "photo",
            content_type=file.content_type or "application/octet-stream",
            data=data,
        )
    )


@router.get("/users/{user_id}/profile-photo")
async def get_profile_photo(
    user_id: UUID,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    get_photo_use_case: FromDishka[GetPhotoUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> Response:
    """Return a user's current profile photo as raw image bytes."""
    await authenticate(authenticate_use_case, credentials)
    photo = await get_photo_use_case.execute(GetPhotoRequest(user_id=str(user_id)))
    return Response(content=photo.data, media_type=photo.content_type)


@router.delete("/profile-photo", status_code=status.HTTP_204_NO_CONTENT)
async def delete_profile_photo(
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    delete_photo_use_case: FromDishka[DeletePhotoUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> Response:
    identity = await authenticate(authenticate_use_case, credentials)
    await delete_photo_use_case.execute(DeletePhotoRequest(identity=identity))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
