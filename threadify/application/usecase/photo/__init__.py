"""Profile photo use cases."""

from .delete_photo import DeletePhotoRequest, DeletePhotoUseCase
from .get_photo import GetPhotoRequest, GetPhotoResponse, GetPhotoUseCase
from .upload_photo import UploadPhotoRequest, UploadPhotoResponse, UploadPhotoUseCase

__all__ = [
    "DeletePhotoRequest",
    "DeletePhotoUseCase",
    "GetPhotoRequest",
    "GetPhotoResponse",
    "GetPhotoUseCase",
    "UploadPhotoRequest",
    "UploadPhotoResponse",
    "UploadPhotoUseCase",
]
