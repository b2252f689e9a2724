"""Profile photo storage adapter."""

from .filesystem import FilesystemPhotoStorage, MockPhotoStorage

__all__ = ["FilesystemPhotoStorage", "MockPhotoStorage"]
