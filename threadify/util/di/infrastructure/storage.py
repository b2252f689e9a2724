"""Photo storage infrastructure providers."""

from dishka import Scope, provide

from threadify.adapter.storage import FilesystemPhotoStorage
from threadify.config import StorageSettings
from threadify.domain.service import PhotoStorage
from threadify.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Photo storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing photos to the local filesystem."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_photo_storage(self, storage_settings: StorageSettings) -> PhotoStorage:
        """Provide filesystem photo storage."""
        return FilesystemPhotoStorage(root=storage_settings.photo_dir)
