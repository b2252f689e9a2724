"""Profile photo domain service."""

from abc import ABC, abstractmethod
from datetime import datetime
from uuid import uuid4

import logfire

from threadify.config import StorageSettings
from threadify.domain.error import BadRequestError, NotFoundError
from threadify.domain.model import ProfilePhoto
from threadify.domain.repository import (
    PhotoRepository,
    TransactionHooks,
    UserRepository,
)
from threadify.domain.value import Identity, PhotoId, UserId

from .base import Service
from .ownership import OwnershipGuard


class PhotoStorage(ABC):
    """Abstract byte storage for photos, keyed by photo ID.

    Implementations live in the adapter layer.
    """

    @abstractmethod
    async def write(self, photo_id: PhotoId, data: bytes) -> None:
        pass

    @abstractmethod
    async def read(self, photo_id: PhotoId) -> bytes | None:
        pass

    @abstractmethod
    async def delete(self, photo_id: PhotoId) -> None:
        pass


class PhotoService(Service):
    """Domain service for profile photos.

    A user has at most one current photo. Uploading a new one replaces and
    deletes the previous photo.

    Photo bytes live outside the database transaction: a replaced photo's
    file is deleted only after the transaction commits, and a new file is
    deleted again if the transaction fails.
    """

    def __init__(
        self,
        photo_repository: PhotoRepository,
        user_repository: UserRepository,
        photo_storage: PhotoStorage,
        storage_settings: StorageSettings,
        ownership_guard: OwnershipGuard,
        transaction_hooks: TransactionHooks,
    ) -> None:
        """Initialize photo service.

        Args:
            photo_repository: Photo metadata repository
            user_repository: User repository
            photo_storage: Photo byte storage
            storage_settings: Storage settings (size limit)
            ownership_guard: Ownership guard
            transaction_hooks: Post-commit and rollback actions for this request
        """
        self.photo_repository = photo_repository
        self.user_repository = user_repository
        self.photo_storage = photo_storage
        self.storage_settings = storage_settings
        self.ownership_guard = ownership_guard
        self.transaction_hooks = transaction_hooks

    async def upload(
        self,
        identity: Identity,
        filename: str,
        content_type: str,
        data: bytes,
    ) -> ProfilePhoto:
        """Store a new profile photo for ``identity``.

        Raises:
            BadRequestError: If the upload is not an image, is empty, or is
                larger than the configured limit
        """
        with logfire.span(
            "photo_service.upload",
            user_id=str(identity.user_id),
            content_type=content_type,
            size=len(data),
        ):
            self._validate_upload(content_type, data)

            photo = ProfilePhoto(
                id=PhotoId(uuid4()),
                owner_id=identity.user_id,
                filename=filename or "photo",
                content_type=content_type,
                size=len(data),
                uploaded_at=datetime.now(),
            )

            await self.photo_storage.write(photo.id, data)
            self.transaction_hooks.on_rollback(self._file_remover(photo.id))
            try:
                saved = await self.photo_repository.save(photo)
                previous = await self.user_repository.swap_profile_photo(
                    identity.user_id, saved.id
                )
                if previous is not None:
                    await self._discard(previous)
            except Exception:
                logfire.warn(
                    "Photo upload failed, removing file", photo_id=str(photo.id)
                )
                await self.photo_storage.delete(photo.id)
                raise

            logfire.info(
                "Profile photo uploaded",
                user_id=str(identity.user_id),
                photo_id=str(saved.id),
                replaced=previous is not None,
            )
            return saved

    async def get_for_user(self, user_id: UserId) -> tuple[ProfilePhoto, bytes]:
        """Return a user's current photo metadata and bytes.

        Raises:
            NotFoundError: If the user or their photo is not found
        """
        with logfire.span("photo_service.get_for_user", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                raise NotFoundError("User", str(user_id))
            if user.profile_photo_id is None:
                raise NotFoundError("ProfilePhoto", str(user_id))

            photo = await self.photo_repository.find_by_id(user.profile_photo_id)
            data = await self.photo_storage.read(user.profile_photo_id)
            if photo is None or data is None:
                logfire.warn(
                    "Profile photo reference is dangling",
                    user_id=str(user_id),
                    photo_id=str(user.profile_photo_id),
                )
                raise NotFoundError("ProfilePhoto", str(user.profile_photo_id))

            return photo, data

    async def delete_current(self, identity: Identity) -> None:
        """Remove the caller's current profile photo.

        Raises:
            NotFoundError: If the caller has no photo
            NotAuthorizedError: If the referenced photo belongs to someone else
        """
        with logfire.span(
            "photo_service.delete_current", user_id=str(identity.user_id)
        ):
            user = await self.user_repository.find_by_id(identity.user_id)
            if user is None or user.profile_photo_id is None:
                raise NotFoundError("ProfilePhoto", str(identity.user_id))

            photo = await self.photo_repository.find_by_id(user.profile_photo_id)
            if photo is None:
                raise NotFoundError("ProfilePhoto", str(user.profile_photo_id))

            self.ownership_guard.require_ownership(
                identity, photo.owner_id, "profile photo", photo.id
            )

            await self.user_repository.swap_profile_photo(identity.user_id, None)
            await self._discard(photo.id)

            logfire.info(
                "Profile photo deleted",
                user_id=str(identity.user_id),
                photo_id=str(photo.id),
            )

    def _validate_upload(self, content_type: str, data: bytes) -> None:
        if not content_type.startswith("image/"):
            raise BadRequestError("Profile photo must be an image")
        if not data:
            raise BadRequestError("Profile photo is empty")
        if len(data) > self.storage_settings.max_photo_bytes:
            raise BadRequestError(
                f"Profile photo exceeds {self.storage_settings.max_photo_bytes} bytes"
            )

    async def _discard(self, photo_id: PhotoId) -> None:
        await self.photo_repository.delete(photo_id)
        self.transaction_hooks.on_commit(self._file_remover(photo_id))

    def _file_remover(self, photo_id: PhotoId):
        async def remove() -> None:
            await self.photo_storage.delete(photo_id)

        return remove
