"""Ownership guard for mutating operations."""

from uuid import UUID

import logfire

from threadify.domain.error import NotAuthorizedError
from threadify.domain.value import Identity, UserId

from .base import Service


class OwnershipGuard(Service):
    """Decides whether an identity may modify a resource.

    Callers must confirm the resource exists before asking, so a missing
    resource is reported as not found rather than forbidden.
    """

    def require_ownership(
        self,
        identity: Identity,
        owner_id: UserId | None,
        resource: str,
        resource_id: UUID,
    ) -> None:
        """Raise unless ``identity`` owns the resource.

        IDs are compared as UUID values, never as formatted strings. A
        resource without a recorded owner is owned by nobody.

        Args:
            identity: Acting identity
            owner_id: Owner recorded on the resource
            resource: Resource kind for the error message (e.g. "thread")
            resource_id: Resource ID for the error message

        Raises:
            NotAuthorizedError: If the identity is not the owner
        """
        if owner_id is None or identity.user_id != owner_id:
            logfire.warn(
                "Ownership check failed",
                resource=resource,
                resource_id=str(resource_id),
                user_id=str(identity.user_id),
            )
            raise NotAuthorizedError(
                resource, str(resource_id), str(identity.user_id)
            )
