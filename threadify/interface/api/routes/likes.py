"""Like routes (nested under threads)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Security
from fastapi.security import HTTPAuthorizationCredentials

from threadify.application.usecase.auth import AuthenticateUseCase
from threadify.application.usecase.like import (
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from threadify.interface.api.security import authenticate, bearer_scheme

router = APIRouter(prefix="/threads", tags=["likes"], route_class=DishkaRoute)


@router.post("/{thread_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    thread_id: UUID,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> ToggleLikeResponse:
    """Like the thread, or unlike it if the caller already does."""
    identity = await authenticate(authenticate_use_case, credentials)
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(identity=identity, thread_id=str(thread_id))
    )
