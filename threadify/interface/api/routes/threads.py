"""Thread routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, Security, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from threadify.application.usecase.auth import AuthenticateUseCase
from threadify.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
    DeleteThreadRequest,
    DeleteThreadUseCase,
    GetThreadRequest,
    GetThreadResponse,
    GetThreadUseCase,
    ListThreadsRequest,
    ListThreadsResponse,
    ListThreadsUseCase,
    ThreadPatch,
    UpdateThreadRequest,
    UpdateThreadUseCase,
)
from threadify.domain.error import BadRequestError
from threadify.interface.api.security import authenticate, bearer_scheme

router = APIRouter(prefix="/threads", tags=["threads"], route_class=DishkaRoute)


class ThreadBody(BaseModel):
    text: str = Field(min_length=1, max_length=10000)


class CreateThreadAPIRequest(BaseModel):
    """API request for creating a thread."""

    thread: ThreadBody


class UpdateThreadAPIRequest(BaseModel):
    """API request for updating a thread.

    Only ``text`` is read from the payload.
    """

    thread: ThreadPatch


@router.get("", response_model=ListThreadsResponse)
async def list_threads(
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    list_threads_use_case: FromDishka[ListThreadsUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
    limit: int = 30,
    offset: int = 0,
) -> ListThreadsResponse:
    """List threads, newest first.

    Raises:
        BadRequestError: If ``limit`` is outside 1..100 or ``offset`` is negative
    """
    await authenticate(authenticate_use_case, credentials)

    if not 1 <= limit <= 100:
        raise BadRequestError("limit must be between 1 and 100")
    if offset < 0:
        raise BadRequestError("offset must not be negative")

    return await list_threads_use_case.execute(
        ListThreadsRequest(limit=limit, offset=offset)
    )


@router.get("/{thread_id}", response_model=GetThreadResponse)
async def get_thread(
    thread_id: UUID,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    get_thread_use_case: FromDishka[GetThreadUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> GetThreadResponse:
    await authenticate(authenticate_use_case, credentials)
    return await get_thread_use_case.execute(GetThreadRequest(thread_id=str(thread_id)))


@router.post(
    "", response_model=CreateThreadResponse, status_code=status.HTTP_201_CREATED
)
async def create_thread(
    request: CreateThreadAPIRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    create_thread_use_case: FromDishka[CreateThreadUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> CreateThreadResponse:
    """Start a new thread owned by the caller."""
    identity = await authenticate(authenticate_use_case, credentials)
    return await create_thread_use_case.execute(
        CreateThreadRequest(identity=identity, text=request.thread.text)
    )


@router.patch("/{thread_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_thread(
    thread_id: UUID,
    request: UpdateThreadAPIRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    update_thread_use_case: FromDishka[UpdateThreadUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> Response:
    """Edit a thread's text. Only the owner may do this."""
    identity = await authenticate(authenticate_use_case, credentials)
    await update_thread_use_case.execute(
        UpdateThreadRequest(
            identity=identity, thread_id=str(thread_id), patch=request.thread
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{thread_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_thread(
    thread_id: UUID,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    delete_thread_use_case: FromDishka[DeleteThreadUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> Response:
    """Delete a thread with its comments and likes. Only the owner may do this."""
    identity = await authenticate(authenticate_use_case, credentials)
    await delete_thread_use_case.execute(
        DeleteThreadRequest(identity=identity, thread_id=str(thread_id))
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
