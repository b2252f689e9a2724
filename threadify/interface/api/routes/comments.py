"""Comment routes (nested under threads)."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, Security, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from threadify.application.usecase.auth import AuthenticateUseCase
from threadify.application.usecase.comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    RemoveCommentRequest,
    RemoveCommentUseCase,
)
from threadify.interface.api.security import authenticate, bearer_scheme

router = APIRouter(prefix="/threads", tags=["comments"], route_class=DishkaRoute)


class CommentBody(BaseModel):
    text: str = Field(min_length=1, max_length=10000)


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on a thread."""

    comment: CommentBody


@router.post(
    "/{thread_id}/comment",
    response_model=AddCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    thread_id: UUID,
    request: AddCommentAPIRequest,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    add_comment_use_case: FromDishka[AddCommentUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> AddCommentResponse:
    identity = await authenticate(authenticate_use_case, credentials)
    return await add_comment_use_case.execute(
        AddCommentRequest(
            identity=identity, thread_id=str(thread_id), text=request.comment.text
        )
    )


@router.delete(
    "/{thread_id}/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def remove_comment(
    thread_id: UUID,
    comment_id: UUID,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    remove_comment_use_case: FromDishka[RemoveCommentUseCase],
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> Response:
    """Remove a comment. Only its author may do this."""
    identity = await authenticate(authenticate_use_case, credentials)
    await remove_comment_use_case.execute(
        RemoveCommentRequest(
            identity=identity, thread_id=str(thread_id), comment_id=str(comment_id)
        )
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
