"""Thread use cases."""

from .create_thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
)
from .delete_thread import DeleteThreadRequest, DeleteThreadUseCase
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase
from .list_threads import ListThreadsRequest, ListThreadsResponse, ListThreadsUseCase
from .update_thread import (
    ThreadPatch,
    UpdateThreadRequest,
    UpdateThreadResponse,
    UpdateThreadUseCase,
)

__all__ = [
    "CreateThreadRequest",
    "CreateThreadResponse",
    "CreateThreadUseCase",
    "DeleteThreadRequest",
    "DeleteThreadUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "ListThreadsRequest",
    "ListThreadsResponse",
    "ListThreadsUseCase",
    "ThreadPatch",
    "UpdateThreadRequest",
    "UpdateThreadResponse",
    "UpdateThreadUseCase",
]
