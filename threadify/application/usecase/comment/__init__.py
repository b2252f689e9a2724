"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentResponse, AddCommentUseCase
from .remove_comment import RemoveCommentRequest, RemoveCommentUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentResponse",
    "AddCommentUseCase",
    "RemoveCommentRequest",
    "RemoveCommentUseCase",
]
