"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we map manually
instead of using SQLAlchemy's ORM.
"""

from typing import Any, Dict, Iterable
from uuid import UUID

from threadify.domain.model import Comment, Like, ProfilePhoto, Thread, User
from threadify.domain.value import (
    CommentId,
    Email,
    LikeId,
    PhotoId,
    ThreadId,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return None if value is None else _uuid(value)


def _optional_username(value: str | None) -> Username | None:
    return Username(value) if value else None


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    photo_id = _optional_uuid(row.get("profile_photo_id"))
    return User(
        id=UserId(_uuid(row["id"])),
        email=Email(row["email"]),
        username=_optional_username(row.get("username")),
        hashed_password=row["hashed_password"],
        token=row.get("token"),
        profile_photo_id=PhotoId(photo_id) if photo_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    author_id = _optional_uuid(row.get("author_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        text=row["text"],
        author_id=UserId(author_id) if author_id else None,
        username=_optional_username(row.get("username")),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment, thread_id: ThreadId, position: int) -> Dict[str, Any]:
    """Convert an embedded Comment to a child-table row."""
    return {
        **comment.model_dump(),
        "thread_id": thread_id,
        "position": position,
    }


def row_to_like(row: Dict[str, Any]) -> Like:
    return Like(
        id=LikeId(_uuid(row["id"])),
        liked_by_id=UserId(_uuid(row["liked_by_id"])),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like, thread_id: ThreadId, position: int) -> Dict[str, Any]:
    """Convert an embedded Like to a child-table row."""
    return {
        **like.model_dump(),
        "thread_id": thread_id,
        "position": position,
    }


def row_to_thread(
    row: Dict[str, Any],
    comment_rows: Iterable[Dict[str, Any]] = (),
    like_rows: Iterable[Dict[str, Any]] = (),
) -> Thread:
    """Convert a thread row and its child rows to a Thread aggregate.

    Args:
        row: Thread row as dict
        comment_rows: The thread's comment rows, in position order
        like_rows: The thread's like rows, in position order

    Returns:
        Thread domain model with embedded comments and likes
    """
    return Thread(
        id=ThreadId(_uuid(row["id"])),
        text=row["text"],
        owner_id=UserId(_uuid(row["owner_id"])),
        username=_optional_username(row.get("username")),
        comments=[row_to_comment(c) for c in comment_rows],
        likes=[row_to_like(like) for like in like_rows],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert a Thread to its root row (children are stored separately)."""
    return thread.model_dump(exclude={"comments", "likes"})


def row_to_photo(row: Dict[str, Any]) -> ProfilePhoto:
    return ProfilePhoto(
        id=PhotoId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        filename=row["filename"],
        content_type=row["content_type"],
        size=row["size"],
        uploaded_at=row["uploaded_at"],
    )


def photo_to_dict(photo: ProfilePhoto) -> Dict[str, Any]:
    return photo.model_dump()
