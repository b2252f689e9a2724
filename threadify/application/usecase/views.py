"""Response views shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from threadify.domain.model import Comment, Like, ProfilePhoto, Thread, User


class UserView(BaseModel):
    """Public view of a user. Never carries the password hash."""

    id: str
    email: str
    username: str | None
    profile_photo_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            email=user.email.root,
            username=user.username.root if user.username else None,
            profile_photo_id=(
                str(user.profile_photo_id) if user.profile_photo_id else None
            ),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class CommentView(BaseModel):
    id: str
    text: str
    author_id: str | None
    username: str | None
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        return cls(
            id=str(comment.id),
            text=comment.text,
            author_id=str(comment.author_id) if comment.author_id else None,
            username=comment.username.root if comment.username else None,
            created_at=comment.created_at,
        )


class LikeView(BaseModel):
    id: str
    liked_by_id: str
    created_at: datetime

    @classmethod
    def from_like(cls, like: Like) -> "LikeView":
        return cls(
            id=str(like.id),
            liked_by_id=str(like.liked_by_id),
            created_at=like.created_at,
        )


class ThreadView(BaseModel):
    """Thread with its embedded likes and comments."""

    id: str
    text: str
    owner_id: str
    username: str | None
    likes: list[LikeView]
    comments: list[CommentView]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_thread(cls, thread: Thread) -> "ThreadView":
        return cls(
            id=str(thread.id),
            text=thread.text,
            owner_id=str(thread.owner_id),
            username=thread.username.root if thread.username else None,
            likes=[LikeView.from_like(like) for like in thread.likes],
            comments=[CommentView.from_comment(c) for c in thread.comments],
            created_at=thread.created_at,
            updated_at=thread.updated_at,
        )


class PhotoView(BaseModel):
    id: str
    owner_id: str
    filename: str
    content_type: str
    size: int
    uploaded_at: datetime

    @classmethod
    def from_photo(cls, photo: ProfilePhoto) -> "PhotoView":
        return cls(
            id=str(photo.id),
            owner_id=str(photo.owner_id),
            filename=photo.filename,
            content_type=photo.content_type,
            size=photo.size,
            uploaded_at=photo.uploaded_at,
        )
