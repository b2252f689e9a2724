"""SQLAlchemy table definitions for Threadify.

These table definitions are used with SQLAlchemy Core. They match the
schema defined in Alembic migrations.

Comments and likes are stored in child tables of ``threads`` but are only
ever read or written through the thread repository, which treats them as
the thread's embedded collections.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("username", String(50), nullable=True),
    Column("hashed_password", String(255), nullable=False),
    Column("token", String(255), nullable=True, unique=True),  # Active session
    Column("profile_photo_id", UUID(as_uuid=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("text", Text, nullable=False),
    Column(
        "owner_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("username", String(50), nullable=True),  # Denormalized from users
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_threads_created_at", threads_table.c.created_at.desc())
Index("idx_threads_owner_id", threads_table.c.owner_id)

# ============================================================================
# THREAD COMMENTS TABLE (embedded in threads)
# ============================================================================
thread_comments_table = Table(
    "thread_comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "thread_id",
        UUID(as_uuid=True),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Position within the thread's comment list
    Column("position", Integer, nullable=False),
    Column("text", Text, nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("username", String(50), nullable=True),  # Denormalized from users
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_thread_comments_thread_position",
    thread_comments_table.c.thread_id,
    thread_comments_table.c.position,
)

# ============================================================================
# THREAD LIKES TABLE (embedded in threads)
# ============================================================================
thread_likes_table = Table(
    "thread_likes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "thread_id",
        UUID(as_uuid=True),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("position", Integer, nullable=False),
    Column(
        "liked_by_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One like per user per thread
    UniqueConstraint("thread_id", "liked_by_id", name="uq_thread_like"),
)

Index(
    "idx_thread_likes_thread_position",
    thread_likes_table.c.thread_id,
    thread_likes_table.c.position,
)

# ============================================================================
# PROFILE PHOTOS TABLE
# ============================================================================
profile_photos_table = Table(
    "profile_photos",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "owner_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("filename", String(255), nullable=False),
    Column("content_type", String(100), nullable=False),
    Column("size", Integer, nullable=False),
    Column(
        "uploaded_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_profile_photos_owner_id", profile_photos_table.c.owner_id)
