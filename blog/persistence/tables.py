"""SQLAlchemy table definitions for the blog.

These table definitions are used with SQLAlchemy Core and manual mappers.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
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
    Column("name", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),  # Stored lower-cased
    Column("password_digest", String(255), nullable=False),
    Column("role", String(20), nullable=False, server_default="user"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("role IN ('user', 'admin')", name="ck_users_role"),
)

Index("idx_users_role", users_table.c.role)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(200), nullable=False),
    Column("slug", String(100), nullable=False, unique=True),  # Immutable
    Column("content", Text, nullable=False),
    Column("excerpt", String(300), nullable=True),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("status", String(20), nullable=False, server_default="draft"),
    Column(
        "tags",
        postgresql.ARRAY(String(100)),
        nullable=False,
        server_default="{}",
    ),
    Column("category", String(100), nullable=False, server_default="General"),
    Column("read_time", Integer, nullable=False, server_default="0"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("published_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "status IN ('draft', 'published', 'archived')", name="ck_posts_status"
    ),
    CheckConstraint("views >= 0", name="ck_posts_views"),
)

Index("idx_posts_author_status", posts_table.c.author_id, posts_table.c.status)
Index("idx_posts_status_published_at", posts_table.c.status, posts_table.c.published_at)
Index("idx_posts_tags", posts_table.c.tags, postgresql_using="gin")

# ============================================================================
# POST LIKES TABLE (one row per user and post)
# ============================================================================
post_likes_table = Table(
    "post_likes",
    metadata,
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_post_likes_user_id", post_likes_table.c.user_id)

# ============================================================================
# POST COMMENTS TABLE (append-only; user_id cleared when the user is deleted)
# ============================================================================
post_comments_table = Table(
    "post_comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("content", String(1000), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_post_comments_post_created",
    post_comments_table.c.post_id,
    post_comments_table.c.created_at,
)
Index("idx_post_comments_user_id", post_comments_table.c.user_id)
