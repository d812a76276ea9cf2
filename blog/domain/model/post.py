"""Blog post aggregate root.

A post owns its likes and comments. Status drives visibility:
only published posts are public, count views, and accept comments.
"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import Field, StringConstraints, field_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, PostId, PostStatus, Slug, UserId

DEFAULT_CATEGORY = "General"


def _now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_tags(tags: list[str]) -> list[str]:
    """Trim and lower-case tags, dropping empties and duplicates (order kept)."""
    seen: dict[str, None] = {}
    for tag in tags:
        cleaned = tag.strip().lower()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)


class Like(DomainModel):
    """A single user's like on a post."""

    user_id: UserId
    created_at: datetime = Field(default_factory=_now)


class Comment(DomainModel):
    """Comment on a post.

    ``user_id`` is None once the commenting user has been deleted.
    Comments are append-only.
    """

    id: CommentId
    post_id: PostId
    user_id: Optional[UserId]
    content: str = Field(min_length=1, max_length=1000)
    created_at: datetime = Field(default_factory=_now)


class Post(DomainModel):
    """Blog post aggregate root.

    Business rules:
    - Slug is globally unique and never changes after creation
    - Author is fixed at creation
    - At most one like per user
    - published_at is set on first publish and never cleared
    """

    id: PostId
    title: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=5, max_length=200)
    ]
    slug: Slug
    content: str = Field(min_length=50)
    excerpt: Optional[str] = Field(default=None, max_length=300)
    author_id: UserId
    status: PostStatus = PostStatus.DRAFT
    tags: list[str] = Field(default_factory=list)
    category: str = DEFAULT_CATEGORY
    read_time: int = Field(default=0, ge=0)
    views: int = Field(default=0, ge=0)
    likes: list[Like] = Field(default_factory=list)
    comments: list[Comment] = Field(default_factory=list)
    published_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    @field_validator("tags")
    @classmethod
    def clean_tags(cls, v: list[str]) -> list[str]:
        return normalize_tags(v)

    @field_validator("category")
    @classmethod
    def clean_category(cls, v: str) -> str:
        return v.strip() or DEFAULT_CATEGORY

    @property
    def is_published(self) -> bool:
        return self.status == PostStatus.PUBLISHED

    @property
    def like_count(self) -> int:
        return len(self.likes)

    @property
    def comment_count(self) -> int:
        return len(self.comments)

    def is_authored_by(self, user_id: UserId | None) -> bool:
        return user_id is not None and self.author_id == user_id

    def has_liked(self, user_id: UserId) -> bool:
        return any(like.user_id == user_id for like in self.likes)
