"""Response models shared by the use cases.

Field names serialize in camelCase, the way API clients read them.
"""

import math
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from blog.domain.error import ValidationError
from blog.domain.model import Comment, Post, User
from blog.domain.value import PostStatus, Role, UserId


class CamelModel(BaseModel):
    """Base for models exchanged with API clients."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )


class Pagination(CamelModel):
    """Pagination block of list responses."""

    current_page: int
    total_pages: int
    total_items: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        total_pages = math.ceil(total / limit)
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )


def page_window(page: int, limit: int, max_limit: int) -> tuple[int, int]:
    """Validate a page request and return ``(limit, offset)``.

    Raises:
        ValidationError: If page or limit is out of range
    """
    if page < 1:
        raise ValidationError("page must be at least 1")
    if not 1 <= limit <= max_limit:
        raise ValidationError(f"limit must be between 1 and {max_limit}")
    return limit, (page - 1) * limit


class UserView(CamelModel):
    """User as shown to clients (never includes the password digest)."""

    id: str
    name: str
    email: str
    role: Role
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthorView(CamelModel):
    """Post author."""

    id: str
    name: str
    email: str


class CommentUserView(CamelModel):
    """Comment author."""

    id: str
    name: str


class CommentView(CamelModel):
    """Comment; ``user`` is None when the commenter was deleted."""

    id: str
    user: Optional[CommentUserView]
    content: str
    created_at: datetime


class LikeView(CamelModel):
    user: str
    created_at: datetime


class PostSummary(CamelModel):
    """Post as shown in listings (without comments)."""

    id: str
    title: str
    slug: str
    content: str
    excerpt: Optional[str]
    author: Optional[AuthorView]
    status: PostStatus
    tags: list[str]
    category: str
    read_time: int
    views: int
    likes: list[LikeView]
    like_count: int
    comment_count: int
    published_at: Optional[datetime]
    created_at: datetime
    updated_at: datetime


class PostDetail(PostSummary):
    """Single post, with its comments oldest first."""

    comments: list[CommentView]


def _author_view(author_id: UserId, users: dict[UserId, User]) -> Optional[AuthorView]:
    user = users.get(author_id)
    if not user:
        return None
    return AuthorView(id=str(user.id), name=user.name, email=user.email)


def comment_views(
    comments: list[Comment], users: dict[UserId, User]
) -> list[CommentView]:
    """Render comments with their authors resolved to ``{id, name}``."""
    views = []
    for comment in comments:
        user = users.get(comment.user_id) if comment.user_id else None
        views.append(
            CommentView(
                id=str(comment.id),
                user=CommentUserView(id=str(user.id), name=user.name) if user else None,
                content=comment.content,
                created_at=comment.created_at,
            )
        )
    return views


def referenced_user_ids(posts: list[Post], with_comments: bool = False) -> list[UserId]:
    """IDs of the users a page of posts refers to, for one batch lookup."""
    ids: list[UserId] = [post.author_id for post in posts]
    if with_comments:
        for post in posts:
            ids.extend(c.user_id for c in post.comments if c.user_id is not None)
    return list(dict.fromkeys(ids))


def _summary_fields(post: Post, users: dict[UserId, User]) -> dict:
    return dict(
        id=str(post.id),
        title=post.title,
        slug=str(post.slug),
        content=post.content,
        excerpt=post.excerpt,
        author=_author_view(post.author_id, users),
        status=post.status,
        tags=post.tags,
        category=post.category,
        read_time=post.read_time,
        views=post.views,
        likes=[
            LikeView(user=str(like.user_id), created_at=like.created_at)
            for like in post.likes
        ],
        like_count=post.like_count,
        comment_count=post.comment_count,
        published_at=post.published_at,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )


def post_summary(post: Post, users: dict[UserId, User]) -> PostSummary:
    return PostSummary(**_summary_fields(post, users))


def post_detail(post: Post, users: dict[UserId, User]) -> PostDetail:
    return PostDetail(
        **_summary_fields(post, users),
        comments=comment_views(post.comments, users),
    )
