"""Builders for domain objects used across the test suites."""

from datetime import datetime, timezone
from uuid import uuid4

from blog.domain.model import Post, User
from blog.domain.value import PostId, PostStatus, Role, Slug, UserId

LONG_CONTENT = (
    "This post has more than enough words in it to pass the minimum "
    "content length that every blog post must satisfy."
)


def make_user(
    name: str = "Alice Example",
    email: str | None = None,
    role: Role = Role.USER,
) -> User:
    """Build a user with a throwaway password digest.

    Not usable for login; register through the service for that.
    """
    return User(
        id=UserId(uuid4()),
        name=name,
        email=email or f"{uuid4().hex[:8]}@example.com",
        password_digest="not-a-real-digest",
        role=role,
    )


def make_post(
    author_id: UserId,
    title: str = "A perfectly fine title",
    status: PostStatus = PostStatus.DRAFT,
    content: str = LONG_CONTENT,
    tags: list[str] | None = None,
    category: str = "General",
) -> Post:
    """Build a post with a unique slug."""
    now = datetime.now(timezone.utc)
    return Post(
        id=PostId(uuid4()),
        title=title,
        slug=Slug(f"post-{uuid4().hex[:12]}"),
        content=content,
        author_id=author_id,
        status=status,
        tags=tags or [],
        category=category,
        read_time=1,
        published_at=now if status == PostStatus.PUBLISHED else None,
        created_at=now,
        updated_at=now,
    )
