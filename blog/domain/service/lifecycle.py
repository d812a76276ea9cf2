"""Post lifecycle: status transitions and derived fields.

Pure functions over immutable ``Post`` values. Each returns a new post;
nothing here touches storage.
"""

import math
import re
from datetime import datetime
from typing import Any, Optional

import pydantic

from blog.domain.error import (
    InvalidStateError,
    InvalidStatusTransitionError,
    ValidationError,
)
from blog.domain.model.post import Post
from blog.domain.value import PostStatus

EXCERPT_LENGTH = 150
WORDS_PER_MINUTE = 200
SLUG_MAX_LENGTH = 100


def derive_excerpt(content: str) -> str:
    """First 150 characters of the content followed by an ellipsis."""
    return content[:EXCERPT_LENGTH] + "..."


def compute_read_time(content: str) -> int:
    """Reading time in whole minutes at 200 words per minute."""
    return math.ceil(len(content.split()) / WORDS_PER_MINUTE)


def slugify(title: str) -> str:
    """Convert a title to URL-safe slug format.

    - Converts to lowercase
    - Replaces runs of non-alphanumeric chars with one hyphen
    - Strips leading/trailing hyphens

    Returns:
        Slug string (may be empty if the title has no valid chars)
    """
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower())
    return slug.strip("-")


def timestamped_slug(title: str, at: datetime) -> str:
    """Slug made of the slugified title and a millisecond timestamp.

    The title part is cut so the result never exceeds 100 characters.
    """
    suffix = f"-{int(at.timestamp() * 1000)}"
    base = slugify(title)[: SLUG_MAX_LENGTH - len(suffix)].rstrip("-") or "post"
    return base + suffix


def check_initial_status(status: PostStatus) -> None:
    """Posts are created as draft or published, never archived."""
    if status == PostStatus.ARCHIVED:
        raise ValidationError("A blog cannot be created as archived")


def check_transition(current: PostStatus, target: PostStatus) -> None:
    """Enforce the forward-only lifecycle of ordinary edits.

    Raises:
        InvalidStatusTransitionError: If ``target`` is not reachable
    """
    if not current.can_transition_to(target):
        raise InvalidStatusTransitionError(current.value, target.value)


def ensure_commentable(post: Post) -> None:
    """Only published posts take comments.

    Raises:
        InvalidStateError: If the post is a draft or archived
    """
    if not post.is_published:
        raise InvalidStateError("Cannot comment on unpublished blog")


def counts_view(post: Post) -> bool:
    """Views are counted only while a post is published."""
    return post.is_published


def published_at_after(
    post_published_at: Optional[datetime], status: PostStatus, now: datetime
) -> Optional[datetime]:
    """Stamp the first entry into ``published``; keep any earlier stamp."""
    if post_published_at is None and status == PostStatus.PUBLISHED:
        return now
    return post_published_at


def _rebuild(post: Post, updates: dict[str, Any]) -> Post:
    # model_copy skips validation, so rebuild through the model instead
    try:
        return Post.model_validate({**post.model_dump(), **updates})
    except pydantic.ValidationError as e:
        raise ValidationError(e.errors()[0]["msg"]) from e


def revise(
    post: Post,
    now: datetime,
    *,
    title: Optional[str] = None,
    content: Optional[str] = None,
    excerpt: Optional[str] = None,
    tags: Optional[list[str]] = None,
    category: Optional[str] = None,
    status: Optional[PostStatus] = None,
) -> Post:
    """Apply an author's partial edit.

    Fields left as None are unchanged. The slug is never regenerated.
    A status change must follow the forward-only rule.

    Raises:
        InvalidStatusTransitionError: On a backwards status change
        ValidationError: If an edited field is out of range
    """
    updates: dict[str, Any] = {"updated_at": now}

    if status is not None:
        check_transition(post.status, status)
        updates["status"] = status
        updates["published_at"] = published_at_after(post.published_at, status, now)

    if title is not None:
        updates["title"] = title
    if tags is not None:
        updates["tags"] = tags
    if category is not None:
        updates["category"] = category

    if content is not None and content != post.content:
        updates["content"] = content
        updates["read_time"] = compute_read_time(content)
        if excerpt is None and post.excerpt == derive_excerpt(post.content):
            updates["excerpt"] = derive_excerpt(content)

    if excerpt is not None:
        updates["excerpt"] = excerpt or derive_excerpt(content or post.content)

    return _rebuild(post, updates)


def moderate(post: Post, status: PostStatus, now: datetime) -> Post:
    """Set any status directly (admin toggle, no forward-only rule)."""
    return _rebuild(
        post,
        {
            "status": status,
            "published_at": published_at_after(post.published_at, status, now),
            "updated_at": now,
        },
    )
