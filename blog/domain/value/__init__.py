"""Domain value objects for the blog."""

from blog.domain.value.identifiers import CommentId, PostId, UserId
from blog.domain.value.types import (
    PostStatus,
    Role,
    Slug,
    SortDirection,
    SortField,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "PostStatus",
    "Role",
    "Slug",
    "SortDirection",
    "SortField",
]
