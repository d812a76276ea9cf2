"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject


class Role(str, Enum):
    """User role."""

    USER = "user"
    ADMIN = "admin"


class PostStatus(str, Enum):
    """Publication status of a blog post.

    Normal edits move forward only: draft -> published -> archived.
    Staying in the same status is always allowed.
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"

    def can_transition_to(self, target: "PostStatus") -> bool:
        """Check whether an ordinary update may move to ``target``."""
        return target in _FORWARD_TRANSITIONS[self]


_FORWARD_TRANSITIONS: dict[PostStatus, frozenset[PostStatus]] = {
    PostStatus.DRAFT: frozenset({PostStatus.DRAFT, PostStatus.PUBLISHED}),
    PostStatus.PUBLISHED: frozenset({PostStatus.PUBLISHED, PostStatus.ARCHIVED}),
    PostStatus.ARCHIVED: frozenset({PostStatus.ARCHIVED}),
}


class SortField(str, Enum):
    """Sortable post fields, named as they appear in the API."""

    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    PUBLISHED_AT = "publishedAt"
    TITLE = "title"
    VIEWS = "views"
    READ_TIME = "readTime"


class SortDirection(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"


class Slug(RootValueObject[str]):
    """URL-safe slug for posts.

    Must be lowercase, alphanumeric with hyphens, 1-100 characters.
    Examples: 'hello-world-1718035200000', 'notes-on-rust-1718035200123'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 100:
            raise ValueError("Slug must be 1-100 characters")
        return v
