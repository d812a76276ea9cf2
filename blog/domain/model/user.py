"""User aggregate root.

Users register with an email and password and carry a role that
decides what they may do with other people's content.
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import Field, StringConstraints, field_validator

from blog.domain.model.common import DomainModel
from blog.domain.value import Role, UserId


def _now() -> datetime:
    return datetime.now(timezone.utc)


def normalize_email(email: str) -> str:
    """Emails are unique case-insensitively, so they are stored lower-cased."""
    return email.strip().lower()


class User(DomainModel):
    """User aggregate root.

    Business rules:
    - Email is unique across all users (case-insensitive)
    - Only one admin can be created through the bootstrap endpoint
    - A user may not delete or demote themselves
    """

    id: UserId
    name: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=2, max_length=50)
    ]
    email: str = Field(min_length=3, max_length=255)
    password_digest: str = Field(repr=False)
    role: Role = Role.USER
    created_at: datetime = Field(default_factory=_now)
    updated_at: datetime = Field(default_factory=_now)

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return normalize_email(v)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
