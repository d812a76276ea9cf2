"""PostgreSQL repository implementations."""

from .post import PostgresPostRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresUserRepository",
]
