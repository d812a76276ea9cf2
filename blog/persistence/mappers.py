"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from blog.domain.model import Comment, Like, Post, User
from blog.domain.value import CommentId, PostId, PostStatus, Role, Slug, UserId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        password_digest=row["password_digest"],
        role=Role(row["role"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_like(row: Dict[str, Any]) -> Like:
    return Like(user_id=UserId(_uuid(row["user_id"])), created_at=row["created_at"])


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    A NULL ``user_id`` marks a comment whose author was deleted.
    """
    user_id: Optional[UserId] = (
        UserId(_uuid(row["user_id"])) if row.get("user_id") is not None else None
    )
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        user_id=user_id,
        content=row["content"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    return comment.model_dump()


def row_to_post(
    row: Dict[str, Any],
    likes: Optional[list[Like]] = None,
    comments: Optional[list[Comment]] = None,
) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        likes: Likes loaded from post_likes
        comments: Comments loaded from post_comments, oldest first

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        slug=Slug(row["slug"]),
        content=row["content"],
        excerpt=row.get("excerpt"),
        author_id=UserId(_uuid(row["author_id"])),
        status=PostStatus(row["status"]),
        tags=list(row.get("tags") or []),
        category=row["category"],
        read_time=row["read_time"],
        views=row["views"],
        likes=likes or [],
        comments=comments or [],
        published_at=row.get("published_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Likes and comments live in their own tables and are excluded.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = post.model_dump(exclude={"likes", "comments"})
    data["slug"] = str(post.slug)
    data["status"] = post.status.value
    return data
