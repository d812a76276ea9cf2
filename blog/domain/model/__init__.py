"""Domain model entities for the blog."""

from blog.domain.model.post import Comment, Like, Post
from blog.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
    "Like",
]
