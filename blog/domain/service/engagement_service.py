"""Likes and comments on posts."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
import pydantic

from blog.domain.error import ValidationError
from blog.domain.model.post import Comment, Like, Post
from blog.domain.repository import PostRepository
from blog.domain.value import CommentId, UserId

from . import lifecycle
from .base import Service


class EngagementService(Service):
    """Domain service for likes and comments."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize engagement service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def toggle_like(self, post: Post, user_id: UserId) -> tuple[bool, int]:
        """Like a post, or take the like back if the user already liked it.

        Args:
            post: Post being liked
            user_id: User toggling their like

        Returns:
            Whether the user now likes the post, and the new like count
        """
        with logfire.span(
            "engagement_service.toggle_like",
            post_id=str(post.id),
            user_id=str(user_id),
        ):
            if post.has_liked(user_id):
                await self.post_repository.remove_like(post.id, user_id)
                liked = False
            else:
                like = Like(user_id=user_id, created_at=datetime.now(timezone.utc))
                await self.post_repository.add_like(post.id, like)
                liked = True

            refreshed = await self.post_repository.find_by_id(post.id)
            like_count = refreshed.like_count if refreshed else 0
            logfire.info(
                "Like toggled",
                post_id=str(post.id),
                liked=liked,
                like_count=like_count,
            )
            return liked, like_count

    async def add_comment(
        self, post: Post, user_id: UserId, content: str
    ) -> list[Comment]:
        """Append a comment to a published post.

        Returns:
            The post's full comment list, oldest first

        Raises:
            InvalidStateError: If the post is not published
            ValidationError: If the content is empty or too long
        """
        with logfire.span(
            "engagement_service.add_comment",
            post_id=str(post.id),
            user_id=str(user_id),
        ):
            lifecycle.ensure_commentable(post)

            try:
                comment = Comment(
                    id=CommentId(uuid4()),
                    post_id=post.id,
                    user_id=user_id,
                    content=content.strip(),
                    created_at=datetime.now(timezone.utc),
                )
            except pydantic.ValidationError as e:
                raise ValidationError(e.errors()[0]["msg"]) from e

            await self.post_repository.add_comment(comment)
            refreshed = await self.post_repository.find_by_id(post.id)
            comments = refreshed.comments if refreshed else [comment]
            logfire.info(
                "Comment added",
                post_id=str(post.id),
                comment_id=str(comment.id),
                comment_count=len(comments),
            )
            return comments
