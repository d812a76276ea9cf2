"""Post domain service."""

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

import logfire
import pydantic

from blog.domain.error import NotFoundError, ValidationError
from blog.domain.model.post import DEFAULT_CATEGORY, Post
from blog.domain.repository import PostFilter, PostRepository
from blog.domain.value import PostId, PostStatus, Slug, SortDirection, SortField, UserId

from . import lifecycle
from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def generate_unique_slug(self, title: str, at: datetime) -> Slug:
        """Generate a unique slug from a title and a creation time.

        Handles collisions by appending numeric suffixes.

        Args:
            title: Post title to slugify
            at: Creation time, stamped into the slug in milliseconds

        Returns:
            Unique slug for the post
        """
        with logfire.span("post_service.generate_unique_slug", title=title):
            base_slug_str = lifecycle.timestamped_slug(title, at)

            slug_str = base_slug_str
            counter = 1
            while await self.post_repository.slug_exists(Slug(slug_str)):
                suffix = f"-{counter}"
                slug_str = base_slug_str[: lifecycle.SLUG_MAX_LENGTH - len(suffix)]
                slug_str = slug_str.rstrip("-") + suffix
                counter += 1
                logfire.debug(
                    "Slug collision, trying with suffix",
                    base_slug=base_slug_str,
                    attempt=slug_str,
                )

            return Slug(slug_str)

    async def create_post(
        self,
        author_id: UserId,
        title: str,
        content: str,
        excerpt: Optional[str] = None,
        tags: Optional[list[str]] = None,
        category: Optional[str] = None,
        status: PostStatus = PostStatus.DRAFT,
    ) -> Post:
        """Create and save a new post.

        Derives slug, excerpt, read time and (when created published)
        the publication time.

        Raises:
            ValidationError: If the post is created archived or a field
                is out of range
        """
        with logfire.span(
            "post_service.create_post", author_id=str(author_id), status=status.value
        ):
            lifecycle.check_initial_status(status)

            now = datetime.now(timezone.utc)
            slug = await self.generate_unique_slug(title, now)
            try:
                post = Post(
                    id=PostId(uuid4()),
                    title=title,
                    slug=slug,
                    content=content,
                    excerpt=excerpt or lifecycle.derive_excerpt(content),
                    author_id=author_id,
                    status=status,
                    tags=tags or [],
                    category=category or DEFAULT_CATEGORY,
                    read_time=lifecycle.compute_read_time(content),
                    published_at=lifecycle.published_at_after(None, status, now),
                    created_at=now,
                    updated_at=now,
                )
            except pydantic.ValidationError as e:
                raise ValidationError(e.errors()[0]["msg"]) from e

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), slug=str(saved.slug))
            return saved

    async def get_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Blog", str(post_id))
            return post

    async def get_by_slug(self, slug: str) -> Post:
        """Get a post by slug.

        A string that is not a well-formed slug cannot name a post.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_by_slug", slug=slug):
            try:
                slug_value = Slug(slug)
            except pydantic.ValidationError:
                raise NotFoundError("Blog", slug)

            post = await self.post_repository.find_by_slug(slug_value)
            if not post:
                logfire.warn("Post not found by slug", slug=slug)
                raise NotFoundError("Blog", slug)
            return post

    async def list_posts(
        self,
        filters: PostFilter,
        sort_by: SortField = SortField.CREATED_AT,
        direction: SortDirection = SortDirection.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """Page of posts matching ``filters`` with the total match count."""
        with logfire.span(
            "post_service.list_posts",
            sort_by=sort_by.value,
            direction=direction.value,
            limit=limit,
            offset=offset,
        ):
            if filters.author_ids is not None and not filters.author_ids:
                return [], 0
            posts = await self.post_repository.find_all(
                filters=filters,
                sort_by=sort_by,
                direction=direction,
                limit=limit,
                offset=offset,
            )
            total = await self.post_repository.count(filters)
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    async def update_post(
        self,
        post: Post,
        title: Optional[str] = None,
        content: Optional[str] = None,
        excerpt: Optional[str] = None,
        tags: Optional[list[str]] = None,
        category: Optional[str] = None,
        status: Optional[PostStatus] = None,
    ) -> Post:
        """Apply a partial edit under the forward-only status rule."""
        with logfire.span("post_service.update_post", post_id=str(post.id)):
            revised = lifecycle.revise(
                post,
                datetime.now(timezone.utc),
                title=title,
                content=content,
                excerpt=excerpt,
                tags=tags,
                category=category,
                status=status,
            )
            saved = await self.post_repository.save(revised)
            logfire.info(
                "Post updated", post_id=str(saved.id), status=saved.status.value
            )
            return saved

    async def set_status(self, post: Post, status: PostStatus) -> Post:
        """Moderation: set any status, bypassing the forward-only rule."""
        with logfire.span(
            "post_service.set_status", post_id=str(post.id), status=status.value
        ):
            moderated = lifecycle.moderate(post, status, datetime.now(timezone.utc))
            saved = await self.post_repository.save(moderated)
            logfire.info(
                "Post status set",
                post_id=str(saved.id),
                previous=post.status.value,
                status=status.value,
            )
            return saved

    async def delete_post(self, post: Post) -> None:
        with logfire.span("post_service.delete_post", post_id=str(post.id)):
            await self.post_repository.delete(post.id)
            logfire.info("Post deleted", post_id=str(post.id))

    async def record_view(self, post: Post) -> Post:
        """Count a read of a published post and return the fresh post.

        Reads of drafts and archived posts are not counted.
        """
        if not lifecycle.counts_view(post):
            return post
        with logfire.span("post_service.record_view", post_id=str(post.id)):
            await self.post_repository.increment_views(post.id)
            return await self.get_by_id(post.id)
