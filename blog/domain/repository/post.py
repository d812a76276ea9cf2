"""Post repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from blog.domain.model.post import Comment, Like, Post
from blog.domain.value import (
    PostId,
    PostStatus,
    Slug,
    SortDirection,
    SortField,
    UserId,
)


@dataclass(frozen=True)
class PostFilter:
    """Criteria for post listings, combined with logical AND.

    ``author_ids`` set to an empty list matches nothing; None means any author.
    """

    status: Optional[PostStatus] = None
    author_ids: Optional[list[UserId]] = None
    search: Optional[str] = None
    category: Optional[str] = None
    tag: Optional[str] = None


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID, with its likes and comments.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug, with its likes and comments.

        Args:
            slug: The post's slug

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def slug_exists(self, slug: Slug) -> bool:
        """Check whether a slug is already taken.

        Args:
            slug: Slug to check

        Returns:
            True if a post already uses the slug
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filters: PostFilter = PostFilter(),
        sort_by: SortField = SortField.CREATED_AT,
        direction: SortDirection = SortDirection.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering, sorting and pagination.

        Args:
            filters: Filter criteria
            sort_by: Field to sort on
            direction: Sort direction
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, filters: PostFilter = PostFilter()) -> int:
        """Count posts matching the given filters.

        Args:
            filters: Filter criteria

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post's own fields (create or update).

        Likes and comments are written through their dedicated methods.
        On update the stored view count is kept, so views counted since
        the post was loaded are not lost.

        Args:
            post: The post to save

        Returns:
            The saved post, carrying the stored view count

        Raises:
            DuplicateError: If the slug is already taken by another post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post with its likes and comments.

        Args:
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment the view counter by 1.

        Args:
            post_id: The post ID
        """
        pass

    @abstractmethod
    async def add_like(self, post_id: PostId, like: Like) -> None:
        """Record a like. A second like by the same user is ignored.

        Args:
            post_id: The post ID
            like: Like to record
        """
        pass

    @abstractmethod
    async def remove_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a user's like.

        Args:
            post_id: The post ID
            user_id: The user whose like is removed

        Returns:
            True if a like was removed, False if none existed
        """
        pass

    @abstractmethod
    async def add_comment(self, comment: Comment) -> None:
        """Append a comment to its post.

        Args:
            comment: Comment to append
        """
        pass

    @abstractmethod
    async def purge_user(self, user_id: UserId) -> int:
        """Remove a deleted user's footprint.

        Deletes the user's posts, removes their likes everywhere and
        clears the user reference on their comments.

        Args:
            user_id: The user being deleted

        Returns:
            Number of posts deleted
        """
        pass
