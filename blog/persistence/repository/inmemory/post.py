"""In-memory post repository for testing."""

from typing import Optional

from blog.domain.error import DuplicateError
from blog.domain.model.post import Comment, Like, Post
from blog.domain.repository.post import PostFilter, PostRepository
from blog.domain.value import PostId, Slug, SortDirection, SortField, UserId

_SORT_ATTRIBUTES = {
    SortField.CREATED_AT: "created_at",
    SortField.UPDATED_AT: "updated_at",
    SortField.PUBLISHED_AT: "published_at",
    SortField.TITLE: "title",
    SortField.VIEWS: "views",
    SortField.READ_TIME: "read_time",
}


def _matches(post: Post, filters: PostFilter) -> bool:
    """Mirror of the SQL filter clauses."""
    if filters.status is not None and post.status != filters.status:
        return False
    if filters.author_ids is not None and post.author_id not in filters.author_ids:
        return False
    if filters.search:
        needle = filters.search.lower()
        if not (
            needle in post.title.lower()
            or needle in post.content.lower()
            or any(needle in tag for tag in post.tags)
        ):
            return False
    if filters.category and filters.category.lower() not in post.category.lower():
        return False
    if filters.tag and filters.tag not in post.tags:
        return False
    return True


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _replace(self, post_id: PostId, **update) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(update=update)

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        for post in self._posts.values():
            if post.slug == slug:
                return post
        return None

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug exists."""
        return any(post.slug == slug for post in self._posts.values())

    async def find_all(
        self,
        filters: PostFilter = PostFilter(),
        sort_by: SortField = SortField.CREATED_AT,
        direction: SortDirection = SortDirection.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering, sorting and pagination."""
        attribute = _SORT_ATTRIBUTES[sort_by]
        posts = [p for p in self._posts.values() if _matches(p, filters)]

        # NULLs sort last in both directions, as in Postgres with NULLS LAST
        present = [p for p in posts if getattr(p, attribute) is not None]
        missing = [p for p in posts if getattr(p, attribute) is None]
        present.sort(
            key=lambda p: getattr(p, attribute),
            reverse=direction == SortDirection.DESC,
        )
        return (present + missing)[offset : offset + limit]

    async def count(self, filters: PostFilter = PostFilter()) -> int:
        """Count posts matching the given filters."""
        return sum(1 for p in self._posts.values() if _matches(p, filters))

    async def save(self, post: Post) -> Post:
        """Save or update a post, keeping stored likes, comments and views."""
        for other in self._posts.values():
            if other.slug == post.slug and other.id != post.id:
                raise DuplicateError("Blog with this title already exists")

        existing = self._posts.get(post.id)
        if existing:
            post = post.model_copy(
                update={
                    "slug": existing.slug,
                    "author_id": existing.author_id,
                    "created_at": existing.created_at,
                    "views": existing.views,
                    "likes": existing.likes,
                    "comments": existing.comments,
                }
            )
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)

    async def increment_views(self, post_id: PostId) -> None:
        """Increment views by 1."""
        post = self._posts.get(post_id)
        if post:
            self._replace(post_id, views=post.views + 1)

    async def add_like(self, post_id: PostId, like: Like) -> None:
        """Record a like unless the user already liked the post."""
        post = self._posts.get(post_id)
        if post and not post.has_liked(like.user_id):
            self._replace(post_id, likes=[*post.likes, like])

    async def remove_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Remove a user's like."""
        post = self._posts.get(post_id)
        if not post or not post.has_liked(user_id):
            return False
        self._replace(
            post_id, likes=[like for like in post.likes if like.user_id != user_id]
        )
        return True

    async def add_comment(self, comment: Comment) -> None:
        """Append a comment."""
        post = self._posts.get(comment.post_id)
        if post:
            self._replace(comment.post_id, comments=[*post.comments, comment])

    async def purge_user(self, user_id: UserId) -> int:
        """Remove a user's posts and likes and orphan their comments."""
        authored = [pid for pid, p in self._posts.items() if p.author_id == user_id]
        for post_id in authored:
            del self._posts[post_id]

        for post_id, post in list(self._posts.items()):
            self._posts[post_id] = post.model_copy(
                update={
                    "likes": [like for like in post.likes if like.user_id != user_id],
                    "comments": [
                        c.model_copy(update={"user_id": None})
                        if c.user_id == user_id
                        else c
                        for c in post.comments
                    ],
                }
            )
        return len(authored)
