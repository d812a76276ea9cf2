"""PostgreSQL implementation of Post repository."""

from collections import defaultdict
from typing import Optional
from uuid import UUID

import logfire
from sqlalchemy import String, column, delete, func, or_, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.error import DuplicateError
from blog.domain.model.post import Comment, Like, Post
from blog.domain.repository.post import PostFilter, PostRepository
from blog.domain.value import PostId, Slug, SortDirection, SortField, UserId
from blog.persistence.mappers import (
    comment_to_dict,
    post_to_dict,
    row_to_comment,
    row_to_like,
    row_to_post,
)
from blog.persistence.tables import (
    post_comments_table,
    post_likes_table,
    posts_table,
)

_SORT_COLUMNS = {
    SortField.CREATED_AT: posts_table.c.created_at,
    SortField.UPDATED_AT: posts_table.c.updated_at,
    SortField.PUBLISHED_AT: posts_table.c.published_at,
    SortField.TITLE: posts_table.c.title,
    SortField.VIEWS: posts_table.c.views,
    SortField.READ_TIME: posts_table.c.read_time,
}


def _filter_clauses(filters: PostFilter) -> list:
    """Translate a PostFilter into WHERE clauses (AND-combined)."""
    clauses = []
    if filters.status is not None:
        clauses.append(posts_table.c.status == filters.status.value)
    if filters.author_ids is not None:
        clauses.append(posts_table.c.author_id.in_(filters.author_ids))
    if filters.search:
        tag = func.unnest(posts_table.c.tags).table_valued(column("tag", String))
        tag_match = (
            select(1)
            .select_from(tag)
            .where(tag.c.tag.icontains(filters.search, autoescape=True))
            .exists()
        )
        clauses.append(
            or_(
                posts_table.c.title.icontains(filters.search, autoescape=True),
                posts_table.c.content.icontains(filters.search, autoescape=True),
                tag_match,
            )
        )
    if filters.category:
        clauses.append(
            posts_table.c.category.icontains(filters.category, autoescape=True)
        )
    if filters.tag:
        clauses.append(posts_table.c.tags.any(filters.tag))
    return clauses


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_engagement(
        self, post_ids: list[UUID]
    ) -> tuple[dict[UUID, list[Like]], dict[UUID, list[Comment]]]:
        """Fetch likes and comments for multiple posts, one query each.

        Args:
            post_ids: List of post IDs

        Returns:
            Likes and comments keyed by post ID (comments oldest first)
        """
        likes: dict[UUID, list[Like]] = defaultdict(list)
        comments: dict[UUID, list[Comment]] = defaultdict(list)
        if not post_ids:
            return likes, comments

        like_stmt = (
            select(post_likes_table)
            .where(post_likes_table.c.post_id.in_(post_ids))
            .order_by(post_likes_table.c.created_at)
        )
        for row in (await self.session.execute(like_stmt)).mappings().all():
            likes[row["post_id"]].append(row_to_like(dict(row)))

        comment_stmt = (
            select(post_comments_table)
            .where(post_comments_table.c.post_id.in_(post_ids))
            .order_by(post_comments_table.c.created_at, post_comments_table.c.id)
        )
        for row in (await self.session.execute(comment_stmt)).mappings().all():
            comments[row["post_id"]].append(row_to_comment(dict(row)))

        return likes, comments

    async def _build_posts(self, rows: list) -> list[Post]:
        post_ids = [row["id"] for row in rows]
        likes, comments = await self._fetch_engagement(post_ids)
        return [
            row_to_post(dict(row), likes=likes[row["id"]], comments=comments[row["id"]])
            for row in rows
        ]

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            if not row:
                return None
            return (await self._build_posts([row]))[0]

    async def find_by_slug(self, slug: Slug) -> Optional[Post]:
        """Find a post by slug."""
        with logfire.span("post_repository.find_by_slug", slug=str(slug)):
            stmt = select(posts_table).where(posts_table.c.slug == str(slug))
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            if not row:
                return None
            return (await self._build_posts([row]))[0]

    async def slug_exists(self, slug: Slug) -> bool:
        """Check if a slug exists."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.slug == str(slug))
        )
        result = await self.session.execute(stmt)
        exists = (result.scalar() or 0) > 0
        logfire.debug("Slug existence check", slug=str(slug), exists=exists)
        return exists

    async def find_all(
        self,
        filters: PostFilter = PostFilter(),
        sort_by: SortField = SortField.CREATED_AT,
        direction: SortDirection = SortDirection.DESC,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering, sorting and pagination."""
        with logfire.span(
            "post_repository.find_all",
            sort_by=sort_by.value,
            direction=direction.value,
            limit=limit,
            offset=offset,
        ):
            sort_column = _SORT_COLUMNS[sort_by]
            order = (
                sort_column.desc().nulls_last()
                if direction == SortDirection.DESC
                else sort_column.asc().nulls_last()
            )
            stmt = (
                select(posts_table)
                .where(*_filter_clauses(filters))
                .order_by(order, posts_table.c.id)
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            rows = result.mappings().all()

            posts = await self._build_posts(list(rows))
            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, filters: PostFilter = PostFilter()) -> int:
        """Count posts matching the given filters."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(*_filter_clauses(filters))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post's own columns (create or update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            existing_stmt = select(posts_table.c.id).where(posts_table.c.id == post.id)
            existing = (await self.session.execute(existing_stmt)).first()

            post_dict = post_to_dict(post)

            try:
                if existing:
                    # Slug, author and creation time never change; views only
                    # move through increment_views
                    for column in ("slug", "author_id", "created_at", "views"):
                        post_dict.pop(column)
                    stmt = (
                        posts_table.update()
                        .where(posts_table.c.id == post.id)
                        .values(**post_dict)
                        .returning(posts_table.c.views, posts_table.c.created_at)
                    )
                    stored = (await self.session.execute(stmt)).one()
                    post = post.model_copy(
                        update={"views": stored.views, "created_at": stored.created_at}
                    )
                else:
                    await self.session.execute(posts_table.insert().values(**post_dict))
                await self.session.flush()
            except IntegrityError as e:
                logfire.warn("Post slug conflict", slug=str(post.slug))
                raise DuplicateError("Blog with this title already exists") from e

            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post; likes and comments go with it (ON DELETE CASCADE)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(views=posts_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def add_like(self, post_id: PostId, like: Like) -> None:
        """Insert a like; a concurrent duplicate is ignored by the primary key."""
        stmt = (
            insert(post_likes_table)
            .values(post_id=post_id, user_id=like.user_id, created_at=like.created_at)
            .on_conflict_do_nothing(index_elements=["post_id", "user_id"])
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def remove_like(self, post_id: PostId, user_id: UserId) -> bool:
        """Delete a user's like, reporting whether one existed."""
        stmt = delete(post_likes_table).where(
            post_likes_table.c.post_id == post_id,
            post_likes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def add_comment(self, comment: Comment) -> None:
        """Insert a comment."""
        stmt = insert(post_comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()

    async def purge_user(self, user_id: UserId) -> int:
        """Remove a user's posts and likes and orphan their comments."""
        with logfire.span("post_repository.purge_user", user_id=str(user_id)):
            await self.session.execute(
                delete(post_likes_table).where(post_likes_table.c.user_id == user_id)
            )
            await self.session.execute(
                update(post_comments_table)
                .where(post_comments_table.c.user_id == user_id)
                .values(user_id=None)
            )
            result = await self.session.execute(
                delete(posts_table).where(posts_table.c.author_id == user_id)
            )
            await self.session.flush()
            return result.rowcount
