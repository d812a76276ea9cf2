"""Unit tests for PostService."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from blog.domain.error import (
    InvalidStatusTransitionError,
    NotFoundError,
    ValidationError,
)
from blog.domain.repository import PostFilter
from blog.domain.service import PostService
from blog.domain.value import PostId, PostStatus, SortDirection, SortField, UserId
from blog.persistence.repository.inmemory import InMemoryPostRepository
from tests.factories import LONG_CONTENT, make_post


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()


@pytest.fixture
def service(post_repo):
    return PostService(post_repo)


@pytest.fixture
def author_id():
    return UserId(uuid4())


class TestCreatePost:
    """Tests for PostService.create_post()."""

    @pytest.mark.asyncio
    async def test_derives_slug_excerpt_and_read_time(self, service, author_id):
        post = await service.create_post(
            author_id=author_id,
            title="Notes on Async Python",
            content=LONG_CONTENT,
            tags=["Python", "async"],
        )

        assert str(post.slug).startswith("notes-on-async-python-")
        assert post.excerpt == LONG_CONTENT[:150] + "..."
        assert post.read_time == 1
        assert post.tags == ["python", "async"]
        assert post.category == "General"
        assert post.status == PostStatus.DRAFT
        assert post.published_at is None

    @pytest.mark.asyncio
    async def test_published_on_creation_stamps_published_at(self, service, author_id):
        post = await service.create_post(
            author_id=author_id,
            title="Straight to press",
            content=LONG_CONTENT,
            status=PostStatus.PUBLISHED,
        )

        assert post.published_at is not None

    @pytest.mark.asyncio
    async def test_keeps_explicit_excerpt(self, service, author_id):
        post = await service.create_post(
            author_id=author_id,
            title="Hand written summary",
            content=LONG_CONTENT,
            excerpt="Short and sweet",
        )

        assert post.excerpt == "Short and sweet"

    @pytest.mark.asyncio
    async def test_rejects_archived(self, service, author_id):
        with pytest.raises(ValidationError):
            await service.create_post(
                author_id=author_id,
                title="Born archived",
                content=LONG_CONTENT,
                status=PostStatus.ARCHIVED,
            )

    @pytest.mark.asyncio
    async def test_rejects_short_content(self, service, author_id):
        with pytest.raises(ValidationError):
            await service.create_post(
                author_id=author_id, title="Too short", content="tiny"
            )


class TestGenerateUniqueSlug:
    """Tests for PostService.generate_unique_slug()."""

    @pytest.mark.asyncio
    async def test_same_title_and_instant_get_distinct_slugs(
        self, service, post_repo, author_id
    ):
        at = datetime(2026, 3, 1, tzinfo=timezone.utc)
        first = await service.generate_unique_slug("Same Title", at)
        taken = make_post(author_id).model_copy(update={"slug": first})
        await post_repo.save(taken)

        second = await service.generate_unique_slug("Same Title", at)

        assert second != first
        assert str(second) == f"{first}-1"


class TestLookups:
    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, service):
        with pytest.raises(NotFoundError, match="Blog not found"):
            await service.get_by_id(PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_by_slug(self, service, post_repo, author_id):
        post = await post_repo.save(make_post(author_id))

        found = await service.get_by_slug(str(post.slug))

        assert found.id == post.id

    @pytest.mark.asyncio
    async def test_malformed_slug_is_not_found(self, service):
        with pytest.raises(NotFoundError):
            await service.get_by_slug("Not A Slug!")


class TestListPosts:
    @pytest.mark.asyncio
    async def test_filters_and_counts(self, service, post_repo, author_id):
        await post_repo.save(make_post(author_id, status=PostStatus.PUBLISHED))
        await post_repo.save(make_post(author_id, status=PostStatus.PUBLISHED))
        await post_repo.save(make_post(author_id, status=PostStatus.DRAFT))

        posts, total = await service.list_posts(
            PostFilter(status=PostStatus.PUBLISHED), limit=1
        )

        assert len(posts) == 1
        assert total == 2

    @pytest.mark.asyncio
    async def test_empty_author_set_matches_nothing(self, service, post_repo, author_id):
        await post_repo.save(make_post(author_id, status=PostStatus.PUBLISHED))

        posts, total = await service.list_posts(PostFilter(author_ids=[]))

        assert posts == []
        assert total == 0

    @pytest.mark.asyncio
    async def test_search_matches_title_content_and_tags(
        self, service, post_repo, author_id
    ):
        await post_repo.save(make_post(author_id, title="Learning Rust quickly"))
        await post_repo.save(make_post(author_id, tags=["rustacean"]))
        await post_repo.save(make_post(author_id, title="Gardening for beginners"))

        posts, total = await service.list_posts(PostFilter(search="RUST"))

        assert total == 2

    @pytest.mark.asyncio
    async def test_sort_by_title_ascending(self, service, post_repo, author_id):
        for title in ("Charlie post", "Alpha post", "Bravo post"):
            await post_repo.save(make_post(author_id, title=title))

        posts, _ = await service.list_posts(
            PostFilter(), sort_by=SortField.TITLE, direction=SortDirection.ASC
        )

        assert [p.title for p in posts] == ["Alpha post", "Bravo post", "Charlie post"]


class TestUpdatePost:
    @pytest.mark.asyncio
    async def test_publishing_persists(self, service, post_repo, author_id):
        post = await post_repo.save(make_post(author_id))

        updated = await service.update_post(post, status=PostStatus.PUBLISHED)

        stored = await post_repo.find_by_id(post.id)
        assert updated.status == PostStatus.PUBLISHED
        assert stored.published_at is not None

    @pytest.mark.asyncio
    async def test_backwards_transition_rejected(self, service, post_repo, author_id):
        post = await post_repo.save(make_post(author_id, status=PostStatus.ARCHIVED))

        with pytest.raises(InvalidStatusTransitionError):
            await service.update_post(post, status=PostStatus.PUBLISHED)

    @pytest.mark.asyncio
    async def test_admin_status_override(self, service, post_repo, author_id):
        post = await post_repo.save(make_post(author_id, status=PostStatus.PUBLISHED))

        updated = await service.set_status(post, PostStatus.DRAFT)

        assert updated.status == PostStatus.DRAFT
        assert updated.published_at == post.published_at

    @pytest.mark.asyncio
    async def test_edit_keeps_views_counted_after_load(
        self, service, post_repo, author_id
    ):
        post = await post_repo.save(make_post(author_id, status=PostStatus.PUBLISHED))
        loaded = await service.get_by_id(post.id)
        for _ in range(3):
            await post_repo.increment_views(post.id)

        updated = await service.update_post(loaded, title="Edited while being read")

        assert updated.views == 3
        assert (await post_repo.find_by_id(post.id)).views == 3

    @pytest.mark.asyncio
    async def test_moderation_keeps_views_counted_after_load(
        self, service, post_repo, author_id
    ):
        post = await post_repo.save(make_post(author_id, status=PostStatus.PUBLISHED))
        loaded = await service.get_by_id(post.id)
        await post_repo.increment_views(post.id)

        await service.set_status(loaded, PostStatus.ARCHIVED)

        assert (await post_repo.find_by_id(post.id)).views == 1


class TestRecordView:
    @pytest.mark.asyncio
    async def test_published_read_counts_once(self, service, post_repo, author_id):
        post = await post_repo.save(make_post(author_id, status=PostStatus.PUBLISHED))

        first = await service.record_view(post)
        second = await service.record_view(first)

        assert first.views == 1
        assert second.views == 2

    @pytest.mark.asyncio
    async def test_draft_read_is_not_counted(self, service, post_repo, author_id):
        post = await post_repo.save(make_post(author_id))

        viewed = await service.record_view(post)

        assert viewed.views == 0
        assert (await post_repo.find_by_id(post.id)).views == 0


class TestDeletePost:
    @pytest.mark.asyncio
    async def test_delete(self, service, post_repo, author_id):
        post = await post_repo.save(make_post(author_id))

        await service.delete_post(post)

        assert await post_repo.find_by_id(post.id) is None
