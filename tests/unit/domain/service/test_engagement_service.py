"""Unit tests for EngagementService."""

from uuid import uuid4

import pytest

from blog.domain.error import InvalidStateError, ValidationError
from blog.domain.service import EngagementService
from blog.domain.value import PostStatus, UserId
from blog.persistence.repository.inmemory import InMemoryPostRepository
from tests.factories import make_post


@pytest.fixture
def post_repo():
    return InMemoryPostRepository()


@pytest.fixture
def service(post_repo):
    return EngagementService(post_repo)


class TestToggleLike:
    """Tests for EngagementService.toggle_like()."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, service, post_repo):
        post = await post_repo.save(
            make_post(UserId(uuid4()), status=PostStatus.PUBLISHED)
        )
        reader = UserId(uuid4())

        liked, count = await service.toggle_like(post, reader)
        assert (liked, count) == (True, 1)

        refreshed = await post_repo.find_by_id(post.id)
        liked, count = await service.toggle_like(refreshed, reader)
        assert (liked, count) == (False, 0)

    @pytest.mark.asyncio
    async def test_likes_from_different_users_add_up(self, service, post_repo):
        post = await post_repo.save(
            make_post(UserId(uuid4()), status=PostStatus.PUBLISHED)
        )

        await service.toggle_like(post, UserId(uuid4()))
        _, count = await service.toggle_like(post, UserId(uuid4()))

        assert count == 2


class TestAddComment:
    """Tests for EngagementService.add_comment()."""

    @pytest.mark.asyncio
    async def test_appends_in_order(self, service, post_repo):
        post = await post_repo.save(
            make_post(UserId(uuid4()), status=PostStatus.PUBLISHED)
        )
        reader = UserId(uuid4())

        await service.add_comment(post, reader, "First!")
        comments = await service.add_comment(post, reader, "  Second thoughts  ")

        assert [c.content for c in comments] == ["First!", "Second thoughts"]
        assert all(c.user_id == reader for c in comments)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [PostStatus.DRAFT, PostStatus.ARCHIVED])
    async def test_unpublished_post_refuses(self, service, post_repo, status):
        post = await post_repo.save(make_post(UserId(uuid4()), status=status))

        with pytest.raises(InvalidStateError):
            await service.add_comment(post, UserId(uuid4()), "Hello")

        assert (await post_repo.find_by_id(post.id)).comment_count == 0

    @pytest.mark.asyncio
    async def test_blank_comment_rejected(self, service, post_repo):
        post = await post_repo.save(
            make_post(UserId(uuid4()), status=PostStatus.PUBLISHED)
        )

        with pytest.raises(ValidationError):
            await service.add_comment(post, UserId(uuid4()), "   ")

    @pytest.mark.asyncio
    async def test_overlong_comment_rejected(self, service, post_repo):
        post = await post_repo.save(
            make_post(UserId(uuid4()), status=PostStatus.PUBLISHED)
        )

        with pytest.raises(ValidationError):
            await service.add_comment(post, UserId(uuid4()), "x" * 1001)
