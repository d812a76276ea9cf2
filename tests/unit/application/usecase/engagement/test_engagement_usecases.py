"""Unit tests for AddCommentUseCase and ToggleLikeUseCase."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from blog.application.usecase.engagement import (
    AddCommentRequest,
    AddCommentUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from blog.domain.error import AuthenticationError, InvalidStateError, NotFoundError
from blog.domain.repository import PostRepository
from blog.domain.service import Actor, UserService
from blog.domain.value import PostId, PostStatus
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_full_comment_list_with_commenters(
        self, unit_env: AsyncContainer
    ):
        use_case = await unit_env.get(AddCommentUseCase)
        user_service = await unit_env.get(UserService)
        post_repo = await unit_env.get(PostRepository)
        author = await user_service.create_user("Alice", "alice@example.com", "secret1")
        reader = await user_service.create_user("Bob", "bob@example.com", "secret1")
        post = await post_repo.save(make_post(author.id, status=PostStatus.PUBLISHED))

        await use_case.execute(
            AddCommentRequest(
                actor=Actor.for_user(author), post_id=post.id, content="Thanks all"
            )
        )
        response = await use_case.execute(
            AddCommentRequest(
                actor=Actor.for_user(reader), post_id=post.id, content="Great read"
            )
        )

        assert [c.content for c in response.comments] == ["Thanks all", "Great read"]
        assert [c.user.name for c in response.comments] == ["Alice", "Bob"]

    @pytest.mark.asyncio
    async def test_draft_refuses_comments(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(AddCommentUseCase)
        user_service = await unit_env.get(UserService)
        post_repo = await unit_env.get(PostRepository)
        author = await user_service.create_user("Alice", "alice@example.com", "secret1")
        post = await post_repo.save(make_post(author.id))

        with pytest.raises(InvalidStateError, match="Cannot comment on unpublished blog"):
            await use_case.execute(
                AddCommentRequest(
                    actor=Actor.for_user(author), post_id=post.id, content="Hello"
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(AddCommentUseCase)
        user_service = await unit_env.get(UserService)
        post_repo = await unit_env.get(PostRepository)
        author = await user_service.create_user("Alice", "alice@example.com", "secret1")
        post = await post_repo.save(make_post(author.id, status=PostStatus.PUBLISHED))

        with pytest.raises(AuthenticationError):
            await use_case.execute(
                AddCommentRequest(actor=Actor.anonymous(), post_id=post.id, content="Hi")
            )


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_count(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ToggleLikeUseCase)
        user_service = await unit_env.get(UserService)
        post_repo = await unit_env.get(PostRepository)
        author = await user_service.create_user("Alice", "alice@example.com", "secret1")
        reader = await user_service.create_user("Bob", "bob@example.com", "secret1")
        post = await post_repo.save(make_post(author.id, status=PostStatus.PUBLISHED))
        request = ToggleLikeRequest(actor=Actor.for_user(reader), post_id=post.id)

        first = await use_case.execute(request)
        second = await use_case.execute(request)

        assert (first.liked, first.like_count) == (True, 1)
        assert (second.liked, second.like_count) == (False, 0)

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ToggleLikeUseCase)
        user_service = await unit_env.get(UserService)
        reader = await user_service.create_user("Bob", "bob@example.com", "secret1")

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleLikeRequest(actor=Actor.for_user(reader), post_id=PostId(uuid4()))
            )
