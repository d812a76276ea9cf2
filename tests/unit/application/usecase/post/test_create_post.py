"""Unit tests for CreatePostUseCase."""

from dishka import AsyncContainer
import pytest

from blog.application.usecase.post import CreatePostRequest, CreatePostUseCase
from blog.domain.error import AuthenticationError, ValidationError
from blog.domain.service import Actor, UserService
from blog.domain.value import PostStatus
from tests.factories import LONG_CONTENT
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_creates_draft_with_author(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(CreatePostUseCase)
        user_service = await unit_env.get(UserService)
        author = await user_service.create_user("Alice", "alice@example.com", "secret1")

        response = await use_case.execute(
            CreatePostRequest(
                actor=Actor.for_user(author),
                title="My very first post",
                content=LONG_CONTENT,
                tags=["Intro"],
            )
        )

        blog = response.blog
        assert blog.status == PostStatus.DRAFT
        assert blog.author.id == str(author.id)
        assert blog.author.email == "alice@example.com"
        assert blog.slug.startswith("my-very-first-post-")
        assert blog.tags == ["intro"]
        assert blog.like_count == 0
        assert blog.comments == []

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(CreatePostUseCase)

        with pytest.raises(AuthenticationError):
            await use_case.execute(
                CreatePostRequest(
                    actor=Actor.anonymous(), title="Sneaky post", content=LONG_CONTENT
                )
            )

    @pytest.mark.asyncio
    async def test_cannot_create_archived(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(CreatePostUseCase)
        user_service = await unit_env.get(UserService)
        author = await user_service.create_user("Alice", "alice@example.com", "secret1")

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreatePostRequest(
                    actor=Actor.for_user(author),
                    title="Already archived",
                    content=LONG_CONTENT,
                    status=PostStatus.ARCHIVED,
                )
            )
