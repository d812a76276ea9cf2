"""Unit tests for GetPostUseCase."""

from dishka import AsyncContainer
import pytest

from blog.application.usecase.post import GetPostRequest, GetPostUseCase
from blog.domain.error import AuthorizationError, NotFoundError
from blog.domain.repository import PostRepository
from blog.domain.service import Actor, UserService
from blog.domain.value import PostStatus, Role
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_each_read_of_published_post_counts(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetPostUseCase)
        user_service = await unit_env.get(UserService)
        post_repo = await unit_env.get(PostRepository)
        author = await user_service.create_user("Alice", "alice@example.com", "secret1")
        post = await post_repo.save(make_post(author.id, status=PostStatus.PUBLISHED))

        first = await use_case.execute(
            GetPostRequest(actor=Actor.anonymous(), slug=str(post.slug), public=True)
        )
        second = await use_case.execute(
            GetPostRequest(actor=Actor.for_user(author), slug=str(post.slug))
        )

        assert first.blog.views == 1
        assert second.blog.views == 2
        assert first.blog.author.name == "Alice"

    @pytest.mark.asyncio
    async def test_public_lookup_hides_drafts(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        user_service = await unit_env.get(UserService)
        author = await user_service.create_user("Alice", "alice@example.com", "secret1")
        post = await post_repo.save(make_post(author.id))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetPostRequest(
                    actor=Actor.for_user(author), slug=str(post.slug), public=True
                )
            )

    @pytest.mark.asyncio
    async def test_stranger_cannot_read_draft(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        user_service = await unit_env.get(UserService)
        author = await user_service.create_user("Alice", "alice@example.com", "secret1")
        stranger = await user_service.create_user("Bob", "bob@example.com", "secret1")
        post = await post_repo.save(make_post(author.id))

        with pytest.raises(AuthorizationError):
            await use_case.execute(
                GetPostRequest(actor=Actor.for_user(stranger), slug=str(post.slug))
            )

        assert (await post_repo.find_by_id(post.id)).views == 0

    @pytest.mark.asyncio
    async def test_owner_and_admin_read_draft_without_counting(
        self, unit_env: AsyncContainer
    ):
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        user_service = await unit_env.get(UserService)
        author = await user_service.create_user("Alice", "alice@example.com", "secret1")
        admin = await user_service.create_user(
            "Root", "root@example.com", "secret1", Role.ADMIN
        )
        post = await post_repo.save(make_post(author.id))

        for actor in (Actor.for_user(author), Actor.for_user(admin)):
            response = await use_case.execute(
                GetPostRequest(actor=actor, slug=str(post.slug))
            )
            assert response.blog.views == 0

    @pytest.mark.asyncio
    async def test_unknown_slug(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetPostRequest(actor=Actor.anonymous(), slug="no-such-post", public=True)
            )
