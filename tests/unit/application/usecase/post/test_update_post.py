"""Unit tests for UpdatePostUseCase, DeletePostUseCase and SetPostStatusUseCase."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from blog.application.usecase.post import (
    DeletePostRequest,
    DeletePostUseCase,
    SetPostStatusRequest,
    SetPostStatusUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from blog.domain.error import (
    AuthorizationError,
    InvalidStatusTransitionError,
    NotFoundError,
)
from blog.domain.repository import PostRepository
from blog.domain.service import Actor, UserService
from blog.domain.value import PostId, PostStatus, Role
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _users(unit_env: AsyncContainer):
    user_service = await unit_env.get(UserService)
    author = await user_service.create_user("Alice", "alice@example.com", "secret1")
    stranger = await user_service.create_user("Bob", "bob@example.com", "secret1")
    admin = await user_service.create_user(
        "Root", "root@example.com", "secret1", Role.ADMIN
    )
    return author, stranger, admin


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_publishes_draft(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author, _, _ = await _users(unit_env)
        post = await post_repo.save(make_post(author.id))

        response = await use_case.execute(
            UpdatePostRequest(
                actor=Actor.for_user(author),
                post_id=post.id,
                title="A retitled post",
                status=PostStatus.PUBLISHED,
            )
        )

        assert response.blog.title == "A retitled post"
        assert response.blog.slug == str(post.slug)
        assert response.blog.status == PostStatus.PUBLISHED
        assert response.blog.published_at is not None

    @pytest.mark.asyncio
    async def test_stranger_forbidden(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author, stranger, _ = await _users(unit_env)
        post = await post_repo.save(make_post(author.id))

        with pytest.raises(AuthorizationError, match="Not authorized to update this blog"):
            await use_case.execute(
                UpdatePostRequest(
                    actor=Actor.for_user(stranger),
                    post_id=post.id,
                    title="Hijacked title",
                )
            )

        assert (await post_repo.find_by_id(post.id)).title == post.title

    @pytest.mark.asyncio
    async def test_admin_may_edit_but_not_move_backwards(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author, _, admin = await _users(unit_env)
        post = await post_repo.save(make_post(author.id, status=PostStatus.PUBLISHED))

        response = await use_case.execute(
            UpdatePostRequest(
                actor=Actor.for_user(admin), post_id=post.id, category="Moderated"
            )
        )
        assert response.blog.category == "Moderated"

        with pytest.raises(InvalidStatusTransitionError):
            await use_case.execute(
                UpdatePostRequest(
                    actor=Actor.for_user(admin),
                    post_id=post.id,
                    status=PostStatus.DRAFT,
                )
            )

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(UpdatePostUseCase)
        author, _, _ = await _users(unit_env)

        with pytest.raises(NotFoundError, match="Blog not found"):
            await use_case.execute(
                UpdatePostRequest(
                    actor=Actor.for_user(author),
                    post_id=PostId(uuid4()),
                    title="Nothing to edit",
                )
            )


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author, _, _ = await _users(unit_env)
        post = await post_repo.save(make_post(author.id))

        response = await use_case.execute(
            DeletePostRequest(actor=Actor.for_user(author), post_id=post.id)
        )

        assert response.message == "Blog deleted successfully"
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_admin_deletes_someone_elses(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author, _, admin = await _users(unit_env)
        post = await post_repo.save(make_post(author.id))

        response = await use_case.execute(
            DeletePostRequest(actor=Actor.for_user(admin), post_id=post.id)
        )

        assert response.message == "Blog deleted successfully by admin"

    @pytest.mark.asyncio
    async def test_stranger_forbidden(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author, stranger, _ = await _users(unit_env)
        post = await post_repo.save(make_post(author.id))

        with pytest.raises(AuthorizationError):
            await use_case.execute(
                DeletePostRequest(actor=Actor.for_user(stranger), post_id=post.id)
            )

        assert await post_repo.find_by_id(post.id) is not None


class TestSetPostStatusUseCase:
    """Tests for SetPostStatusUseCase."""

    @pytest.mark.asyncio
    async def test_admin_unpublishes(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(SetPostStatusUseCase)
        post_repo = await unit_env.get(PostRepository)
        author, _, admin = await _users(unit_env)
        post = await post_repo.save(make_post(author.id, status=PostStatus.PUBLISHED))

        response = await use_case.execute(
            SetPostStatusRequest(
                actor=Actor.for_user(admin), post_id=post.id, status=PostStatus.DRAFT
            )
        )

        assert response.blog.status == PostStatus.DRAFT
        assert (await post_repo.find_by_id(post.id)).status == PostStatus.DRAFT

    @pytest.mark.asyncio
    async def test_author_is_not_a_moderator(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(SetPostStatusUseCase)
        post_repo = await unit_env.get(PostRepository)
        author, _, _ = await _users(unit_env)
        post = await post_repo.save(make_post(author.id, status=PostStatus.PUBLISHED))

        with pytest.raises(AuthorizationError, match="Admin access required"):
            await use_case.execute(
                SetPostStatusRequest(
                    actor=Actor.for_user(author),
                    post_id=post.id,
                    status=PostStatus.ARCHIVED,
                )
            )
