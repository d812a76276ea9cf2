"""Unit tests for DeleteUserUseCase."""

from dishka import AsyncContainer
import pytest

from blog.application.usecase.user import DeleteUserRequest, DeleteUserUseCase
from blog.domain.error import AuthorizationError, BusinessRuleViolationError
from blog.domain.repository import PostRepository, UserRepository
from blog.domain.service import Actor, UserService
from blog.domain.value import PostStatus, Role
from tests.factories import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase."""

    @pytest.mark.asyncio
    async def test_admin_deletes_user_and_their_posts(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(DeleteUserUseCase)
        user_service = await unit_env.get(UserService)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_service.create_user(
            "Root", "root@example.com", "secret1", Role.ADMIN
        )
        member = await user_service.create_user("Member", "member@example.com", "secret1")
        post = await post_repo.save(make_post(member.id, status=PostStatus.PUBLISHED))

        await use_case.execute(
            DeleteUserRequest(actor=Actor.for_user(admin), user_id=member.id)
        )

        assert await user_repo.find_by_id(member.id) is None
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_admin_cannot_delete_self(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(DeleteUserUseCase)
        user_service = await unit_env.get(UserService)
        admin = await user_service.create_user(
            "Root", "root@example.com", "secret1", Role.ADMIN
        )

        with pytest.raises(
            BusinessRuleViolationError, match="You cannot delete your own account"
        ):
            await use_case.execute(
                DeleteUserRequest(actor=Actor.for_user(admin), user_id=admin.id)
            )

    @pytest.mark.asyncio
    async def test_member_cannot_delete_others(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(DeleteUserUseCase)
        user_service = await unit_env.get(UserService)
        alice = await user_service.create_user("Alice", "alice@example.com", "secret1")
        bob = await user_service.create_user("Bob", "bob@example.com", "secret1")

        with pytest.raises(AuthorizationError, match="Admin access required"):
            await use_case.execute(
                DeleteUserRequest(actor=Actor.for_user(alice), user_id=bob.id)
            )
