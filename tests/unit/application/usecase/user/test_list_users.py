"""Unit tests for ListUsersUseCase."""

from dishka import AsyncContainer
import pytest

from blog.application.usecase.user import ListUsersRequest, ListUsersUseCase
from blog.domain.error import AuthorizationError, ValidationError
from blog.domain.service import Actor, UserService
from blog.domain.value import Role
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListUsersUseCase:
    """Tests for ListUsersUseCase."""

    @pytest.mark.asyncio
    async def test_admin_pages_through_users(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ListUsersUseCase)
        user_service = await unit_env.get(UserService)
        admin = await user_service.create_user(
            "Root", "root@example.com", "secret1", Role.ADMIN
        )
        for i in range(4):
            await user_service.create_user(f"User {i}", f"u{i}@example.com", "secret1")

        response = await use_case.execute(
            ListUsersRequest(actor=Actor.for_user(admin), page=2, limit=2)
        )

        assert len(response.users) == 2
        assert response.pagination.total_items == 5
        assert response.pagination.total_pages == 3
        assert response.pagination.current_page == 2
        assert response.pagination.has_next_page
        assert response.pagination.has_prev_page

    @pytest.mark.asyncio
    async def test_member_forbidden(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ListUsersUseCase)
        user_service = await unit_env.get(UserService)
        member = await user_service.create_user("Member", "m@example.com", "secret1")

        with pytest.raises(AuthorizationError):
            await use_case.execute(ListUsersRequest(actor=Actor.for_user(member)))

    @pytest.mark.asyncio
    async def test_limit_above_maximum(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(ListUsersUseCase)
        user_service = await unit_env.get(UserService)
        admin = await user_service.create_user(
            "Root", "root@example.com", "secret1", Role.ADMIN
        )

        with pytest.raises(ValidationError):
            await use_case.execute(
                ListUsersRequest(actor=Actor.for_user(admin), limit=1000)
            )
