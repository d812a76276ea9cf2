"""List users use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import Pagination, UserView, page_window
from blog.config import PaginationSettings
from blog.domain.service import Action, Actor, ResourceKind, UserService, authorize


class ListUsersRequest(BaseModel):
    """List users request."""

    actor: Actor
    page: int = 1
    limit: Optional[int] = None  # Falls back to the configured default


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserView]
    pagination: Pagination


class ListUsersUseCase:
    """Use case for the admin user directory, newest first."""

    def __init__(
        self, user_service: UserService, pagination_settings: PaginationSettings
    ) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
            pagination_settings: Page size defaults and bounds
        """
        self.user_service = user_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Raises:
            AuthenticationError: If the caller is anonymous
            AuthorizationError: If the caller is not an admin
            ValidationError: If page or limit is out of range
        """
        authorize(request.actor, Action.READ_LIST, ResourceKind.USER)

        limit, offset = page_window(
            request.page,
            request.limit or self.pagination_settings.default_limit,
            self.pagination_settings.max_limit,
        )
        with logfire.span("list_users.execute", page=request.page, limit=limit):
            users, total = await self.user_service.list_users(limit, offset)
            return ListUsersResponse(
                users=[UserView.from_user(user) for user in users],
                pagination=Pagination.build(request.page, limit, total),
            )
