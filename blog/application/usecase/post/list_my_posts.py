"""List my posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import (
    Pagination,
    PostSummary,
    page_window,
    post_summary,
)
from blog.config import PaginationSettings
from blog.domain.repository import PostFilter
from blog.domain.service import Actor, PostService, UserService, require_authenticated
from blog.domain.value import PostStatus


class ListMyPostsRequest(BaseModel):
    """List my posts request."""

    actor: Actor
    page: int = 1
    limit: Optional[int] = None
    status: Optional[PostStatus] = None


class ListMyPostsResponse(BaseModel):
    """List my posts response."""

    blogs: list[PostSummary]
    pagination: Pagination


class ListMyPostsUseCase:
    """Use case for an author's own posts in any status, newest first."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        self.post_service = post_service
        self.user_service = user_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListMyPostsRequest) -> ListMyPostsResponse:
        """Execute list my posts flow.

        Raises:
            AuthenticationError: If the caller is anonymous
            ValidationError: If page or limit is out of range
        """
        user_id = require_authenticated(request.actor)
        limit, offset = page_window(
            request.page,
            request.limit or self.pagination_settings.default_limit,
            self.pagination_settings.max_limit,
        )

        with logfire.span("list_my_posts.execute", user_id=str(user_id)):
            posts, total = await self.post_service.list_posts(
                PostFilter(status=request.status, author_ids=[user_id]),
                limit=limit,
                offset=offset,
            )
            users = await self.user_service.get_by_ids([user_id])

            return ListMyPostsResponse(
                blogs=[post_summary(post, users) for post in posts],
                pagination=Pagination.build(request.page, limit, total),
            )
