"""List posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import (
    Pagination,
    PostSummary,
    page_window,
    post_summary,
    referenced_user_ids,
)
from blog.config import PaginationSettings
from blog.domain.repository import PostFilter
from blog.domain.service import (
    Action,
    Actor,
    PostService,
    ResourceKind,
    UserService,
    authorize,
)
from blog.domain.value import PostStatus, SortDirection, SortField


class ListPostsRequest(BaseModel):
    """List posts request. All filters are optional and combined with AND."""

    actor: Actor
    page: int = 1
    limit: Optional[int] = None  # Falls back to the configured default
    search: Optional[str] = None  # Title, content or tag substring
    author: Optional[str] = None  # Author name substring
    category: Optional[str] = None  # Category substring
    tag: Optional[str] = None  # Exact tag
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortDirection = SortDirection.DESC


class ListPostsResponse(BaseModel):
    """List posts response."""

    blogs: list[PostSummary]
    pagination: Pagination


class ListPostsUseCase:
    """Use case for listing posts with filtering, sorting and pagination.

    Everyone but admins only sees published posts.
    """

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            pagination_settings: Page size defaults and bounds
        """
        self.post_service = post_service
        self.user_service = user_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Raises:
            ValidationError: If page or limit is out of range
        """
        authorize(request.actor, Action.READ_LIST, ResourceKind.POST)
        limit, offset = page_window(
            request.page,
            request.limit or self.pagination_settings.default_limit,
            self.pagination_settings.max_limit,
        )

        with logfire.span(
            "list_posts.execute",
            page=request.page,
            limit=limit,
            sort_by=request.sort_by.value,
            sort_order=request.sort_order.value,
        ):
            author_ids = None
            if request.author:
                author_ids = await self.user_service.find_ids_by_name(request.author)

            filters = PostFilter(
                status=None if request.actor.is_admin else PostStatus.PUBLISHED,
                author_ids=author_ids,
                search=request.search or None,
                category=request.category or None,
                tag=request.tag.strip().lower() if request.tag else None,
            )
            posts, total = await self.post_service.list_posts(
                filters,
                sort_by=request.sort_by,
                direction=request.sort_order,
                limit=limit,
                offset=offset,
            )
            users = await self.user_service.get_by_ids(referenced_user_ids(posts))

            return ListPostsResponse(
                blogs=[post_summary(post, users) for post in posts],
                pagination=Pagination.build(request.page, limit, total),
            )
