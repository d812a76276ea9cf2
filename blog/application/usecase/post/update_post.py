"""Update post use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import (
    PostDetail,
    post_detail,
    referenced_user_ids,
)
from blog.domain.service import Action, Actor, PostService, UserService, authorize
from blog.domain.value import PostId, PostStatus


class UpdatePostRequest(BaseModel):
    """Update post request.

    Only the fields listed here are editable; None leaves a field as is.
    """

    actor: Actor
    post_id: PostId
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    tags: Optional[list[str]] = None
    category: Optional[str] = None
    status: Optional[PostStatus] = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    blog: PostDetail


class UpdatePostUseCase:
    """Use case for the author (or an admin) editing a post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the caller is neither author nor admin
            InvalidStatusTransitionError: On a backwards status change
            ValidationError: If an edited field is out of range
        """
        with logfire.span("update_post.execute", post_id=str(request.post_id)):
            post = await self.post_service.get_by_id(request.post_id)
            authorize(request.actor, Action.UPDATE, post)

            updated = await self.post_service.update_post(
                post,
                title=request.title,
                content=request.content,
                excerpt=request.excerpt,
                tags=request.tags,
                category=request.category,
                status=request.status,
            )
            users = await self.user_service.get_by_ids(
                referenced_user_ids([updated], with_comments=True)
            )
            return UpdatePostResponse(blog=post_detail(updated, users))
