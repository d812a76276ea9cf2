"""Set post status use case (moderation)."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import (
    PostDetail,
    post_detail,
    referenced_user_ids,
)
from blog.domain.service import Action, Actor, PostService, UserService, authorize
from blog.domain.value import PostId, PostStatus


class SetPostStatusRequest(BaseModel):
    """Set post status request."""

    actor: Actor
    post_id: PostId
    status: PostStatus


class SetPostStatusResponse(BaseModel):
    """Set post status response."""

    blog: PostDetail


class SetPostStatusUseCase:
    """Use case for an admin setting any post status directly.

    Unlike ordinary edits this may move a post backwards, e.g. to
    unpublish it.
    """

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize set post status use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: SetPostStatusRequest) -> SetPostStatusResponse:
        """Execute moderation flow.

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the caller is not an admin
        """
        with logfire.span(
            "set_post_status.execute",
            post_id=str(request.post_id),
            status=request.status.value,
        ):
            post = await self.post_service.get_by_id(request.post_id)
            authorize(request.actor, Action.MODERATE, post)

            moderated = await self.post_service.set_status(post, request.status)
            users = await self.user_service.get_by_ids(
                referenced_user_ids([moderated], with_comments=True)
            )
            return SetPostStatusResponse(blog=post_detail(moderated, users))
