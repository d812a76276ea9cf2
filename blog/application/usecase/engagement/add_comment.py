"""Add comment use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import CommentView, comment_views
from blog.domain.service import (
    Action,
    Actor,
    EngagementService,
    PostService,
    UserService,
    authorize,
)
from blog.domain.value import PostId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    actor: Actor
    post_id: PostId
    content: str


class AddCommentResponse(BaseModel):
    """Add comment response: the post's full comment list."""

    comments: list[CommentView]


class AddCommentUseCase:
    """Use case for commenting on a published post."""

    def __init__(
        self,
        post_service: PostService,
        engagement_service: EngagementService,
        user_service: UserService,
    ) -> None:
        """Initialize add comment use case.

        Args:
            post_service: Post domain service
            engagement_service: Likes and comments service
            user_service: User domain service
        """
        self.post_service = post_service
        self.engagement_service = engagement_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Raises:
            AuthenticationError: If the caller is anonymous
            NotFoundError: If the post does not exist
            InvalidStateError: If the post is not published
        """
        with logfire.span("add_comment.execute", post_id=str(request.post_id)):
            post = await self.post_service.get_by_id(request.post_id)
            authorize(request.actor, Action.ENGAGE, post)

            comments = await self.engagement_service.add_comment(
                post, request.actor.user_id, request.content
            )
            users = await self.user_service.get_by_ids(
                [c.user_id for c in comments if c.user_id is not None]
            )
            return AddCommentResponse(comments=comment_views(comments, users))
