"""Toggle like use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import CamelModel
from blog.domain.service import (
    Action,
    Actor,
    EngagementService,
    PostService,
    authorize,
)
from blog.domain.value import PostId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    actor: Actor
    post_id: PostId


class ToggleLikeResponse(CamelModel):
    """Toggle like response."""

    liked: bool
    like_count: int


class ToggleLikeUseCase:
    """Use case for liking a post, or taking a like back."""

    def __init__(
        self, post_service: PostService, engagement_service: EngagementService
    ) -> None:
        """Initialize toggle like use case.

        Args:
            post_service: Post domain service
            engagement_service: Likes and comments service
        """
        self.post_service = post_service
        self.engagement_service = engagement_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            AuthenticationError: If the caller is anonymous
            NotFoundError: If the post does not exist
        """
        with logfire.span("toggle_like.execute", post_id=str(request.post_id)):
            post = await self.post_service.get_by_id(request.post_id)
            authorize(request.actor, Action.ENGAGE, post)

            liked, like_count = await self.engagement_service.toggle_like(
                post, request.actor.user_id
            )
            return ToggleLikeResponse(liked=liked, like_count=like_count)
