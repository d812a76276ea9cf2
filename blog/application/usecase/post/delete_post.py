"""Delete post use case."""

import logfire
from pydantic import BaseModel

from blog.domain.service import Action, Actor, PostService, authorize
from blog.domain.value import PostId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    actor: Actor
    post_id: PostId


class DeletePostResponse(BaseModel):
    """Delete post response."""

    message: str


class DeletePostUseCase:
    """Use case for deleting a post with its likes and comments."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
            AuthorizationError: If the caller is neither author nor admin
        """
        with logfire.span("delete_post.execute", post_id=str(request.post_id)):
            post = await self.post_service.get_by_id(request.post_id)
            authorize(request.actor, Action.DELETE, post)

            await self.post_service.delete_post(post)

            if post.is_authored_by(request.actor.user_id):
                return DeletePostResponse(message="Blog deleted successfully")
            return DeletePostResponse(message="Blog deleted successfully by admin")
