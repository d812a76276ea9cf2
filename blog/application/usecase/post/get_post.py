"""Get post use case."""

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import (
    PostDetail,
    post_detail,
    referenced_user_ids,
)
from blog.domain.error import NotFoundError
from blog.domain.service import (
    Action,
    Actor,
    PostService,
    UserService,
    authorize,
    decide,
)


class GetPostRequest(BaseModel):
    """Get post request.

    ``public`` lookups only ever show published posts and answer 404
    for anything else, so drafts cannot be discovered by slug.
    """

    actor: Actor
    slug: str
    public: bool = False


class GetPostResponse(BaseModel):
    """Get post response."""

    blog: PostDetail


class GetPostUseCase:
    """Use case for reading a single post by slug.

    A successful read of a published post counts one view.
    """

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If no post has the slug, or a public lookup
                hits an unpublished post
            AuthenticationError: Anonymous caller on an unpublished post
            AuthorizationError: Unpublished post of someone else
        """
        with logfire.span("get_post.execute", slug=request.slug, public=request.public):
            post = await self.post_service.get_by_slug(request.slug)

            if request.public:
                if not decide(Actor.anonymous(), Action.READ, post).allowed:
                    logfire.warn("Public lookup of unpublished post", slug=request.slug)
                    raise NotFoundError("Blog", request.slug)
            else:
                authorize(request.actor, Action.READ, post)

            post = await self.post_service.record_view(post)
            users = await self.user_service.get_by_ids(
                referenced_user_ids([post], with_comments=True)
            )
            return GetPostResponse(blog=post_detail(post, users))
