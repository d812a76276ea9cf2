"""Create post use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from blog.application.usecase.common import PostDetail, post_detail
from blog.domain.service import (
    Action,
    Actor,
    PostService,
    ResourceKind,
    UserService,
    authorize,
)
from blog.domain.value import PostStatus


class CreatePostRequest(BaseModel):
    """Create post request."""

    actor: Actor  # Becomes the author
    title: str
    content: str
    status: PostStatus = PostStatus.DRAFT
    tags: list[str] = []
    category: Optional[str] = None
    excerpt: Optional[str] = None


class CreatePostResponse(BaseModel):
    """Create post response."""

    blog: PostDetail


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, user_service: UserService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
        """
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Check the caller may write posts
        2. Create the post (slug, excerpt and read time are derived)
        3. Resolve the author for the response

        Raises:
            AuthenticationError: If the caller is anonymous
            ValidationError: If the post is created archived or a field is
                out of range
        """
        authorize(request.actor, Action.CREATE, ResourceKind.POST)

        with logfire.span(
            "create_post.execute",
            author_id=str(request.actor.user_id),
            status=request.status.value,
        ):
            post = await self.post_service.create_post(
                author_id=request.actor.user_id,
                title=request.title,
                content=request.content,
                excerpt=request.excerpt,
                tags=request.tags,
                category=request.category,
                status=request.status,
            )
            users = await self.user_service.get_by_ids([post.author_id])
            return CreatePostResponse(blog=post_detail(post, users))
