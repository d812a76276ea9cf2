"""Blog post routes."""

from typing import Annotated, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import Field, StringConstraints

from blog.application.usecase.common import CamelModel
from blog.application.usecase.engagement import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListMyPostsRequest,
    ListMyPostsResponse,
    ListMyPostsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    SetPostStatusRequest,
    SetPostStatusResponse,
    SetPostStatusUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from blog.domain.service import Actor
from blog.domain.value import PostStatus, SortDirection, SortField
from blog.interface.api.dependencies import (
    CurrentActor,
    OptionalActor,
    parse_post_id,
)
from blog.interface.api.envelope import Envelope, ok

router = APIRouter(prefix="/api/blogs", tags=["blogs"], route_class=DishkaRoute)

Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=5, max_length=200)]
Content = Annotated[str, StringConstraints(min_length=50)]
Excerpt = Annotated[str, StringConstraints(max_length=300)]


class CreatePostAPIRequest(CamelModel):
    """API request for creating a post."""

    title: Title
    content: Content
    status: PostStatus = PostStatus.DRAFT
    tags: list[str] = Field(default_factory=list)
    category: Optional[str] = None
    excerpt: Optional[Excerpt] = None


class UpdatePostAPIRequest(CamelModel):
    """API request for a partial post update. Omitted fields stay as they are."""

    title: Optional[Title] = None
    content: Optional[Content] = None
    status: Optional[PostStatus] = None
    tags: Optional[list[str]] = None
    category: Optional[str] = None
    excerpt: Optional[Excerpt] = None


class SetStatusAPIRequest(CamelModel):
    """API request for the admin status override."""

    status: PostStatus


class AddCommentAPIRequest(CamelModel):
    """API request for commenting on a post."""

    content: Annotated[
        str, StringConstraints(strip_whitespace=True, min_length=1, max_length=1000)
    ]


@router.get("", response_model=Envelope[ListPostsResponse])
async def list_posts(
    actor: OptionalActor,
    list_posts_use_case: FromDishka[ListPostsUseCase],
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1),
    search: Optional[str] = None,
    author: Optional[str] = None,
    category: Optional[str] = None,
    tag: Optional[str] = None,
    sort_by: SortField = Query(default=SortField.CREATED_AT, alias="sortBy"),
    sort_order: SortDirection = Query(default=SortDirection.DESC, alias="sortOrder"),
) -> Envelope[ListPostsResponse]:
    """List posts with filtering, sorting and pagination.

    Anonymous callers and plain users only see published posts.
    """
    result = await list_posts_use_case.execute(
        ListPostsRequest(
            actor=actor,
            page=page,
            limit=limit,
            search=search,
            author=author,
            category=category,
            tag=tag,
            sort_by=sort_by,
            sort_order=sort_order,
        )
    )
    return ok(result)


@router.get("/my-blogs", response_model=Envelope[ListMyPostsResponse])
async def list_my_posts(
    actor: CurrentActor,
    list_my_posts_use_case: FromDishka[ListMyPostsUseCase],
    page: int = Query(default=1, ge=1),
    limit: Optional[int] = Query(default=None, ge=1),
    post_status: Optional[PostStatus] = Query(default=None, alias="status"),
) -> Envelope[ListMyPostsResponse]:
    """List the caller's own posts in any status, newest first."""
    result = await list_my_posts_use_case.execute(
        ListMyPostsRequest(actor=actor, page=page, limit=limit, status=post_status)
    )
    return ok(result)


@router.get("/public/{slug}", response_model=Envelope[GetPostResponse])
async def get_public_post(
    slug: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> Envelope[GetPostResponse]:
    """Read a published post without signing in. Counts one view."""
    result = await get_post_use_case.execute(
        GetPostRequest(actor=Actor.anonymous(), slug=slug, public=True)
    )
    return ok(result)


@router.get("/{slug}", response_model=Envelope[GetPostResponse])
async def get_post(
    slug: str,
    actor: CurrentActor,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> Envelope[GetPostResponse]:
    """Read a post by slug.

    Drafts and archived posts are visible to their author and to admins.
    """
    result = await get_post_use_case.execute(GetPostRequest(actor=actor, slug=slug))
    return ok(result)


@router.post(
    "",
    response_model=Envelope[CreatePostResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    request: CreatePostAPIRequest,
    actor: CurrentActor,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> Envelope[CreatePostResponse]:
    """Create a post authored by the caller."""
    result = await create_post_use_case.execute(
        CreatePostRequest(
            actor=actor,
            title=request.title,
            content=request.content,
            status=request.status,
            tags=request.tags,
            category=request.category,
            excerpt=request.excerpt,
        )
    )
    return ok(result, message="Blog created successfully")


@router.put("/admin/{blog_id}/status", response_model=Envelope[SetPostStatusResponse])
async def set_post_status(
    blog_id: str,
    request: SetStatusAPIRequest,
    actor: CurrentActor,
    set_post_status_use_case: FromDishka[SetPostStatusUseCase],
) -> Envelope[SetPostStatusResponse]:
    """Set any status on any post. Admin only.

    Unlike ordinary updates this may move a post backwards, e.g.
    unpublishing it.
    """
    post_id = parse_post_id(blog_id)
    result = await set_post_status_use_case.execute(
        SetPostStatusRequest(actor=actor, post_id=post_id, status=request.status)
    )
    return ok(result, message="Blog status updated successfully")


@router.put("/{blog_id}", response_model=Envelope[UpdatePostResponse])
async def update_post(
    blog_id: str,
    request: UpdatePostAPIRequest,
    actor: CurrentActor,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> Envelope[UpdatePostResponse]:
    """Update a post. Author or admin only."""
    post_id = parse_post_id(blog_id)
    result = await update_post_use_case.execute(
        UpdatePostRequest(
            actor=actor,
            post_id=post_id,
            title=request.title,
            content=request.content,
            excerpt=request.excerpt,
            tags=request.tags,
            category=request.category,
            status=request.status,
        )
    )
    return ok(result, message="Blog updated successfully")


@router.delete("/{blog_id}", response_model=Envelope[None])
async def delete_post(
    blog_id: str,
    actor: CurrentActor,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> Envelope[None]:
    """Delete a post with its likes and comments. Author or admin only."""
    post_id = parse_post_id(blog_id)
    result = await delete_post_use_case.execute(
        DeletePostRequest(actor=actor, post_id=post_id)
    )
    return ok(message=result.message)


@router.post(
    "/{blog_id}/comments",
    response_model=Envelope[AddCommentResponse],
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    blog_id: str,
    request: AddCommentAPIRequest,
    actor: CurrentActor,
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> Envelope[AddCommentResponse]:
    """Comment on a published post."""
    post_id = parse_post_id(blog_id)
    result = await add_comment_use_case.execute(
        AddCommentRequest(actor=actor, post_id=post_id, content=request.content)
    )
    return ok(result, message="Comment added successfully")


@router.post("/{blog_id}/like", response_model=Envelope[ToggleLikeResponse])
async def toggle_like(
    blog_id: str,
    actor: CurrentActor,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
) -> Envelope[ToggleLikeResponse]:
    """Like a post, or take the like back if already liked."""
    post_id = parse_post_id(blog_id)
    result = await toggle_like_use_case.execute(
        ToggleLikeRequest(actor=actor, post_id=post_id)
    )
    return ok(result, message="Blog liked" if result.liked else "Blog unliked")
