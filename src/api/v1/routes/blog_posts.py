"""Blog post API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import AdminUser
from api.v1.dependencies import get_blog_post_service
from api.v1.schemas.blog_post import BlogPostCreate, BlogPostResponse, BlogPostUpdate
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.blog_post_service import BlogPostService

router = APIRouter(prefix="/blog-posts", tags=["blog-posts"])


@router.get(
    "",
    response_model=list[BlogPostResponse],
    summary="List blog posts",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_blog_posts(
    request: Request,
    search: str | None = None,
    category: str | None = None,
    service: BlogPostService = Depends(get_blog_post_service),
) -> list[BlogPostResponse]:
    """List posts newest first.

    ``search`` is a case-insensitive substring match over title, content and
    excerpt; ``category`` is a case-insensitive exact match.
    """
    posts = await service.get_all(search=search, category=category)
    return [BlogPostResponse.model_validate(p) for p in posts]


@router.get(
    "/{post_id}",
    response_model=BlogPostResponse,
    summary="Get a blog post",
    responses={404: {"description": "Blog post not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_blog_post(
    request: Request,
    post_id: str,
    service: BlogPostService = Depends(get_blog_post_service),
) -> BlogPostResponse:
    post = await service.get_by_id(post_id)
    return BlogPostResponse.model_validate(post)


@router.post(
    "",
    response_model=BlogPostResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a blog post",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_blog_post(
    request: Request,
    body: BlogPostCreate,
    admin: AdminUser,
    service: BlogPostService = Depends(get_blog_post_service),
) -> BlogPostResponse:
    post = await service.create(**body.model_dump())
    return BlogPostResponse.model_validate(post)


@router.put(
    "/{post_id}",
    response_model=BlogPostResponse,
    summary="Update a blog post",
    responses={404: {"description": "Blog post not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_blog_post(
    request: Request,
    post_id: str,
    body: BlogPostUpdate,
    admin: AdminUser,
    service: BlogPostService = Depends(get_blog_post_service),
) -> BlogPostResponse:
    """Partial update. ``updatedAt`` is refreshed on every update."""
    post = await service.update(post_id, body.model_dump(exclude_unset=True))
    return BlogPostResponse.model_validate(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a blog post",
    responses={404: {"description": "Blog post not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_blog_post(
    request: Request,
    post_id: str,
    admin: AdminUser,
    service: BlogPostService = Depends(get_blog_post_service),
) -> None:
    await service.delete(post_id)
    return None
