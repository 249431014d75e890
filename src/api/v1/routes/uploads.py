"""File upload routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, File, Request, UploadFile

from api.dependencies.auth import AdminUser
from api.v1.dependencies import get_file_storage
from api.v1.schemas.blog_post import BlogImageUploadResponse
from core.config import settings
from core.rate_limit import WRITE_LIMIT, limiter
from infrastructure.storage.uploads import LocalFileStorage

router = APIRouter(prefix="/upload", tags=["uploads"])

BLOG_IMAGE_DIR = "blog-images"


@router.post(
    "/blog-image",
    response_model=BlogImageUploadResponse,
    summary="Upload a blog image",
    responses={
        400: {"description": "No image uploaded"},
        413: {"description": "Image larger than the configured limit"},
        415: {"description": "Not an allowed image type"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upload_blog_image(
    request: Request,
    admin: AdminUser,
    image: Annotated[UploadFile, File()],
    storage: LocalFileStorage = Depends(get_file_storage),
) -> BlogImageUploadResponse:
    """Store an image under ``blog-images/`` with a unique, timestamped name."""
    stored = await storage.save(
        image,
        original_name=image.filename,
        content_type=image.content_type,
        allowed_types=settings.blog_image_types_list,
        max_bytes=settings.blog_image_max_bytes,
        subdir=BLOG_IMAGE_DIR,
        prefix="blog",
    )
    return BlogImageUploadResponse(
        success=True,
        filename=stored.filename,
        original_name=stored.original_name,
        url=stored.url,
        mimetype=stored.content_type,
    )
