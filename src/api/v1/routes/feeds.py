"""RSS and sitemap routes."""

from fastapi import APIRouter, Depends, Request, Response

from api.v1.dependencies import get_feed_service
from core.rate_limit import READ_LIMIT, limiter
from domain.services.feed_service import FeedService

router = APIRouter(tags=["feeds"])


@router.get("/rss.xml", summary="RSS feed of published posts", response_class=Response)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def rss_feed(
    request: Request,
    service: FeedService = Depends(get_feed_service),
) -> Response:
    return Response(content=await service.rss(), media_type="application/rss+xml")


@router.get("/sitemap.xml", summary="Sitemap", response_class=Response)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def sitemap(
    request: Request,
    service: FeedService = Depends(get_feed_service),
) -> Response:
    return Response(content=await service.sitemap(), media_type="application/xml")
