"""Blog post service layer."""

from datetime import datetime
from typing import Any, Callable, List, Optional

import structlog

from core.exceptions import EntityNotFoundError
from domain.entities.blog_post import BlogPost
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.changes import merge, require_text

logger = structlog.get_logger()

REQUIRED_FIELDS = ("title", "excerpt", "content", "category")
IMMUTABLE_FIELDS = ("id", "created_at", "updated_at")


class BlogPostService:
    """Service layer for BlogPost business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[BlogPost]:
        """List posts newest first with optional search and category filters."""
        async with self._uow_factory() as uow:
            return await uow.blog_posts.get_all(search=search, category=category)

    async def get_published(self) -> List[BlogPost]:
        """List only published posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.blog_posts.get_all(published_only=True)

    async def get_by_id(self, post_id: str) -> BlogPost:
        async with self._uow_factory() as uow:
            post = await uow.blog_posts.get(post_id)
            if not post:
                raise EntityNotFoundError("blog_post", post_id)
            return post

    async def create(self, **fields: Any) -> BlogPost:
        """Create a blog post; created_at and updated_at start equal."""
        require_text(fields, REQUIRED_FIELDS)
        for name in IMMUTABLE_FIELDS:
            fields.pop(name, None)
        fields["published"] = bool(fields.get("published", False))
        now = datetime.utcnow()

        async with self._uow_factory() as uow:
            created = await uow.blog_posts.create(
                BlogPost(**fields, created_at=now, updated_at=now)
            )
            await uow.commit()
            logger.info("blog_post_created", post_id=created.id, published=created.published)
            return created

    async def update(self, post_id: str, changes: dict[str, Any]) -> BlogPost:
        """Merge supplied fields and refresh updated_at."""
        changes = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        if "published" in changes:
            changes["published"] = bool(changes["published"])

        async with self._uow_factory() as uow:
            post = await uow.blog_posts.get(post_id)
            if not post:
                raise EntityNotFoundError("blog_post", post_id)

            merged = merge(post, changes, REQUIRED_FIELDS)
            merged.updated_at = max(datetime.utcnow(), post.updated_at)
            updated = await uow.blog_posts.update(merged)
            await uow.commit()
            return updated

    async def delete(self, post_id: str) -> None:
        async with self._uow_factory() as uow:
            deleted = await uow.blog_posts.delete(post_id)
            if not deleted:
                raise EntityNotFoundError("blog_post", post_id)
            await uow.commit()
            logger.info("blog_post_deleted", post_id=post_id)
