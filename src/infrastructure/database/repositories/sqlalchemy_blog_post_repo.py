"""SQLAlchemy implementation of BlogPost repository."""

from typing import Optional

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.blog_post import BlogPost
from infrastructure.database.models import BlogPostModel


class SQLAlchemyBlogPostRepository:
    """SQLAlchemy implementation of IBlogPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> BlogPost | None:
        """Get a blog post by ID."""
        model = await self._session.get(BlogPostModel, id)
        return self._to_entity(model) if model else None

    async def get_all(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        published_only: bool = False,
    ) -> list[BlogPost]:
        """Get all blog posts newest first.

        ``search`` is a case-insensitive substring match over title,
        content and excerpt; ``category`` is a case-insensitive exact match.
        """
        stmt = select(BlogPostModel).order_by(BlogPostModel.created_at.desc())
        if search:
            term = search.lower()
            stmt = stmt.where(
                or_(
                    func.lower(BlogPostModel.title).contains(term, autoescape=True),
                    func.lower(BlogPostModel.content).contains(term, autoescape=True),
                    func.lower(BlogPostModel.excerpt).contains(term, autoescape=True),
                )
            )
        if category:
            stmt = stmt.where(func.lower(BlogPostModel.category) == category.lower())
        if published_only:
            stmt = stmt.where(BlogPostModel.published == True)  # noqa: E712
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: BlogPost) -> BlogPost:
        """Create a new blog post."""
        model = self._to_model(post)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, post: BlogPost) -> BlogPost:
        """Update an existing blog post."""
        model = await self._session.get(BlogPostModel, post.id)
        if not model:
            raise ValueError(f"Blog post {post.id} not found")

        model.title = post.title
        model.excerpt = post.excerpt
        model.content = post.content
        model.category = post.category
        model.image_url = post.image_url
        model.read_time = post.read_time
        model.published = post.published
        model.updated_at = post.updated_at

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: str) -> bool:
        """Delete a blog post."""
        result = await self._session.execute(
            delete(BlogPostModel).where(BlogPostModel.id == id)
        )
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: BlogPostModel) -> BlogPost:
        """Convert ORM model to domain entity."""
        return BlogPost(
            id=model.id,
            title=model.title,
            excerpt=model.excerpt,
            content=model.content,
            category=model.category,
            image_url=model.image_url,
            read_time=model.read_time,
            published=bool(model.published),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: BlogPost) -> BlogPostModel:
        """Convert domain entity to ORM model."""
        return BlogPostModel(
            id=entity.id,
            title=entity.title,
            excerpt=entity.excerpt,
            content=entity.content,
            category=entity.category,
            image_url=entity.image_url,
            read_time=entity.read_time,
            published=entity.published,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
