"""SQLAlchemy Unit of Work implementation."""

from typing import Any, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.repositories.sqlalchemy_blog_post_repo import SQLAlchemyBlogPostRepository
from infrastructure.database.repositories.sqlalchemy_contact_repo import SQLAlchemyContactSubmissionRepository
from infrastructure.database.repositories.sqlalchemy_project_repo import SQLAlchemyProjectRepository
from infrastructure.database.repositories.sqlalchemy_resume_repo import SQLAlchemyResumeRepository
from infrastructure.database.repositories.sqlalchemy_testimonial_repo import SQLAlchemyTestimonialRepository
from infrastructure.database.repositories.sqlalchemy_user_repo import SQLAlchemyUserRepository


class SQLAlchemyUnitOfWork:
    """Unit of Work implementation using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

    def _require_session(self) -> AsyncSession:
        if not self._session:
            raise RuntimeError("UnitOfWork not initialized. Use as context manager.")
        return self._session

    @property
    def projects(self) -> SQLAlchemyProjectRepository:
        """Get project repository."""
        return SQLAlchemyProjectRepository(self._require_session())

    @property
    def blog_posts(self) -> SQLAlchemyBlogPostRepository:
        """Get blog post repository."""
        return SQLAlchemyBlogPostRepository(self._require_session())

    @property
    def testimonials(self) -> SQLAlchemyTestimonialRepository:
        """Get testimonial repository."""
        return SQLAlchemyTestimonialRepository(self._require_session())

    @property
    def contact_submissions(self) -> SQLAlchemyContactSubmissionRepository:
        """Get contact submission repository."""
        return SQLAlchemyContactSubmissionRepository(self._require_session())

    @property
    def resumes(self) -> SQLAlchemyResumeRepository:
        """Get resume repository."""
        return SQLAlchemyResumeRepository(self._require_session())

    @property
    def users(self) -> SQLAlchemyUserRepository:
        """Get user repository."""
        return SQLAlchemyUserRepository(self._require_session())

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session:
            await self._session.rollback()

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter the context manager and create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type],
        exc_val: Optional[Exception],
        exc_tb: Any,
    ) -> None:
        """Exit the context manager and cleanup."""
        if self._session:
            if exc_type:
                await self.rollback()
            await self._session.close()
            self._session = None
