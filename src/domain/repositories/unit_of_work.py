"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.blog_post_repository import IBlogPostRepository
from domain.repositories.contact_repository import IContactSubmissionRepository
from domain.repositories.project_repository import IProjectRepository
from domain.repositories.resume_repository import IResumeRepository
from domain.repositories.testimonial_repository import ITestimonialRepository
from domain.repositories.user_repository import IUserRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions."""

    projects: IProjectRepository
    blog_posts: IBlogPostRepository
    testimonials: ITestimonialRepository
    contact_submissions: IContactSubmissionRepository
    resumes: IResumeRepository
    users: IUserRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
