"""Dependency injection factories for API v1."""

from functools import lru_cache
from pathlib import Path
from typing import Callable

from core.config import settings
from domain.entities.identity import AdminEmailPolicy
from domain.services.auth_service import AuthService
from domain.services.blog_post_service import BlogPostService
from domain.services.contact_service import ContactService
from domain.services.feed_service import FeedService
from domain.services.project_service import ProjectService
from domain.services.resume_service import ResumeService
from domain.services.testimonial_service import TestimonialService
from infrastructure.auth.google_oauth import GoogleOAuthClient
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.passwords import BcryptPasswordHasher
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.email.notifier import ContactNotifier
from infrastructure.storage.uploads import LocalFileStorage


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_auth_provider() -> JWTAuthProvider:
    """Get the token provider."""
    return JWTAuthProvider()


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher()


@lru_cache
def get_admin_email_policy() -> AdminEmailPolicy:
    return AdminEmailPolicy(settings.admin_emails_list)


@lru_cache
def get_auth_service() -> AuthService:
    """Get Auth service instance."""
    return AuthService(
        get_uow_factory(),
        password_hasher=get_password_hasher(),
        token_provider=get_auth_provider(),
        admin_policy=get_admin_email_policy(),
    )


@lru_cache
def get_google_oauth_client() -> GoogleOAuthClient:
    return GoogleOAuthClient()


@lru_cache
def get_project_service() -> ProjectService:
    """Get Project service instance."""
    return ProjectService(get_uow_factory())


@lru_cache
def get_blog_post_service() -> BlogPostService:
    """Get BlogPost service instance."""
    return BlogPostService(get_uow_factory())


@lru_cache
def get_testimonial_service() -> TestimonialService:
    """Get Testimonial service instance."""
    return TestimonialService(get_uow_factory())


@lru_cache
def get_contact_service() -> ContactService:
    """Get ContactSubmission service instance."""
    return ContactService(get_uow_factory())


@lru_cache
def get_resume_service() -> ResumeService:
    """Get Resume service instance."""
    return ResumeService(get_uow_factory())


@lru_cache
def get_feed_service() -> FeedService:
    """Get Feed service instance."""
    return FeedService(
        get_uow_factory(),
        site_url=settings.site_url,
        title=settings.site_title,
        description=settings.site_description,
        author=settings.site_author,
    )


@lru_cache
def get_contact_notifier() -> ContactNotifier:
    return ContactNotifier()


@lru_cache
def get_file_storage() -> LocalFileStorage:
    return LocalFileStorage(Path(settings.upload_dir))
