"""Pytest configuration and fixtures."""

import os
import tempfile
from collections.abc import AsyncGenerator
from datetime import timedelta
from pathlib import Path
from typing import Any, Callable

# Test settings must be in place before any application module is imported.
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["APP_ENV"] = "test"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_EMAILS"] = "owner@example.com"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="portfolio-uploads-")
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from domain.entities.contact import ContactSubmission
from domain.entities.identity import AdminEmailPolicy
from domain.entities.user import User, UserRole
from domain.services.auth_service import AuthService
from infrastructure.auth.google_oauth import GoogleOAuthClient
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.passwords import BcryptPasswordHasher
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork
from infrastructure.storage.uploads import LocalFileStorage

# Test database URL (SQLite in memory, one shared connection per engine)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_EMAIL = "owner@example.com"
ADMIN_PASSWORD = "correct horse battery staple"
USER_PASSWORD = "user-password-1"


class RecordingNotifier:
    """Stands in for the SMTP notifier and records what it was asked to send."""

    def __init__(self, fail: bool = False) -> None:
        self.sent: list[ContactSubmission] = []
        self.fail = fail

    async def notify(self, submission: ContactSubmission) -> bool:
        self.sent.append(submission)
        return not self.fail


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with all tables, per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for repository tests."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Unit of Work factory bound to the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        lifetime=timedelta(hours=1),
    )


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def admin_policy() -> AdminEmailPolicy:
    return AdminEmailPolicy([ADMIN_EMAIL])


@pytest.fixture
def auth_service(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    password_hasher: BcryptPasswordHasher,
    auth_provider: JWTAuthProvider,
    admin_policy: AdminEmailPolicy,
) -> AuthService:
    return AuthService(
        uow_factory,
        password_hasher=password_hasher,
        token_provider=auth_provider,
        admin_policy=admin_policy,
    )


@pytest.fixture
def upload_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def app(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    session_factory: async_sessionmaker[AsyncSession],
    auth_service: AuthService,
    auth_provider: JWTAuthProvider,
    upload_dir: Path,
    notifier: RecordingNotifier,
) -> Any:
    """
    Application wired to the test database.

    Every service factory is overridden so nothing touches the configured
    engine, the real upload directory, SMTP or Google.
    """
    import api.v1.dependencies as deps
    from domain.services.blog_post_service import BlogPostService
    from domain.services.contact_service import ContactService
    from domain.services.feed_service import FeedService
    from domain.services.project_service import ProjectService
    from domain.services.resume_service import ResumeService
    from domain.services.testimonial_service import TestimonialService
    from infrastructure.database.session import get_async_session
    from main import create_app

    app = create_app(upload_dir=upload_dir)

    resume_service = ResumeService(uow_factory)
    storage = LocalFileStorage(upload_dir)

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[deps.get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[deps.get_auth_service] = lambda: auth_service
    app.dependency_overrides[deps.get_google_oauth_client] = lambda: GoogleOAuthClient(
        client_id="", client_secret=""
    )
    app.dependency_overrides[deps.get_project_service] = lambda: ProjectService(uow_factory)
    app.dependency_overrides[deps.get_blog_post_service] = lambda: BlogPostService(uow_factory)
    app.dependency_overrides[deps.get_testimonial_service] = lambda: TestimonialService(
        uow_factory
    )
    app.dependency_overrides[deps.get_contact_service] = lambda: ContactService(uow_factory)
    app.dependency_overrides[deps.get_resume_service] = lambda: resume_service
    app.dependency_overrides[deps.get_feed_service] = lambda: FeedService(
        uow_factory,
        site_url="https://portfolio.test",
        title="Test Blog",
        description="Test feed",
    )
    app.dependency_overrides[deps.get_contact_notifier] = lambda: notifier
    app.dependency_overrides[deps.get_file_storage] = lambda: storage
    app.dependency_overrides[get_async_session] = override_get_async_session

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def client(app: Any) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client (no auth)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def admin_user(auth_service: AuthService) -> User:
    return await auth_service.register(
        username="admin",
        email=ADMIN_EMAIL,
        password=ADMIN_PASSWORD,
        role=UserRole.ADMIN,
    )


@pytest.fixture
async def regular_user(auth_service: AuthService) -> User:
    return await auth_service.register(
        username="reader",
        email="reader@example.com",
        password=USER_PASSWORD,
    )


@pytest.fixture
def admin_headers(auth_service: AuthService, admin_user: User) -> dict[str, str]:
    """Authorization headers for an admin."""
    return {"Authorization": f"Bearer {auth_service.issue_token(admin_user)}"}


@pytest.fixture
def user_headers(auth_service: AuthService, regular_user: User) -> dict[str, str]:
    """Authorization headers for a non-admin user."""
    return {"Authorization": f"Bearer {auth_service.issue_token(regular_user)}"}
