"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.middleware.security import SecurityHeadersMiddleware
from api.routes.health import router as health_router
from api.v1.router import router as v1_router
from core.config import settings
from core.logging import setup_logging
from core.rate_limit import limiter, rate_limit_exceeded_handler

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log integration status on startup."""
    if not settings.admin_emails_list and settings.google_auth_enabled:
        logger.warning("google_auth_without_admin_emails")
    logger.info(
        "application_started",
        environment=settings.app_env,
        google_auth=settings.google_auth_enabled,
        email_notifications=settings.smtp_enabled,
    )
    yield
    logger.info("application_stopped")


def create_app(upload_dir: str | Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Portfolio Content API\n\n"
            "Projects, blog posts, testimonials, contact submissions and "
            "resumes for a personal portfolio site.\n\n"
            "### Authentication\n"
            "Reads are public. Writes require an admin token in the "
            "Authorization header:\n"
            "```\nAuthorization: Bearer <your_token>\n```\n\n"
            "Tokens come from `POST /api/auth/login` or Google sign-in."
        ),
        version="1.0.0",
        debug=settings.debug,
        openapi_tags=[
            {"name": "health", "description": "Health check endpoints"},
            {"name": "auth", "description": "Login, registration and Google sign-in"},
            {"name": "projects", "description": "Portfolio projects"},
            {"name": "blog-posts", "description": "Blog posts"},
            {"name": "testimonials", "description": "Client testimonials"},
            {"name": "contact", "description": "Contact form submissions"},
            {"name": "resumes", "description": "Resume files and the active resume"},
            {"name": "uploads", "description": "Blog image uploads"},
            {"name": "feeds", "description": "RSS and sitemap"},
        ],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Security & tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, hsts=settings.is_production)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(v1_router, prefix=settings.api_prefix)

    # Uploaded files
    uploads = Path(upload_dir or settings.upload_dir)
    uploads.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=uploads), name="uploads")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
