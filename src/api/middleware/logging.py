"""Request logging middleware."""

import time
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from core.config import settings

logger = structlog.get_logger()

# Probes hit these constantly; logged at debug only.
QUIET_PATHS = frozenset({f"{settings.api_prefix}/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Bind per-request log context and log each request with its duration."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=getattr(request.state, "request_id", "unknown"),
            method=request.method,
            path=request.url.path,
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                "request_failed",
                error=str(exc),
                duration_ms=_elapsed_ms(started),
            )
            raise

        user = getattr(request.state, "user", None)
        fields = {
            "status_code": response.status_code,
            "duration_ms": _elapsed_ms(started),
            "client": request.client.host if request.client else None,
        }
        if user is not None:
            fields["user_id"] = user.id

        if request.url.path in QUIET_PATHS:
            logger.debug("request_completed", **fields)
        elif response.status_code >= 500:
            logger.warning("request_completed", **fields)
        else:
            logger.info("request_completed", **fields)
        return response


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
