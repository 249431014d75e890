"""Authentication dependencies for FastAPI."""

from typing import Annotated

import structlog
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from api.v1.dependencies import get_auth_provider, get_auth_service
from core.exceptions import AuthenticationError, AuthorizationError, ErrorCode, InvalidTokenError
from domain.entities.identity import TokenUser
from domain.services.auth_service import AuthService
from infrastructure.auth.jwt_provider import JWTAuthProvider

# Security scheme for OpenAPI docs
security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenUser:
    """
    Dependency to get the current authenticated user.

    Raises:
        AuthenticationError: If no bearer token was sent (401)
        InvalidTokenError: If the token is malformed, expired, or revoked (403)
    """
    if not credentials:
        raise AuthenticationError(
            message="Authorization header required",
            error_code=ErrorCode.UNAUTHORIZED,
        )

    user = auth_provider.validate_token(credentials.credentials)
    if not user:
        raise InvalidTokenError()

    await auth_service.verify_session(user)

    request.state.user = user
    structlog.contextvars.bind_contextvars(user_id=user.id)
    return user


async def get_optional_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenUser | None:
    """
    Dependency to get the current user if a valid, unrevoked token was sent.

    Returns:
        TokenUser if authenticated, None otherwise (no exception raised)
    """
    if not credentials:
        return None

    user = auth_provider.validate_token(credentials.credentials)
    if not user:
        return None
    try:
        await auth_service.verify_session(user)
    except InvalidTokenError:
        return None
    return user


async def require_admin(
    user: Annotated[TokenUser, Depends(get_current_user)],
) -> TokenUser:
    """Dependency that additionally requires the admin role."""
    if not user.is_admin:
        raise AuthorizationError("Admin access required")
    return user


# Type aliases for convenience in route handlers
CurrentUser = Annotated[TokenUser, Depends(get_current_user)]
OptionalUser = Annotated[TokenUser | None, Depends(get_optional_user)]
AdminUser = Annotated[TokenUser, Depends(require_admin)]
