"""Authentication API routes: local login, registration and Google sign-in."""

import secrets
from urllib.parse import urlencode

import structlog
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import RedirectResponse

from api.dependencies.auth import CurrentUser, OptionalUser
from api.v1.dependencies import get_auth_service, get_google_oauth_client
from api.v1.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserEnvelope,
    UserResponse,
)
from core.config import settings
from core.exceptions import AuthorizationError, ErrorCode, FeatureDisabledError, FederatedLoginError
from core.rate_limit import AUTH_LIMIT, READ_LIMIT, limiter
from domain.entities.user import UserRole
from domain.services.auth_service import AuthService
from infrastructure.auth.google_oauth import GoogleOAuthClient, OAuthExchangeError

logger = structlog.get_logger()

router = APIRouter(prefix="/auth", tags=["auth"])

OAUTH_STATE_COOKIE = "oauth_state"
OAUTH_STATE_MAX_AGE = 600


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in with username and password",
    responses={
        400: {"description": "Username or password missing"},
        401: {"description": "Invalid credentials"},
    },
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def login(
    request: Request,
    body: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    """Exchange a username/password pair for a bearer token."""
    user, token = await service.login(body.username, body.password)
    return TokenResponse(user=UserResponse.model_validate(user), token=token)


@router.post(
    "/register",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Register a local account",
    responses={
        201: {"description": "Account created"},
        403: {"description": "Only admins may create admin accounts"},
        409: {"description": "Username or email already exists"},
    },
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def register(
    request: Request,
    body: RegisterRequest,
    caller: OptionalUser,
    service: AuthService = Depends(get_auth_service),
) -> UserEnvelope:
    """Create an account. Requesting the admin role requires an admin token."""
    if body.role == UserRole.ADMIN and (caller is None or not caller.is_admin):
        raise AuthorizationError("Admin access required to create admin accounts")

    user = await service.register(
        username=body.username,
        email=body.email,
        password=body.password,
        role=body.role,
    )
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserEnvelope, summary="Current user")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def me(
    request: Request,
    user: CurrentUser,
    service: AuthService = Depends(get_auth_service),
) -> UserEnvelope:
    """Return the account behind the bearer token."""
    account = await service.get_user(user.id)
    return UserEnvelope(user=UserResponse.model_validate(account))


@router.post(
    "/logout-all",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Revoke every token issued to the current user",
)
@limiter.limit(AUTH_LIMIT)  # type: ignore[untyped-decorator]
async def logout_all(
    request: Request,
    user: CurrentUser,
    service: AuthService = Depends(get_auth_service),
) -> Response:
    """Invalidate all outstanding tokens, including the one used for this call."""
    await service.revoke_all_sessions(user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _frontend_redirect(path: str, **params: str) -> RedirectResponse:
    url = f"{settings.frontend_url.rstrip('/')}{path}?{urlencode(params)}"
    response = RedirectResponse(url, status_code=status.HTTP_302_FOUND)
    response.delete_cookie(OAUTH_STATE_COOKIE)
    return response


@router.get(
    "/google",
    summary="Start Google sign-in",
    responses={
        302: {"description": "Redirect to Google"},
        503: {"description": "Google sign-in is not configured"},
    },
)
async def google_login(
    client: GoogleOAuthClient = Depends(get_google_oauth_client),
) -> RedirectResponse:
    """Redirect the browser to Google's consent screen."""
    if not client.enabled:
        raise FeatureDisabledError(
            ErrorCode.GOOGLE_AUTH_DISABLED, "Google OAuth not configured"
        )

    state = secrets.token_urlsafe(24)
    response = RedirectResponse(
        client.authorization_url(state), status_code=status.HTTP_302_FOUND
    )
    response.set_cookie(
        OAUTH_STATE_COOKIE,
        state,
        max_age=OAUTH_STATE_MAX_AGE,
        httponly=True,
        samesite="lax",
        secure=settings.is_production,
    )
    return response


@router.get(
    "/google/callback",
    summary="Google sign-in callback",
    responses={302: {"description": "Redirect to the frontend with a token or an error"}},
)
async def google_callback(
    request: Request,
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    client: GoogleOAuthClient = Depends(get_google_oauth_client),
    service: AuthService = Depends(get_auth_service),
) -> RedirectResponse:
    """Finish the OAuth flow and hand the frontend a local token."""
    if not client.enabled:
        raise FeatureDisabledError(
            ErrorCode.GOOGLE_AUTH_DISABLED, "Google OAuth not configured"
        )

    expected_state = request.cookies.get(OAUTH_STATE_COOKIE)
    if error or not code or not state or not expected_state:
        logger.info("google_callback_rejected", provider_error=error)
        return _frontend_redirect("/login", error="google_auth_failed")
    if not secrets.compare_digest(state, expected_state):
        logger.warning("google_callback_state_mismatch")
        return _frontend_redirect("/login", error="google_auth_failed")

    try:
        identity = await client.fetch_identity(code)
        _, token = await service.federated_login(identity)
    except OAuthExchangeError:
        return _frontend_redirect("/login", error="google_auth_failed")
    except FederatedLoginError as exc:
        reason = "unauthorized_email" if exc.reason == "unauthorized_email" else "google_auth_failed"
        return _frontend_redirect("/login", error=reason)
    except Exception:
        # The browser is mid-redirect here; it must land on the frontend.
        logger.exception("google_callback_failed")
        return _frontend_redirect("/login", error="server_error")

    return _frontend_redirect("/auth/callback", token=token)
