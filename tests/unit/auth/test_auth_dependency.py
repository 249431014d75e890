"""Unit tests for authentication dependencies."""

from datetime import timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from api.dependencies.auth import get_current_user, get_optional_user, require_admin
from core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ErrorCode,
    InvalidTokenError,
)
from domain.entities.identity import TokenUser
from domain.entities.user import UserRole
from infrastructure.auth.jwt_provider import JWTAuthProvider


@pytest.fixture
def provider() -> JWTAuthProvider:
    return JWTAuthProvider(secret_key="test-secret", algorithm="HS256", lifetime=timedelta(hours=1))


@pytest.fixture
def token_user() -> TokenUser:
    return TokenUser(id="user-1", username="reader", role=UserRole.USER)


@pytest.fixture
def auth_service() -> AsyncMock:
    service = AsyncMock()
    service.verify_session.return_value = None
    return service


def _request() -> SimpleNamespace:
    return SimpleNamespace(state=SimpleNamespace())


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestGetCurrentUser:
    async def test_returns_user_and_attaches_it_to_request(
        self, provider: JWTAuthProvider, token_user: TokenUser, auth_service: AsyncMock
    ):
        request = _request()

        result = await get_current_user(
            request, _bearer(provider.create_token(token_user)), provider, auth_service
        )

        assert result == token_user
        assert request.state.user == token_user
        auth_service.verify_session.assert_awaited_once_with(token_user)

    async def test_no_credentials_is_401(self, provider: JWTAuthProvider, auth_service: AsyncMock):
        with pytest.raises(AuthenticationError) as exc_info:
            await get_current_user(_request(), None, provider, auth_service)

        assert exc_info.value.status_code == 401
        assert exc_info.value.error_code == ErrorCode.UNAUTHORIZED

    async def test_invalid_token_is_403(self, provider: JWTAuthProvider, auth_service: AsyncMock):
        with pytest.raises(InvalidTokenError) as exc_info:
            await get_current_user(_request(), _bearer("invalid.jwt.token"), provider, auth_service)

        assert exc_info.value.status_code == 403
        auth_service.verify_session.assert_not_awaited()

    async def test_expired_token_is_403(self, token_user: TokenUser, auth_service: AsyncMock):
        expired = JWTAuthProvider(secret_key="test-secret", lifetime=timedelta(seconds=-5))

        with pytest.raises(InvalidTokenError):
            await get_current_user(
                _request(), _bearer(expired.create_token(token_user)), expired, auth_service
            )

    async def test_revoked_token_is_403(
        self, provider: JWTAuthProvider, token_user: TokenUser, auth_service: AsyncMock
    ):
        auth_service.verify_session.side_effect = InvalidTokenError("Token has been revoked")

        with pytest.raises(InvalidTokenError):
            await get_current_user(
                _request(), _bearer(provider.create_token(token_user)), provider, auth_service
            )


class TestRequireAdmin:
    async def test_admin_passes(self):
        admin = TokenUser(id="a", username="admin", role=UserRole.ADMIN)

        assert await require_admin(admin) is admin

    async def test_non_admin_is_403(self, token_user: TokenUser):
        with pytest.raises(AuthorizationError) as exc_info:
            await require_admin(token_user)

        assert exc_info.value.status_code == 403
        assert exc_info.value.error_code == ErrorCode.FORBIDDEN


class TestGetOptionalUser:
    async def test_returns_none_without_credentials(
        self, provider: JWTAuthProvider, auth_service: AsyncMock
    ):
        assert await get_optional_user(None, provider, auth_service) is None

    async def test_returns_none_for_invalid_token(
        self, provider: JWTAuthProvider, auth_service: AsyncMock
    ):
        assert await get_optional_user(_bearer("bad"), provider, auth_service) is None

    async def test_returns_none_for_revoked_token(
        self, provider: JWTAuthProvider, token_user: TokenUser, auth_service: AsyncMock
    ):
        auth_service.verify_session.side_effect = InvalidTokenError("Token has been revoked")

        result = await get_optional_user(
            _bearer(provider.create_token(token_user)), provider, auth_service
        )

        assert result is None

    async def test_returns_user_for_valid_token(
        self, provider: JWTAuthProvider, token_user: TokenUser, auth_service: AsyncMock
    ):
        result = await get_optional_user(
            _bearer(provider.create_token(token_user)), provider, auth_service
        )

        assert result == token_user
