"""Unit tests for JWTAuthProvider."""

from datetime import datetime, timedelta

import pytest
from jose import jwt as jose_jwt

from domain.entities.identity import TokenUser
from domain.entities.user import UserRole
from infrastructure.auth.jwt_provider import JWTAuthProvider

SECRET = "test-secret"


def _make_token(payload: dict, secret: str = SECRET) -> str:
    """Create an HS256-signed JWT with a given payload."""
    return jose_jwt.encode(payload, secret, algorithm="HS256")


def _future() -> datetime:
    return datetime.utcnow() + timedelta(hours=1)


@pytest.fixture
def provider() -> JWTAuthProvider:
    return JWTAuthProvider(secret_key=SECRET, algorithm="HS256", lifetime=timedelta(hours=1))


@pytest.fixture
def admin() -> TokenUser:
    return TokenUser(id="user-1", username="admin", role=UserRole.ADMIN, token_version=3)


class TestCreateAndValidate:
    def test_round_trips_identity_claims(self, provider: JWTAuthProvider, admin: TokenUser):
        token = provider.create_token(admin)

        result = provider.validate_token(token)

        assert result == admin
        assert result.is_admin

    def test_expiry_follows_configured_lifetime(self, admin: TokenUser):
        provider = JWTAuthProvider(secret_key=SECRET, lifetime=timedelta(days=365))

        claims = jose_jwt.get_unverified_claims(provider.create_token(admin))

        assert claims["exp"] - claims["iat"] == int(timedelta(days=365).total_seconds())

    def test_tokens_embed_role_and_version(self, provider: JWTAuthProvider, admin: TokenUser):
        claims = jose_jwt.get_unverified_claims(provider.create_token(admin))

        assert claims["sub"] == "user-1"
        assert claims["username"] == "admin"
        assert claims["role"] == "admin"
        assert claims["ver"] == 3


class TestRejectedTokens:
    def test_expired_token_is_rejected(self, admin: TokenUser):
        provider = JWTAuthProvider(secret_key=SECRET, lifetime=timedelta(seconds=-10))

        assert provider.validate_token(provider.create_token(admin)) is None

    def test_wrong_signature_is_rejected(self, provider: JWTAuthProvider):
        token = _make_token(
            {"sub": "u", "username": "x", "role": "admin", "exp": _future()},
            secret="someone-else",
        )

        assert provider.validate_token(token) is None

    def test_tampered_payload_is_rejected(self, provider: JWTAuthProvider):
        user = TokenUser(id="u", username="reader", role=UserRole.USER)
        header, _, signature = provider.create_token(user).split(".")
        forged_payload = _make_token(
            {"sub": "u", "username": "reader", "role": "admin", "exp": _future()}
        ).split(".")[1]

        assert provider.validate_token(f"{header}.{forged_payload}.{signature}") is None

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token_is_rejected(self, provider: JWTAuthProvider, token: str):
        assert provider.validate_token(token) is None

    @pytest.mark.parametrize("missing", ["sub", "username", "role"])
    def test_missing_claim_is_rejected(self, provider: JWTAuthProvider, missing: str):
        payload = {"sub": "u", "username": "x", "role": "user", "exp": _future()}
        del payload[missing]

        assert provider.validate_token(_make_token(payload)) is None

    def test_unknown_role_is_rejected(self, provider: JWTAuthProvider):
        token = _make_token({"sub": "u", "username": "x", "role": "root", "exp": _future()})

        assert provider.validate_token(token) is None

    def test_missing_version_defaults_to_zero(self, provider: JWTAuthProvider):
        token = _make_token({"sub": "u", "username": "x", "role": "user", "exp": _future()})

        result = provider.validate_token(token)

        assert result is not None
        assert result.token_version == 0
