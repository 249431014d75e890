"""JWT authentication provider implementation.

Tokens are HS256-signed and carry everything the access-control layer
needs without a session lookup:

    {
        "sub": "user-uuid",
        "username": "admin",
        "role": "admin",
        "ver": 0,
        "iat": 1700000000,
        "exp": 1731536000
    }

``ver`` is the user's token version at issue time; bumping the stored
version invalidates every token issued before it.
"""

from datetime import datetime, timedelta
from typing import Optional

import structlog
from jose import JWTError, jwt

from core.config import settings
from domain.entities.user import UserRole
from domain.entities.identity import TokenUser

logger = structlog.get_logger()


class JWTAuthProvider:
    """JWT-based authentication provider."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        lifetime: timedelta = settings.session_lifetime,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._lifetime = lifetime

    def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT and extract the identity claims.

        Args:
            token: The JWT to validate

        Returns:
            TokenUser if valid, None if malformed, expired, badly signed
            or missing a required claim
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.debug("token_rejected", reason=str(exc))
            return None

        user_id = payload.get("sub")
        username = payload.get("username")
        role = payload.get("role")

        if not user_id or not username or not role:
            return None

        try:
            user_role = UserRole(role)
        except ValueError:
            return None

        version = payload.get("ver", 0)
        if not isinstance(version, int):
            return None

        return TokenUser(
            id=str(user_id),
            username=str(username),
            role=user_role,
            token_version=version,
        )

    def create_token(self, user: TokenUser) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        now = datetime.utcnow()
        payload: dict = {
            "sub": user.id,
            "username": user.username,
            "role": user.role.value,
            "ver": user.token_version,
            "iat": now,
            "exp": now + self._lifetime,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
