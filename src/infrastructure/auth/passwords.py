"""Password hashing with passlib/bcrypt."""

import structlog
from passlib.context import CryptContext

from core.config import settings

logger = structlog.get_logger()


class BcryptPasswordHasher:
    """Salted, adaptive one-way hashing with a fixed work factor."""

    def __init__(self, rounds: int = settings.bcrypt_rounds) -> None:
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, plaintext: str) -> str:
        """Hash a password. Each call uses a fresh random salt."""
        return self._context.hash(plaintext)

    def verify(self, plaintext: str, password_hash: str) -> bool:
        """Check a password against a stored hash.

        Returns False for a mismatch and for an empty or unrecognized hash
        (accounts created through federated login have no password).
        """
        if not password_hash:
            return False
        try:
            return self._context.verify(plaintext, password_hash)
        except (ValueError, TypeError):
            logger.warning("password_hash_unrecognized")
            return False
