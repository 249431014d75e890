"""Authentication provider protocol."""

from typing import Optional, Protocol

from domain.entities.identity import TokenUser


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate an authentication token.

        Args:
            token: The bearer token to validate

        Returns:
            TokenUser if valid, None if invalid
        """
        ...

    def create_token(self, user: TokenUser) -> str:
        """
        Create an authentication token for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated token string
        """
        ...


class IPasswordHasher(Protocol):
    """Protocol for password hashing."""

    def hash(self, plaintext: str) -> str:
        ...

    def verify(self, plaintext: str, password_hash: str) -> bool:
        ...
