"""User repository protocol."""

from datetime import datetime
from typing import Protocol

from domain.entities.user import User


class IUserRepository(Protocol):
    """Repository interface for User entities."""

    async def get(self, id: str) -> User | None:
        """Get a user by ID."""
        ...

    async def get_by_username(self, username: str) -> User | None:
        """Get a user by username."""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email (case-insensitive)."""
        ...

    async def create(self, user: User) -> User:
        """Create a new user."""
        ...

    async def record_login(self, id: str, at: datetime) -> None:
        """Set ``last_login_at`` for a user."""
        ...

    async def set_password(self, id: str, password_hash: str) -> None:
        """Replace the stored password hash."""
        ...

    async def bump_token_version(self, id: str) -> int:
        """Increment the token version, invalidating issued tokens."""
        ...
