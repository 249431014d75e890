"""Caller identities: decoded token claims and provider-asserted identities."""

from dataclasses import dataclass
from typing import Iterable, Optional

from domain.entities.user import User, UserRole


@dataclass
class TokenUser:
    """Represents a user extracted from an auth token."""

    id: str
    username: str
    role: UserRole
    token_version: int = 0

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @classmethod
    def from_user(cls, user: User) -> "TokenUser":
        return cls(
            id=user.id,
            username=user.username,
            role=user.role,
            token_version=user.token_version,
        )


@dataclass(frozen=True)
class ExternalIdentity:
    """Identity asserted by an external provider."""

    email: Optional[str]
    display_name: Optional[str] = None
    subject: Optional[str] = None


class AdminEmailPolicy:
    """Set of emails permitted to sign in through the federated flow."""

    def __init__(self, emails: Iterable[str]) -> None:
        self._emails = frozenset(e.strip().lower() for e in emails if e.strip())

    def permits(self, email: Optional[str]) -> bool:
        if not email:
            return False
        return email.strip().lower() in self._emails

    def __len__(self) -> int:
        return len(self._emails)
