"""User domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Optional

from domain.entities.ids import new_id


class UserRole(StrEnum):
    """Caller classification used for route access."""

    ADMIN = "admin"
    USER = "user"


@dataclass
class User:
    """Domain entity for a local account.

    ``password_hash`` is empty for accounts created through federated
    login; those accounts cannot sign in with a password.
    """

    username: str
    email: str
    password_hash: str
    id: str = field(default_factory=new_id)
    role: UserRole = UserRole.USER
    token_version: int = 0
    created_at: datetime = field(default_factory=datetime.utcnow)
    last_login_at: Optional[datetime] = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def has_local_password(self) -> bool:
        return bool(self.password_hash)
