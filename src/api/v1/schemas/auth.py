"""Pydantic schemas for authentication API."""

from datetime import datetime

from pydantic import EmailStr, Field

from api.v1.schemas.common import CamelModel
from domain.entities.user import UserRole


class LoginRequest(CamelModel):
    """Username/password login."""

    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(CamelModel):
    """Local account registration."""

    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=200)
    role: UserRole = UserRole.USER


class UserResponse(CamelModel):
    """Public view of a user. Never carries the password hash."""

    id: str
    username: str
    email: str
    role: UserRole
    created_at: datetime | None = None
    last_login_at: datetime | None = None


class UserEnvelope(CamelModel):
    user: UserResponse


class TokenResponse(CamelModel):
    """Login result."""

    user: UserResponse
    token: str
