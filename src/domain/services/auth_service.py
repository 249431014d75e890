"""Authentication service: local credentials, federated login and revocation."""

from datetime import datetime
from typing import Callable

import structlog
from sqlalchemy.exc import IntegrityError

from core.exceptions import (
    AuthenticationError,
    DuplicateUserError,
    EntityNotFoundError,
    ErrorCode,
    FederatedLoginError,
    InvalidTokenError,
)
from domain.entities.identity import AdminEmailPolicy, ExternalIdentity, TokenUser
from domain.entities.user import User, UserRole
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.changes import require_text
from infrastructure.auth.provider import IAuthProvider, IPasswordHasher

logger = structlog.get_logger()


class AuthService:
    """Service layer for user accounts and token issuance."""

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        password_hasher: IPasswordHasher,
        token_provider: IAuthProvider,
        admin_policy: AdminEmailPolicy,
    ) -> None:
        self._uow_factory = uow_factory
        self._hasher = password_hasher
        self._tokens = token_provider
        self._admin_policy = admin_policy

    def issue_token(self, user: User) -> str:
        return self._tokens.create_token(TokenUser.from_user(user))

    async def login(self, username: str, password: str) -> tuple[User, str]:
        """Check a username/password pair and issue a token.

        Unknown usernames, wrong passwords and password-less federated
        accounts all fail the same way.
        """
        require_text({"username": username, "password": password}, ("username", "password"))

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_username(username)
            if not user or not self._hasher.verify(password, user.password_hash):
                logger.info("login_failed", username=username)
                raise AuthenticationError(
                    "Invalid credentials", error_code=ErrorCode.INVALID_CREDENTIALS
                )

            now = datetime.utcnow()
            await uow.users.record_login(user.id, now)
            await uow.commit()
            user.last_login_at = now

        logger.info("user_logged_in", user_id=user.id)
        return user, self.issue_token(user)

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        role: UserRole = UserRole.USER,
    ) -> User:
        """Create a local account with a hashed password."""
        require_text(
            {"username": username, "email": email, "password": password},
            ("username", "email", "password"),
        )

        async with self._uow_factory() as uow:
            if await uow.users.get_by_username(username):
                raise DuplicateUserError("username")
            if await uow.users.get_by_email(email):
                raise DuplicateUserError("email")

            user = User(
                username=username,
                email=email,
                password_hash=self._hasher.hash(password),
                role=role,
            )
            try:
                created = await uow.users.create(user)
                await uow.commit()
            except IntegrityError:
                # Lost a race with a concurrent registration.
                await uow.rollback()
                raise DuplicateUserError("username")

        logger.info("user_registered", user_id=created.id, role=created.role.value)
        return created

    async def get_user(self, user_id: str) -> User:
        async with self._uow_factory() as uow:
            user = await uow.users.get(user_id)
            if not user:
                raise EntityNotFoundError("user", user_id)
            return user

    async def verify_session(self, token_user: TokenUser) -> User:
        """Check that a decoded token still belongs to a live, unrevoked account."""
        async with self._uow_factory() as uow:
            user = await uow.users.get(token_user.id)

        if not user or user.token_version != token_user.token_version:
            raise InvalidTokenError("Token has been revoked")
        return user

    async def revoke_all_sessions(self, user_id: str) -> int:
        """Invalidate every token issued to a user so far."""
        async with self._uow_factory() as uow:
            if not await uow.users.get(user_id):
                raise EntityNotFoundError("user", user_id)
            version = await uow.users.bump_token_version(user_id)
            await uow.commit()

        logger.info("sessions_revoked", user_id=user_id, token_version=version)
        return version

    async def federated_login(self, identity: ExternalIdentity) -> tuple[User, str]:
        """Map a provider-verified identity to a local admin account.

        Emails outside the admin policy are rejected before any account is
        looked up or created.
        """
        if not identity.email:
            raise FederatedLoginError("missing_email")
        if not self._admin_policy.permits(identity.email):
            logger.warning("federated_login_rejected", email=identity.email)
            raise FederatedLoginError("unauthorized_email")

        now = datetime.utcnow()
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_email(identity.email)
            if user:
                await uow.users.record_login(user.id, now)
                user.last_login_at = now
            else:
                username = await self._available_username(uow, identity.email)
                user = await uow.users.create(
                    User(
                        username=username,
                        email=identity.email,
                        password_hash="",
                        role=UserRole.ADMIN,
                        last_login_at=now,
                    )
                )
                logger.info("federated_user_created", user_id=user.id)
            await uow.commit()

        logger.info("user_logged_in", user_id=user.id, provider="google")
        return user, self.issue_token(user)

    async def set_password(self, username: str, password: str) -> User:
        """Replace a user's password and revoke their existing tokens."""
        require_text({"password": password}, ("password",))

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_username(username)
            if not user:
                raise EntityNotFoundError("user", username)
            await uow.users.set_password(user.id, self._hasher.hash(password))
            user.token_version = await uow.users.bump_token_version(user.id)
            await uow.commit()

        logger.info("password_changed", user_id=user.id)
        return user

    async def _available_username(self, uow: IUnitOfWork, email: str) -> str:
        base = email.split("@", 1)[0] or "admin"
        candidate = base
        suffix = 1
        while await uow.users.get_by_username(candidate):
            suffix += 1
            candidate = f"{base}{suffix}"
        return candidate
