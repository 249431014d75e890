"""SQLAlchemy implementation of User repository."""

from datetime import datetime

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.user import User, UserRole
from infrastructure.database.models import UserModel


class SQLAlchemyUserRepository:
    """SQLAlchemy implementation of IUserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> User | None:
        """Get a user by ID."""
        model = await self._session.get(UserModel, id, populate_existing=True)
        return self._to_entity(model) if model else None

    async def get_by_username(self, username: str) -> User | None:
        """Get a user by exact username."""
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        """Get a user by email, ignoring case."""
        stmt = select(UserModel).where(func.lower(UserModel.email) == email.lower())
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, user: User) -> User:
        """Create a new user."""
        model = UserModel(
            id=user.id,
            username=user.username,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
            token_version=user.token_version,
            created_at=user.created_at,
            last_login_at=user.last_login_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def record_login(self, id: str, at: datetime) -> None:
        """Set the last login timestamp."""
        await self._session.execute(
            update(UserModel)
            .where(UserModel.id == id)
            .values(last_login_at=at)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()

    async def set_password(self, id: str, password_hash: str) -> None:
        """Replace the stored password hash."""
        await self._session.execute(
            update(UserModel)
            .where(UserModel.id == id)
            .values(password_hash=password_hash)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()

    async def bump_token_version(self, id: str) -> int:
        """Increment the token version and return the new value."""
        await self._session.execute(
            update(UserModel)
            .where(UserModel.id == id)
            .values(token_version=UserModel.token_version + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(
            select(UserModel.token_version).where(UserModel.id == id)
        )
        return result.scalar_one()

    def _to_entity(self, model: UserModel) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash or "",
            role=UserRole(model.role),
            token_version=model.token_version,
            created_at=model.created_at,
            last_login_at=model.last_login_at,
        )
