"""SQLAlchemy implementation of ContactSubmission repository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.contact import ContactSubmission
from infrastructure.database.models import ContactSubmissionModel


class SQLAlchemyContactSubmissionRepository:
    """SQLAlchemy implementation of IContactSubmissionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> ContactSubmission | None:
        model = await self._session.get(ContactSubmissionModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[ContactSubmission]:
        stmt = select(ContactSubmissionModel).order_by(
            ContactSubmissionModel.created_at.desc()
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, submission: ContactSubmission) -> ContactSubmission:
        model = ContactSubmissionModel(
            id=submission.id,
            first_name=submission.first_name,
            last_name=submission.last_name,
            email=submission.email,
            company=submission.company,
            project_type=submission.project_type,
            message=submission.message,
            created_at=submission.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, id: str) -> bool:
        result = await self._session.execute(
            delete(ContactSubmissionModel).where(ContactSubmissionModel.id == id)
        )
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: ContactSubmissionModel) -> ContactSubmission:
        return ContactSubmission(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            company=model.company,
            project_type=model.project_type,
            message=model.message,
            created_at=model.created_at,
        )
