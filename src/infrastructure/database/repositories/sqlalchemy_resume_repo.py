"""SQLAlchemy implementation of Resume repository."""

from sqlalchemy import case, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.resume import Resume
from infrastructure.database.models import ResumeModel


class SQLAlchemyResumeRepository:
    """SQLAlchemy implementation of IResumeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> Resume | None:
        """Get a resume by ID."""
        model = await self._session.get(ResumeModel, id, populate_existing=True)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Resume]:
        """Get all resumes, most recently uploaded first."""
        stmt = select(ResumeModel).order_by(ResumeModel.uploaded_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_active(self) -> Resume | None:
        """Get the active resume."""
        stmt = (
            select(ResumeModel)
            .where(ResumeModel.is_active == True)  # noqa: E712
            .order_by(ResumeModel.uploaded_at.desc())
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create(self, resume: Resume) -> Resume:
        """Create a new resume. Activation is applied separately."""
        model = self._to_model(resume)
        model.is_active = False
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, resume: Resume) -> Resume:
        """Update file fields and parsed content of an existing resume."""
        model = await self._session.get(ResumeModel, resume.id)
        if not model:
            raise ValueError(f"Resume {resume.id} not found")

        model.filename = resume.filename
        model.original_name = resume.original_name
        model.file_url = resume.file_url
        model.parsed_content = resume.parsed_content

        await self._session.flush()
        return self._to_entity(model)

    async def activate(self, id: str) -> bool:
        """Flag ``id`` active and every other resume inactive.

        The flip is a single conditional UPDATE so no reader can observe
        zero or two active rows between the two halves.
        """
        exists = await self._session.execute(
            select(ResumeModel.id).where(ResumeModel.id == id)
        )
        if exists.scalar_one_or_none() is None:
            return False

        stmt = (
            update(ResumeModel)
            .values(is_active=case((ResumeModel.id == id, 1), else_=0))
            .execution_options(synchronize_session=False)
        )
        await self._session.execute(stmt)
        await self._session.flush()
        return True

    async def deactivate(self, id: str) -> bool:
        """Clear the active flag on one resume."""
        result = await self._session.execute(
            update(ResumeModel)
            .where(ResumeModel.id == id)
            .values(is_active=False)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        return bool(result.rowcount)

    async def delete(self, id: str) -> bool:
        """Delete a resume."""
        result = await self._session.execute(
            delete(ResumeModel).where(ResumeModel.id == id)
        )
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: ResumeModel) -> Resume:
        """Convert ORM model to domain entity."""
        return Resume(
            id=model.id,
            filename=model.filename,
            original_name=model.original_name,
            file_url=model.file_url,
            parsed_content=model.parsed_content,
            is_active=bool(model.is_active),
            uploaded_at=model.uploaded_at,
        )

    def _to_model(self, entity: Resume) -> ResumeModel:
        """Convert domain entity to ORM model."""
        return ResumeModel(
            id=entity.id,
            filename=entity.filename,
            original_name=entity.original_name,
            file_url=entity.file_url,
            parsed_content=entity.parsed_content,
            is_active=entity.is_active,
            uploaded_at=entity.uploaded_at,
        )
