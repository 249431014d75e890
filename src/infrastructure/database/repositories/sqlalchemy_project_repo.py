"""SQLAlchemy implementation of Project repository."""

from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.project import Project
from infrastructure.database.models import ProjectModel


class SQLAlchemyProjectRepository:
    """SQLAlchemy implementation of IProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> Project | None:
        """Get a project by ID."""
        model = await self._session.get(ProjectModel, id)
        return self._to_entity(model) if model else None

    async def get_all(
        self,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> list[Project]:
        """Get all projects newest first, optionally filtered."""
        stmt = select(ProjectModel).order_by(ProjectModel.created_at.desc())
        if category:
            stmt = stmt.where(func.lower(ProjectModel.category) == category.lower())
        if featured is not None:
            stmt = stmt.where(ProjectModel.featured == featured)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, project: Project) -> Project:
        """Create a new project."""
        model = self._to_model(project)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, project: Project) -> Project:
        """Update an existing project."""
        model = await self._session.get(ProjectModel, project.id)
        if not model:
            raise ValueError(f"Project {project.id} not found")

        model.title = project.title
        model.description = project.description
        model.long_description = project.long_description
        model.category = project.category
        model.tools = list(project.tools)
        model.image_url = project.image_url
        model.case_study_url = project.case_study_url
        model.scorm_url = project.scorm_url
        model.demo_url = project.demo_url
        model.featured = project.featured
        model.challenge = project.challenge
        model.solution = project.solution
        model.process = project.process
        model.results = project.results

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: str) -> bool:
        """Delete a project."""
        result = await self._session.execute(
            delete(ProjectModel).where(ProjectModel.id == id)
        )
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: ProjectModel) -> Project:
        """Convert ORM model to domain entity."""
        return Project(
            id=model.id,
            title=model.title,
            description=model.description,
            long_description=model.long_description,
            category=model.category,
            tools=list(model.tools or []),
            image_url=model.image_url,
            case_study_url=model.case_study_url,
            scorm_url=model.scorm_url,
            demo_url=model.demo_url,
            featured=bool(model.featured),
            challenge=model.challenge,
            solution=model.solution,
            process=model.process,
            results=model.results,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Project) -> ProjectModel:
        """Convert domain entity to ORM model."""
        return ProjectModel(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            long_description=entity.long_description,
            category=entity.category,
            tools=list(entity.tools),
            image_url=entity.image_url,
            case_study_url=entity.case_study_url,
            scorm_url=entity.scorm_url,
            demo_url=entity.demo_url,
            featured=entity.featured,
            challenge=entity.challenge,
            solution=entity.solution,
            process=entity.process,
            results=entity.results,
            created_at=entity.created_at,
        )
