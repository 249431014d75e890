"""Project service layer."""

from typing import Any, Callable, List, Optional

import structlog

from core.exceptions import EntityNotFoundError
from domain.entities.project import Project
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.changes import merge, require_text

logger = structlog.get_logger()

REQUIRED_FIELDS = ("title", "description", "category")
IMMUTABLE_FIELDS = ("id", "created_at")


class ProjectService:
    """Service layer for Project business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(
        self,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> List[Project]:
        """Get all projects newest first, filtered by category and featured flag."""
        async with self._uow_factory() as uow:
            return await uow.projects.get_all(category=category, featured=featured)

    async def get_by_id(self, project_id: str) -> Project:
        """Get a project or raise not found."""
        async with self._uow_factory() as uow:
            project = await uow.projects.get(project_id)
            if not project:
                raise EntityNotFoundError("project", project_id)
            return project

    async def create(self, **fields: Any) -> Project:
        """Create a project, applying defaults for absent optional fields."""
        require_text(fields, REQUIRED_FIELDS)
        for name in IMMUTABLE_FIELDS:
            fields.pop(name, None)
        fields["tools"] = list(fields.get("tools") or [])
        fields["featured"] = bool(fields.get("featured", False))

        async with self._uow_factory() as uow:
            created = await uow.projects.create(Project(**fields))
            await uow.commit()
            logger.info("project_created", project_id=created.id)
            return created

    async def update(self, project_id: str, changes: dict[str, Any]) -> Project:
        """Merge only the supplied fields onto an existing project."""
        changes = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        if "tools" in changes:
            changes["tools"] = list(changes["tools"] or [])
        if "featured" in changes:
            changes["featured"] = bool(changes["featured"])

        async with self._uow_factory() as uow:
            project = await uow.projects.get(project_id)
            if not project:
                raise EntityNotFoundError("project", project_id)

            updated = await uow.projects.update(merge(project, changes, REQUIRED_FIELDS))
            await uow.commit()
            return updated

    async def delete(self, project_id: str) -> None:
        """Hard-delete a project."""
        async with self._uow_factory() as uow:
            deleted = await uow.projects.delete(project_id)
            if not deleted:
                raise EntityNotFoundError("project", project_id)
            await uow.commit()
            logger.info("project_deleted", project_id=project_id)
