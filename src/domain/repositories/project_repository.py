"""Project repository protocol."""

from typing import Optional, Protocol

from domain.entities.project import Project


class IProjectRepository(Protocol):
    """Repository interface for Project entities."""

    async def get(self, id: str) -> Project | None:
        """Get a project by ID."""
        ...

    async def get_all(
        self,
        category: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> list[Project]:
        """Get all projects newest first, optionally filtered."""
        ...

    async def create(self, project: Project) -> Project:
        """Create a new project."""
        ...

    async def update(self, project: Project) -> Project:
        """Persist every field of an existing project."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete a project and return whether a row was removed."""
        ...
