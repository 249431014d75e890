"""Resume repository protocol."""

from typing import Protocol

from domain.entities.resume import Resume


class IResumeRepository(Protocol):
    """Repository interface for Resume entities."""

    async def get(self, id: str) -> Resume | None:
        """Get a resume by ID."""
        ...

    async def get_all(self) -> list[Resume]:
        """Get all resumes ordered by upload time, newest first."""
        ...

    async def get_active(self) -> Resume | None:
        """Get the currently active resume, if any."""
        ...

    async def create(self, resume: Resume) -> Resume:
        """Create a new resume."""
        ...

    async def update(self, resume: Resume) -> Resume:
        """Persist every field of an existing resume except ``is_active``."""
        ...

    async def activate(self, id: str) -> bool:
        """Make ``id`` the only active resume in one statement.

        Returns False without touching any row when ``id`` does not exist.
        """
        ...

    async def deactivate(self, id: str) -> bool:
        """Clear the active flag on one resume."""
        ...

    async def delete(self, id: str) -> bool:
        """Delete a resume and return whether a row was removed."""
        ...
