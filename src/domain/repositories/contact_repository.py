"""ContactSubmission repository protocol."""

from typing import Protocol

from domain.entities.contact import ContactSubmission


class IContactSubmissionRepository(Protocol):
    """Repository interface for ContactSubmission entities (no update)."""

    async def get(self, id: str) -> ContactSubmission | None:
        ...

    async def get_all(self) -> list[ContactSubmission]:
        ...

    async def create(self, submission: ContactSubmission) -> ContactSubmission:
        ...

    async def delete(self, id: str) -> bool:
        ...
