"""Resume service layer, including single-active activation."""

import asyncio
from typing import Any, Callable, List, Optional

import structlog

from core.exceptions import EntityNotFoundError
from domain.entities.resume import Resume
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.changes import merge, require_text

logger = structlog.get_logger()

REQUIRED_FIELDS = ("filename", "original_name", "file_url")
IMMUTABLE_FIELDS = ("id", "uploaded_at")


class ResumeService:
    """Service layer for Resume business logic.

    Invariant: at most one resume has ``is_active`` set. Every path that
    turns the flag on goes through the repository's single-statement
    ``activate`` inside one transaction, and activations in this process
    are serialized by ``_activation_lock``.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory
        self._activation_lock = asyncio.Lock()

    async def get_all(self) -> List[Resume]:
        """Get all resumes, most recently uploaded first."""
        async with self._uow_factory() as uow:
            return await uow.resumes.get_all()

    async def get_by_id(self, resume_id: str) -> Resume:
        """Get a resume or raise not found."""
        async with self._uow_factory() as uow:
            resume = await uow.resumes.get(resume_id)
            if not resume:
                raise EntityNotFoundError("resume", resume_id)
            return resume

    async def get_active(self) -> Resume:
        """Get the resume currently surfaced publicly."""
        async with self._uow_factory() as uow:
            resume = await uow.resumes.get_active()
            if not resume:
                raise EntityNotFoundError("resume", "active")
            return resume

    async def create(
        self,
        filename: str,
        original_name: str,
        file_url: str,
        parsed_content: Optional[str] = None,
        is_active: bool = False,
    ) -> Resume:
        """Store a resume record; activating it in the same transaction if asked."""
        require_text(
            {"filename": filename, "original_name": original_name, "file_url": file_url},
            REQUIRED_FIELDS,
        )
        resume = Resume(
            filename=filename,
            original_name=original_name,
            file_url=file_url,
            parsed_content=parsed_content,
        )

        if not is_active:
            async with self._uow_factory() as uow:
                created = await uow.resumes.create(resume)
                await uow.commit()
                return created

        async with self._activation_lock:
            async with self._uow_factory() as uow:
                created = await uow.resumes.create(resume)
                await uow.resumes.activate(created.id)
                await uow.commit()
                activated = await uow.resumes.get(created.id)
                logger.info("resume_activated", resume_id=created.id)
                return activated or created

    async def update(self, resume_id: str, changes: dict[str, Any]) -> Resume:
        """Merge supplied fields; a change to ``is_active`` goes through activation."""
        changes = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        is_active = changes.pop("is_active", None)

        async with self._activation_lock:
            async with self._uow_factory() as uow:
                resume = await uow.resumes.get(resume_id)
                if not resume:
                    raise EntityNotFoundError("resume", resume_id)

                await uow.resumes.update(merge(resume, changes, REQUIRED_FIELDS))
                if is_active is True:
                    await uow.resumes.activate(resume_id)
                elif is_active is False:
                    await uow.resumes.deactivate(resume_id)
                await uow.commit()

                updated = await uow.resumes.get(resume_id)
                if not updated:
                    raise EntityNotFoundError("resume", resume_id)
                return updated

    async def set_active(self, resume_id: str) -> Resume:
        """Make ``resume_id`` the single active resume.

        Raises not found, with every existing flag left untouched, when the
        resume does not exist.
        """
        async with self._activation_lock:
            async with self._uow_factory() as uow:
                activated = await uow.resumes.activate(resume_id)
                if not activated:
                    raise EntityNotFoundError("resume", resume_id)
                await uow.commit()

                resume = await uow.resumes.get(resume_id)
                if not resume:
                    raise EntityNotFoundError("resume", resume_id)
                logger.info("resume_activated", resume_id=resume_id)
                return resume

    async def delete(self, resume_id: str) -> None:
        async with self._uow_factory() as uow:
            deleted = await uow.resumes.delete(resume_id)
            if not deleted:
                raise EntityNotFoundError("resume", resume_id)
            await uow.commit()
            logger.info("resume_deleted", resume_id=resume_id)
