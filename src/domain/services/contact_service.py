"""Contact submission service layer."""

from typing import Any, Callable, List

import structlog

from core.exceptions import EntityNotFoundError
from domain.entities.contact import ContactSubmission
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.changes import require_text

logger = structlog.get_logger()

REQUIRED_FIELDS = ("first_name", "last_name", "email", "message")


class ContactService:
    """Service layer for contact form submissions.

    Submissions are immutable: there is no update operation.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, **fields: Any) -> ContactSubmission:
        require_text(fields, REQUIRED_FIELDS)
        fields.pop("id", None)
        fields.pop("created_at", None)

        async with self._uow_factory() as uow:
            created = await uow.contact_submissions.create(ContactSubmission(**fields))
            await uow.commit()
            logger.info("contact_submission_received", submission_id=created.id)
            return created

    async def get_all(self) -> List[ContactSubmission]:
        async with self._uow_factory() as uow:
            return await uow.contact_submissions.get_all()

    async def get_by_id(self, submission_id: str) -> ContactSubmission:
        async with self._uow_factory() as uow:
            submission = await uow.contact_submissions.get(submission_id)
            if not submission:
                raise EntityNotFoundError("contact_submission", submission_id)
            return submission

    async def delete(self, submission_id: str) -> None:
        async with self._uow_factory() as uow:
            deleted = await uow.contact_submissions.delete(submission_id)
            if not deleted:
                raise EntityNotFoundError("contact_submission", submission_id)
            await uow.commit()
