"""Contact form API routes."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request, status

from api.dependencies.auth import AdminUser
from api.v1.dependencies import get_contact_notifier, get_contact_service
from api.v1.schemas.contact import ContactSubmissionCreate, ContactSubmissionResponse
from core.rate_limit import CONTACT_LIMIT, READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.contact_service import ContactService
from infrastructure.email.notifier import ContactNotifier

router = APIRouter(prefix="/contact-submissions", tags=["contact"])


@router.post(
    "",
    response_model=ContactSubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit the contact form",
)
@limiter.limit(CONTACT_LIMIT)  # type: ignore[untyped-decorator]
async def create_contact_submission(
    request: Request,
    body: ContactSubmissionCreate,
    background_tasks: BackgroundTasks,
    service: ContactService = Depends(get_contact_service),
    notifier: ContactNotifier = Depends(get_contact_notifier),
) -> ContactSubmissionResponse:
    """Public. The owner notification is sent after the response; its
    outcome never affects this request."""
    submission = await service.create(**body.model_dump())
    background_tasks.add_task(notifier.notify, submission)
    return ContactSubmissionResponse.model_validate(submission)


@router.get(
    "",
    response_model=list[ContactSubmissionResponse],
    summary="List contact submissions",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_contact_submissions(
    request: Request,
    admin: AdminUser,
    service: ContactService = Depends(get_contact_service),
) -> list[ContactSubmissionResponse]:
    submissions = await service.get_all()
    return [ContactSubmissionResponse.model_validate(s) for s in submissions]


@router.get(
    "/{submission_id}",
    response_model=ContactSubmissionResponse,
    summary="Get a contact submission",
    responses={404: {"description": "Contact submission not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_contact_submission(
    request: Request,
    submission_id: str,
    admin: AdminUser,
    service: ContactService = Depends(get_contact_service),
) -> ContactSubmissionResponse:
    submission = await service.get_by_id(submission_id)
    return ContactSubmissionResponse.model_validate(submission)


@router.delete(
    "/{submission_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a contact submission",
    responses={404: {"description": "Contact submission not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_contact_submission(
    request: Request,
    submission_id: str,
    admin: AdminUser,
    service: ContactService = Depends(get_contact_service),
) -> None:
    await service.delete(submission_id)
    return None
