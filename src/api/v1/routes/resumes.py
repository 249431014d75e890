"""Resume API routes."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status

from api.dependencies.auth import AdminUser
from api.v1.dependencies import get_file_storage, get_resume_service
from api.v1.schemas.resume import ResumeResponse
from core.config import settings
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.resume_service import ResumeService
from infrastructure.storage.uploads import LocalFileStorage

router = APIRouter(prefix="/resumes", tags=["resumes"])


async def _store(storage: LocalFileStorage, file: UploadFile) -> dict[str, Any]:
    stored = await storage.save(
        file,
        original_name=file.filename,
        content_type=file.content_type,
        allowed_types=settings.resume_types_list,
        max_bytes=settings.resume_max_bytes,
    )
    return {
        "filename": stored.filename,
        "original_name": stored.original_name,
        "file_url": stored.url,
    }


@router.get("", response_model=list[ResumeResponse], summary="List resumes")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_resumes(
    request: Request,
    admin: AdminUser,
    service: ResumeService = Depends(get_resume_service),
) -> list[ResumeResponse]:
    resumes = await service.get_all()
    return [ResumeResponse.model_validate(r) for r in resumes]


@router.get(
    "/active",
    response_model=ResumeResponse,
    summary="Get the active resume",
    responses={404: {"description": "No resume is active"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_active_resume(
    request: Request,
    service: ResumeService = Depends(get_resume_service),
) -> ResumeResponse:
    resume = await service.get_active()
    return ResumeResponse.model_validate(resume)


@router.get(
    "/{resume_id}",
    response_model=ResumeResponse,
    summary="Get a resume",
    responses={404: {"description": "Resume not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_resume(
    request: Request,
    resume_id: str,
    service: ResumeService = Depends(get_resume_service),
) -> ResumeResponse:
    resume = await service.get_by_id(resume_id)
    return ResumeResponse.model_validate(resume)


@router.post(
    "",
    response_model=ResumeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Upload a resume",
    responses={
        400: {"description": "No file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Unsupported file type"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upload_resume(
    request: Request,
    admin: AdminUser,
    file: Annotated[UploadFile, File()],
    parsed_content: Annotated[str | None, Form(alias="parsedContent")] = None,
    is_active: Annotated[bool, Form(alias="isActive")] = False,
    service: ResumeService = Depends(get_resume_service),
    storage: LocalFileStorage = Depends(get_file_storage),
) -> ResumeResponse:
    """Store the file under the upload directory and record it.

    New resumes are inactive unless ``isActive`` is sent.
    """
    file_fields = await _store(storage, file)
    try:
        resume = await service.create(
            **file_fields,
            parsed_content=parsed_content,
            is_active=is_active,
        )
    except Exception:
        storage.remove(file_fields["file_url"])
        raise
    return ResumeResponse.model_validate(resume)


@router.put(
    "/{resume_id}",
    response_model=ResumeResponse,
    summary="Update a resume",
    responses={404: {"description": "Resume not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_resume(
    request: Request,
    resume_id: str,
    admin: AdminUser,
    file: Annotated[UploadFile | None, File()] = None,
    parsed_content: Annotated[str | None, Form(alias="parsedContent")] = None,
    is_active: Annotated[bool | None, Form(alias="isActive")] = None,
    service: ResumeService = Depends(get_resume_service),
    storage: LocalFileStorage = Depends(get_file_storage),
) -> ResumeResponse:
    """Replace the file and/or metadata. Absent fields are left unchanged."""
    await service.get_by_id(resume_id)

    changes: dict[str, Any] = {}
    if file is not None and file.filename:
        changes.update(await _store(storage, file))
    if parsed_content is not None:
        changes["parsed_content"] = parsed_content
    if is_active is not None:
        changes["is_active"] = is_active

    resume = await service.update(resume_id, changes)
    return ResumeResponse.model_validate(resume)


@router.post(
    "/{resume_id}/set-active",
    response_model=ResumeResponse,
    summary="Make a resume the active one",
    responses={404: {"description": "Resume not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def set_active_resume(
    request: Request,
    resume_id: str,
    admin: AdminUser,
    service: ResumeService = Depends(get_resume_service),
) -> ResumeResponse:
    """Activate this resume and deactivate every other one atomically."""
    resume = await service.set_active(resume_id)
    return ResumeResponse.model_validate(resume)


@router.delete(
    "/{resume_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a resume",
    responses={404: {"description": "Resume not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_resume(
    request: Request,
    resume_id: str,
    admin: AdminUser,
    service: ResumeService = Depends(get_resume_service),
    storage: LocalFileStorage = Depends(get_file_storage),
) -> None:
    """Delete the record and its stored file."""
    resume = await service.get_by_id(resume_id)
    await service.delete(resume_id)
    storage.remove(resume.file_url)
    return None
