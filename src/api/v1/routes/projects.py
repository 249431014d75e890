"""Project API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import AdminUser
from api.v1.dependencies import get_project_service
from api.v1.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.project_service import ProjectService

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectResponse],
    summary="List projects",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_projects(
    request: Request,
    category: str | None = None,
    featured: bool | None = None,
    service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """List projects newest first. ``category`` matches case-insensitively."""
    projects = await service.get_all(category=category, featured=featured)
    return [ProjectResponse.model_validate(p) for p in projects]


@router.get(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Get a project",
    responses={404: {"description": "Project not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_project(
    request: Request,
    project_id: str,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    project = await service.get_by_id(project_id)
    return ProjectResponse.model_validate(project)


@router.post(
    "",
    response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a project",
    responses={
        201: {"description": "Project created successfully"},
        400: {"description": "A required field is missing or empty"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_project(
    request: Request,
    body: ProjectCreate,
    admin: AdminUser,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    project = await service.create(**body.model_dump())
    return ProjectResponse.model_validate(project)


@router.put(
    "/{project_id}",
    response_model=ProjectResponse,
    summary="Update a project",
    responses={404: {"description": "Project not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_project(
    request: Request,
    project_id: str,
    body: ProjectUpdate,
    admin: AdminUser,
    service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """Partial update: fields absent from the body keep their stored values."""
    project = await service.update(project_id, body.model_dump(exclude_unset=True))
    return ProjectResponse.model_validate(project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a project",
    responses={404: {"description": "Project not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_project(
    request: Request,
    project_id: str,
    admin: AdminUser,
    service: ProjectService = Depends(get_project_service),
) -> None:
    await service.delete(project_id)
    return None
