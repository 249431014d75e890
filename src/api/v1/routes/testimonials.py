"""Testimonial API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import AdminUser
from api.v1.dependencies import get_testimonial_service
from api.v1.schemas.testimonial import (
    TestimonialCreate,
    TestimonialResponse,
    TestimonialUpdate,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.testimonial_service import TestimonialService

router = APIRouter(prefix="/testimonials", tags=["testimonials"])


@router.get("", response_model=list[TestimonialResponse], summary="List testimonials")
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_testimonials(
    request: Request,
    service: TestimonialService = Depends(get_testimonial_service),
) -> list[TestimonialResponse]:
    testimonials = await service.get_all()
    return [TestimonialResponse.model_validate(t) for t in testimonials]


@router.get(
    "/{testimonial_id}",
    response_model=TestimonialResponse,
    summary="Get a testimonial",
    responses={404: {"description": "Testimonial not found"}},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_testimonial(
    request: Request,
    testimonial_id: str,
    service: TestimonialService = Depends(get_testimonial_service),
) -> TestimonialResponse:
    testimonial = await service.get_by_id(testimonial_id)
    return TestimonialResponse.model_validate(testimonial)


@router.post(
    "",
    response_model=TestimonialResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a testimonial",
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_testimonial(
    request: Request,
    body: TestimonialCreate,
    admin: AdminUser,
    service: TestimonialService = Depends(get_testimonial_service),
) -> TestimonialResponse:
    testimonial = await service.create(**body.model_dump())
    return TestimonialResponse.model_validate(testimonial)


@router.put(
    "/{testimonial_id}",
    response_model=TestimonialResponse,
    summary="Update a testimonial",
    responses={404: {"description": "Testimonial not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_testimonial(
    request: Request,
    testimonial_id: str,
    body: TestimonialUpdate,
    admin: AdminUser,
    service: TestimonialService = Depends(get_testimonial_service),
) -> TestimonialResponse:
    testimonial = await service.update(testimonial_id, body.model_dump(exclude_unset=True))
    return TestimonialResponse.model_validate(testimonial)


@router.delete(
    "/{testimonial_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a testimonial",
    responses={404: {"description": "Testimonial not found"}},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_testimonial(
    request: Request,
    testimonial_id: str,
    admin: AdminUser,
    service: TestimonialService = Depends(get_testimonial_service),
) -> None:
    await service.delete(testimonial_id)
    return None
