"""Testimonial service layer."""

from typing import Any, Callable, List

from core.exceptions import EntityNotFoundError
from domain.entities.testimonial import DEFAULT_RATING, Testimonial
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.changes import merge, require_text

REQUIRED_FIELDS = ("name", "role", "company", "content")
IMMUTABLE_FIELDS = ("id", "created_at")


class TestimonialService:
    """Service layer for Testimonial business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_all(self) -> List[Testimonial]:
        async with self._uow_factory() as uow:
            return await uow.testimonials.get_all()

    async def get_by_id(self, testimonial_id: str) -> Testimonial:
        async with self._uow_factory() as uow:
            testimonial = await uow.testimonials.get(testimonial_id)
            if not testimonial:
                raise EntityNotFoundError("testimonial", testimonial_id)
            return testimonial

    async def create(self, **fields: Any) -> Testimonial:
        require_text(fields, REQUIRED_FIELDS)
        for name in IMMUTABLE_FIELDS:
            fields.pop(name, None)
        fields["rating"] = fields.get("rating") or DEFAULT_RATING
        fields["featured"] = bool(fields.get("featured", False))

        async with self._uow_factory() as uow:
            created = await uow.testimonials.create(Testimonial(**fields))
            await uow.commit()
            return created

    async def update(self, testimonial_id: str, changes: dict[str, Any]) -> Testimonial:
        changes = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        if "rating" in changes and not changes["rating"]:
            changes["rating"] = DEFAULT_RATING
        if "featured" in changes:
            changes["featured"] = bool(changes["featured"])

        async with self._uow_factory() as uow:
            testimonial = await uow.testimonials.get(testimonial_id)
            if not testimonial:
                raise EntityNotFoundError("testimonial", testimonial_id)

            updated = await uow.testimonials.update(
                merge(testimonial, changes, REQUIRED_FIELDS)
            )
            await uow.commit()
            return updated

    async def delete(self, testimonial_id: str) -> None:
        async with self._uow_factory() as uow:
            deleted = await uow.testimonials.delete(testimonial_id)
            if not deleted:
                raise EntityNotFoundError("testimonial", testimonial_id)
            await uow.commit()
