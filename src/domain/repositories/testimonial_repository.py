"""Testimonial repository protocol."""

from typing import Protocol

from domain.entities.testimonial import Testimonial


class ITestimonialRepository(Protocol):
    """Repository interface for Testimonial entities."""

    async def get(self, id: str) -> Testimonial | None:
        ...

    async def get_all(self) -> list[Testimonial]:
        ...

    async def create(self, testimonial: Testimonial) -> Testimonial:
        ...

    async def update(self, testimonial: Testimonial) -> Testimonial:
        ...

    async def delete(self, id: str) -> bool:
        ...
