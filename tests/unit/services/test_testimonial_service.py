"""Unit tests for TestimonialService."""

import pytest

from core.exceptions import EntityNotFoundError, ValidationFailedError
from domain.entities.testimonial import Testimonial
from domain.services.testimonial_service import TestimonialService
from tests.unit.conftest import FakeUnitOfWork

FIELDS = {"name": "Ada", "role": "Lead", "company": "Acme", "content": "Great work"}


@pytest.fixture
def service(uow: FakeUnitOfWork) -> TestimonialService:
    return TestimonialService(lambda: uow)


async def test_create_defaults_rating_to_five(service: TestimonialService, uow: FakeUnitOfWork):
    uow.testimonials.create.side_effect = lambda t: t

    created = await service.create(**FIELDS, rating=None)

    assert created.rating == "5"
    assert created.featured is False
    assert uow.committed


async def test_create_keeps_explicit_rating(service: TestimonialService, uow: FakeUnitOfWork):
    uow.testimonials.create.side_effect = lambda t: t

    created = await service.create(**FIELDS, rating="4", featured=True)

    assert created.rating == "4"
    assert created.featured is True


async def test_create_requires_company(service: TestimonialService):
    with pytest.raises(ValidationFailedError):
        await service.create(**{**FIELDS, "company": ""})


async def test_update_merges_supplied_fields(service: TestimonialService, uow: FakeUnitOfWork):
    existing = Testimonial(**FIELDS, rating="3")
    uow.testimonials.get.return_value = existing
    uow.testimonials.update.side_effect = lambda t: t

    updated = await service.update(existing.id, {"featured": True})

    assert updated.featured is True
    assert updated.rating == "3"
    assert updated.name == "Ada"


async def test_delete_missing_raises(service: TestimonialService, uow: FakeUnitOfWork):
    uow.testimonials.delete.return_value = False

    with pytest.raises(EntityNotFoundError):
        await service.delete("missing")
