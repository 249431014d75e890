"""SQLAlchemy implementation of Testimonial repository."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.testimonial import Testimonial
from infrastructure.database.models import TestimonialModel


class SQLAlchemyTestimonialRepository:
    """SQLAlchemy implementation of ITestimonialRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> Testimonial | None:
        model = await self._session.get(TestimonialModel, id)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Testimonial]:
        stmt = select(TestimonialModel).order_by(TestimonialModel.created_at.desc())
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, testimonial: Testimonial) -> Testimonial:
        model = self._to_model(testimonial)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, testimonial: Testimonial) -> Testimonial:
        model = await self._session.get(TestimonialModel, testimonial.id)
        if not model:
            raise ValueError(f"Testimonial {testimonial.id} not found")

        model.name = testimonial.name
        model.role = testimonial.role
        model.company = testimonial.company
        model.content = testimonial.content
        model.avatar_url = testimonial.avatar_url
        model.rating = testimonial.rating
        model.featured = testimonial.featured

        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: str) -> bool:
        result = await self._session.execute(
            delete(TestimonialModel).where(TestimonialModel.id == id)
        )
        await self._session.flush()
        return bool(result.rowcount)

    def _to_entity(self, model: TestimonialModel) -> Testimonial:
        return Testimonial(
            id=model.id,
            name=model.name,
            role=model.role,
            company=model.company,
            content=model.content,
            avatar_url=model.avatar_url,
            rating=model.rating,
            featured=bool(model.featured),
            created_at=model.created_at,
        )

    def _to_model(self, entity: Testimonial) -> TestimonialModel:
        return TestimonialModel(
            id=entity.id,
            name=entity.name,
            role=entity.role,
            company=entity.company,
            content=entity.content,
            avatar_url=entity.avatar_url,
            rating=entity.rating,
            featured=entity.featured,
            created_at=entity.created_at,
        )
