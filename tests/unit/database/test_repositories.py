"""Repository and activation tests against an in-memory SQLite database."""

import asyncio
from datetime import datetime, timedelta
from typing import Callable

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import EntityNotFoundError
from domain.entities.blog_post import BlogPost
from domain.entities.project import Project
from domain.entities.resume import Resume
from domain.entities.user import User
from domain.services.resume_service import ResumeService
from infrastructure.database.repositories.sqlalchemy_blog_post_repo import (
    SQLAlchemyBlogPostRepository,
)
from infrastructure.database.repositories.sqlalchemy_project_repo import (
    SQLAlchemyProjectRepository,
)
from infrastructure.database.repositories.sqlalchemy_resume_repo import (
    SQLAlchemyResumeRepository,
)
from infrastructure.database.repositories.sqlalchemy_user_repo import (
    SQLAlchemyUserRepository,
)
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def _post(title: str, minutes: int, **overrides) -> BlogPost:
    fields = {
        "title": title,
        "excerpt": f"{title} excerpt",
        "content": f"Body of {title}",
        "category": "Design",
        "created_at": BASE_TIME + timedelta(minutes=minutes),
        "updated_at": BASE_TIME + timedelta(minutes=minutes),
    }
    fields.update(overrides)
    return BlogPost(**fields)


class TestProjectRepository:
    async def test_round_trips_tools_and_flags(self, db_session: AsyncSession):
        repo = SQLAlchemyProjectRepository(db_session)
        project = Project(
            title="T", description="D", category="eLearning",
            tools=["Storyline", "Rise"], featured=True,
        )

        await repo.create(project)
        stored = await repo.get(project.id)

        assert stored is not None
        assert stored.tools == ["Storyline", "Rise"]
        assert stored.featured is True

    async def test_lists_newest_first(self, db_session: AsyncSession):
        repo = SQLAlchemyProjectRepository(db_session)
        for i, title in enumerate(["old", "middle", "new"]):
            await repo.create(
                Project(
                    title=title, description="D", category="C",
                    created_at=BASE_TIME + timedelta(minutes=i),
                )
            )

        titles = [p.title for p in await repo.get_all()]

        assert titles == ["new", "middle", "old"]

    async def test_empty_table_lists_nothing(self, db_session: AsyncSession):
        assert await SQLAlchemyProjectRepository(db_session).get_all() == []

    async def test_delete_reports_whether_a_row_was_removed(self, db_session: AsyncSession):
        repo = SQLAlchemyProjectRepository(db_session)
        project = await repo.create(Project(title="T", description="D", category="C"))

        assert await repo.delete(project.id) is True
        assert await repo.delete(project.id) is False
        assert await repo.get(project.id) is None


class TestBlogPostRepository:
    async def test_search_matches_title_content_and_excerpt(self, db_session: AsyncSession):
        repo = SQLAlchemyBlogPostRepository(db_session)
        await repo.create(_post("Accessible forms", 0))
        await repo.create(_post("Colour", 1, content="Contrast ratios"))
        await repo.create(_post("Motion", 2, excerpt="Reduced MOTION preferences"))

        assert [p.title for p in await repo.get_all(search="ACCESSIBLE")] == ["Accessible forms"]
        assert [p.title for p in await repo.get_all(search="contrast")] == ["Colour"]
        assert [p.title for p in await repo.get_all(search="reduced motion")] == ["Motion"]

    async def test_search_treats_wildcards_literally(self, db_session: AsyncSession):
        repo = SQLAlchemyBlogPostRepository(db_session)
        await repo.create(_post("Plain", 0))

        assert await repo.get_all(search="%") == []

    async def test_category_is_case_insensitive(self, db_session: AsyncSession):
        repo = SQLAlchemyBlogPostRepository(db_session)
        await repo.create(_post("A", 0, category="Design"))
        await repo.create(_post("B", 1, category="Engineering"))

        assert [p.title for p in await repo.get_all(category="design")] == ["A"]

    async def test_published_only(self, db_session: AsyncSession):
        repo = SQLAlchemyBlogPostRepository(db_session)
        await repo.create(_post("Draft", 0))
        await repo.create(_post("Live", 1, published=True))

        assert [p.title for p in await repo.get_all(published_only=True)] == ["Live"]


class TestUserRepository:
    async def test_email_lookup_ignores_case(self, db_session: AsyncSession):
        repo = SQLAlchemyUserRepository(db_session)
        await repo.create(User(username="ada", email="Ada@Example.com", password_hash="x"))

        found = await repo.get_by_email("ada@example.com")

        assert found is not None
        assert found.username == "ada"

    async def test_bump_token_version_increments(self, db_session: AsyncSession):
        repo = SQLAlchemyUserRepository(db_session)
        user = await repo.create(User(username="ada", email="ada@example.com", password_hash="x"))

        assert await repo.bump_token_version(user.id) == 1
        assert await repo.bump_token_version(user.id) == 2
        refreshed = await repo.get(user.id)
        assert refreshed is not None
        assert refreshed.token_version == 2


class TestResumeActivation:
    async def _seed(self, db_session: AsyncSession, count: int) -> list[Resume]:
        repo = SQLAlchemyResumeRepository(db_session)
        created = []
        for i in range(count):
            created.append(
                await repo.create(
                    Resume(
                        filename=f"cv{i}.pdf",
                        original_name=f"CV {i}.pdf",
                        file_url=f"/uploads/cv{i}.pdf",
                        uploaded_at=BASE_TIME + timedelta(minutes=i),
                    )
                )
            )
        await db_session.commit()
        return created

    async def test_activate_leaves_exactly_one_active(self, db_session: AsyncSession):
        repo = SQLAlchemyResumeRepository(db_session)
        first, second = await self._seed(db_session, 2)

        await repo.activate(first.id)
        await repo.activate(second.id)

        flags = {r.id: r.is_active for r in await repo.get_all()}
        assert flags == {first.id: False, second.id: True}
        active = await repo.get_active()
        assert active is not None
        assert active.id == second.id

    async def test_activate_unknown_id_changes_nothing(self, db_session: AsyncSession):
        repo = SQLAlchemyResumeRepository(db_session)
        (resume,) = await self._seed(db_session, 1)
        await repo.activate(resume.id)

        assert await repo.activate("missing") is False

        active = await repo.get_active()
        assert active is not None
        assert active.id == resume.id

    async def test_no_active_resume(self, db_session: AsyncSession):
        await self._seed(db_session, 1)

        assert await SQLAlchemyResumeRepository(db_session).get_active() is None

    async def test_concurrent_activations_end_with_one_active(
        self,
        db_session: AsyncSession,
        uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    ):
        resumes = await self._seed(db_session, 4)
        service = ResumeService(uow_factory)

        await asyncio.gather(*(service.set_active(r.id) for r in resumes))

        listed = await service.get_all()
        assert sum(1 for r in listed if r.is_active) == 1

    async def test_delete_is_observable(self, uow_factory: Callable[[], SQLAlchemyUnitOfWork]):
        service = ResumeService(uow_factory)
        resume = await service.create("cv.pdf", "CV.pdf", "/uploads/cv.pdf", is_active=True)

        await service.delete(resume.id)

        assert await service.get_all() == []
        with pytest.raises(EntityNotFoundError):
            await service.get_active()
