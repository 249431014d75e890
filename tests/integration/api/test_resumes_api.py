"""Integration tests for resume endpoints."""

from pathlib import Path

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from domain.services.resume_service import ResumeService

PDF = b"%PDF-1.4\n% test resume\n"


async def _upload(
    client: AsyncClient, headers: dict[str, str], name: str = "cv.pdf", **form: str
) -> dict:
    response = await client.post(
        "/api/resumes",
        files={"file": (name, PDF, "application/pdf")},
        data=form,
        headers=headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


class TestResumesAPI:
    async def test_upload_stores_file_inactive(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_dir: Path
    ) -> None:
        body = await _upload(client, admin_headers, parsedContent="Skills: Python")

        assert body["isActive"] is False
        assert body["originalName"] == "cv.pdf"
        assert body["parsedContent"] == "Skills: Python"
        assert body["fileUrl"].startswith("/uploads/")
        assert (upload_dir / body["filename"]).read_bytes() == PDF

    async def test_uploaded_file_is_served(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        body = await _upload(client, admin_headers)

        response = await client.get(body["fileUrl"])

        assert response.status_code == 200
        assert response.content == PDF

    async def test_no_active_resume_is_404(self, client: AsyncClient) -> None:
        response = await client.get("/api/resumes/active")

        assert response.status_code == 404

    async def test_set_active_switches_the_single_active_resume(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        first = await _upload(client, admin_headers, isActive="true")
        second = await _upload(client, admin_headers, name="cv2.pdf")

        assert (await client.get("/api/resumes/active")).json()["id"] == first["id"]

        response = await client.post(
            f"/api/resumes/{second['id']}/set-active", headers=admin_headers
        )

        assert response.status_code == 200
        assert response.json()["isActive"] is True
        listed = (await client.get("/api/resumes", headers=admin_headers)).json()
        assert {r["id"]: r["isActive"] for r in listed} == {
            first["id"]: False,
            second["id"]: True,
        }
        assert (await client.get("/api/resumes/active")).json()["id"] == second["id"]

    async def test_set_active_unknown_leaves_current_active(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        current = await _upload(client, admin_headers, isActive="true")

        response = await client.post("/api/resumes/missing/set-active", headers=admin_headers)

        assert response.status_code == 404
        assert (await client.get("/api/resumes/active")).json()["id"] == current["id"]

    async def test_delete_removes_record_and_file(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_dir: Path
    ) -> None:
        body = await _upload(client, admin_headers)

        response = await client.delete(f"/api/resumes/{body['id']}", headers=admin_headers)

        assert response.status_code == 204
        assert not (upload_dir / body["filename"]).exists()
        assert (await client.get(f"/api/resumes/{body['id']}")).status_code == 404

    async def test_upload_requires_admin(
        self, client: AsyncClient, user_headers: dict[str, str], upload_dir: Path
    ) -> None:
        response = await client.post(
            "/api/resumes",
            files={"file": ("cv.pdf", PDF, "application/pdf")},
            headers=user_headers,
        )

        assert response.status_code == 403
        assert list(upload_dir.iterdir()) == []

    async def test_failed_insert_removes_stored_file(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
        upload_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def failing_create(self, **fields):
            raise OperationalError("INSERT INTO resumes", {}, Exception("disk I/O error"))

        monkeypatch.setattr(ResumeService, "create", failing_create)

        response = await client.post(
            "/api/resumes",
            files={"file": ("cv.pdf", PDF, "application/pdf")},
            headers=admin_headers,
        )

        assert response.status_code == 500
        assert response.json()["error_code"] == "DATABASE_ERROR"
        assert list(upload_dir.iterdir()) == []
