"""Integration tests for blog image uploads."""

from pathlib import Path

from httpx import AsyncClient

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class TestBlogImageUpload:
    async def test_image_is_stored_under_blog_images(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_dir: Path
    ) -> None:
        response = await client.post(
            "/api/upload/blog-image",
            files={"image": ("hero.png", PNG, "image/png")},
            headers=admin_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["originalName"] == "hero.png"
        assert body["mimetype"] == "image/png"
        assert body["filename"].startswith("blog-")
        assert body["filename"].endswith(".png")
        assert body["url"] == f"/uploads/blog-images/{body['filename']}"
        assert (upload_dir / "blog-images" / body["filename"]).read_bytes() == PNG

    async def test_disallowed_type_is_415_and_nothing_written(
        self, client: AsyncClient, admin_headers: dict[str, str], upload_dir: Path
    ) -> None:
        response = await client.post(
            "/api/upload/blog-image",
            files={"image": ("notes.txt", b"hello", "text/plain")},
            headers=admin_headers,
        )

        assert response.status_code == 415
        assert response.json()["error_code"] == "UNSUPPORTED_MEDIA_TYPE"
        assert list(upload_dir.rglob("*.txt")) == []

    async def test_missing_file_is_400(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        response = await client.post("/api/upload/blog-image", headers=admin_headers)

        assert response.status_code == 400

    async def test_anonymous_upload_is_401(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/upload/blog-image", files={"image": ("hero.png", PNG, "image/png")}
        )

        assert response.status_code == 401
