"""Integration tests for testimonial endpoints."""

from httpx import AsyncClient

TESTIMONIAL = {
    "name": "Ada Lovelace",
    "role": "Head of L&D",
    "company": "Analytical Engines",
    "content": "Delivered ahead of schedule.",
}


class TestTestimonialsAPI:
    async def test_create_defaults_rating(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        response = await client.post("/api/testimonials", json=TESTIMONIAL, headers=admin_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["rating"] == "5"
        assert body["featured"] is False
        assert body["avatarUrl"] is None

    async def test_list_newest_first(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        for name in ("first", "second"):
            await client.post(
                "/api/testimonials", json={**TESTIMONIAL, "name": name}, headers=admin_headers
            )

        names = [t["name"] for t in (await client.get("/api/testimonials")).json()]

        assert names == ["second", "first"]

    async def test_update_unknown_is_404(
        self, client: AsyncClient, admin_headers: dict[str, str]
    ) -> None:
        response = await client.put(
            "/api/testimonials/missing", json={"rating": "4"}, headers=admin_headers
        )

        assert response.status_code == 404
        assert response.json()["error_code"] == "TESTIMONIAL_NOT_FOUND"
