"""
Book API Tests
==============
"""

import uuid

import pytest


async def add_book(client, headers, **fields) -> dict:
    body = {"title": "Dune", "author": "Frank Herbert", "totalPages": 600}
    body.update(fields)
    response = await client.post("/api/v1/books", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestBooks:

    @pytest.mark.asyncio
    async def test_add_book_defaults(self, client, auth_headers):
        book = await add_book(client, auth_headers)

        assert book["status"] == "want_to_read"
        assert book["currentPage"] == 0

    @pytest.mark.asyncio
    async def test_current_page_beyond_total_is_rejected(self, client, auth_headers):
        response = await client.post(
            "/api/v1/books",
            json={"title": "Short", "totalPages": 10, "currentPage": 11},
            headers=auth_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_rating_out_of_range_is_rejected(self, client, auth_headers):
        response = await client.post(
            "/api/v1/books",
            json={"title": "Short", "rating": 6},
            headers=auth_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_update_progress(self, client, auth_headers):
        book = await add_book(client, auth_headers)

        response = await client.put(
            f"/api/v1/books/{book['id']}",
            json={"status": "reading", "currentPage": 120},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "reading"
        assert data["currentPage"] == 120
        assert data["title"] == "Dune"

    @pytest.mark.asyncio
    async def test_update_past_last_page_is_rejected(self, client, auth_headers):
        book = await add_book(client, auth_headers)

        response = await client.put(
            f"/api/v1/books/{book['id']}",
            json={"currentPage": 601},
            headers=auth_headers,
        )

        assert response.status_code == 400
        fetched = await client.get(f"/api/v1/books/{book['id']}", headers=auth_headers)
        assert fetched.json()["data"]["currentPage"] == 0

    @pytest.mark.asyncio
    async def test_list_most_recently_updated_first(self, client, auth_headers):
        first = await add_book(client, auth_headers, title="First")
        await add_book(client, auth_headers, title="Second")
        await client.put(f"/api/v1/books/{first['id']}", json={"rating": 5}, headers=auth_headers)

        response = await client.get("/api/v1/books", headers=auth_headers)

        assert [b["title"] for b in response.json()["data"]] == ["First", "Second"]

    @pytest.mark.asyncio
    async def test_other_users_book_is_not_found(self, client, auth_headers, other_headers):
        book = await add_book(client, other_headers)

        for response in (
            await client.get(f"/api/v1/books/{book['id']}", headers=auth_headers),
            await client.delete(f"/api/v1/books/{book['id']}", headers=auth_headers),
        ):
            assert response.status_code == 404
            assert response.json()["error"]["code"] == "BOOK_001"

    @pytest.mark.asyncio
    async def test_delete_book(self, client, auth_headers):
        book = await add_book(client, auth_headers)

        response = await client.delete(f"/api/v1/books/{book['id']}", headers=auth_headers)

        assert response.status_code == 200
        missing = await client.get(f"/api/v1/books/{uuid.uuid4()}", headers=auth_headers)
        assert missing.status_code == 404
        assert (await client.get("/api/v1/books", headers=auth_headers)).json()["data"] == []
