"""
Journal API Tests
=================
"""

from datetime import date
import uuid

import pytest
from httpx import AsyncClient


async def create_entry(client: AsyncClient, headers: dict, **fields) -> dict:
    body = {"title": "Morning pages", "content": "Slept well", "mood": "Happy"}
    body.update(fields)
    response = await client.post("/api/v1/journal", json=body, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestJournal:

    @pytest.mark.asyncio
    async def test_create_entry_cleans_tags(self, client, auth_headers):
        entry = await create_entry(
            client,
            auth_headers,
            tags=[" work ", "work", "", "sleep"],
            date="2026-10-01",
        )

        assert entry["title"] == "Morning pages"
        assert entry["tags"] == ["work", "sleep"]
        assert entry["date"] == "2026-10-01"

    @pytest.mark.asyncio
    async def test_missing_title_is_rejected(self, client, auth_headers):
        response = await client.post("/api/v1/journal", json={"content": "x"}, headers=auth_headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_list_newest_date_first(self, client, auth_headers):
        await create_entry(client, auth_headers, title="Old", date="2026-01-01")
        await create_entry(client, auth_headers, title="New", date="2026-06-01")
        await create_entry(client, auth_headers, title="Middle", date="2026-03-01")

        response = await client.get("/api/v1/journal", headers=auth_headers)

        titles = [e["title"] for e in response.json()["data"]]
        assert titles == ["New", "Middle", "Old"]

    @pytest.mark.asyncio
    async def test_update_keeps_omitted_fields(self, client, auth_headers):
        entry = await create_entry(client, auth_headers)

        response = await client.put(
            f"/api/v1/journal/{entry['id']}",
            json={"mood": "Calm"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["mood"] == "Calm"
        assert data["title"] == "Morning pages"
        assert data["content"] == "Slept well"

    @pytest.mark.asyncio
    async def test_update_another_users_entry_is_not_found(self, client, auth_headers, other_headers):
        entry = await create_entry(client, other_headers)

        response = await client.put(
            f"/api/v1/journal/{entry['id']}",
            json={"title": "Hijacked"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "JOURNAL_001"

    @pytest.mark.asyncio
    async def test_delete_entry(self, client, auth_headers):
        entry = await create_entry(client, auth_headers)

        response = await client.delete(f"/api/v1/journal/{entry['id']}", headers=auth_headers)
        assert response.status_code == 200

        listing = await client.get("/api/v1/journal", headers=auth_headers)
        assert listing.json()["data"] == []

    @pytest.mark.asyncio
    async def test_delete_unknown_entry(self, client, auth_headers):
        response = await client.delete(f"/api/v1/journal/{uuid.uuid4()}", headers=auth_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_date_defaults_to_today(self, client, auth_headers):
        entry = await create_entry(client, auth_headers)

        assert entry["date"] == date.today().isoformat()
