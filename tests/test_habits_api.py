"""
Habit API Tests
===============

Tests for habit CRUD, the completion toggle, and ownership checks.
"""

from datetime import date, timedelta
import uuid

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from lifehub.models.habit import Habit, HabitCompletion


async def create_habit(client: AsyncClient, headers: dict, name: str = "Read") -> dict:
    response = await client.post("/api/v1/habits", json={"name": name}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def toggle(client, headers, habit_id, day: date, completed: bool = True):
    return await client.post(
        "/api/v1/habits/toggle",
        json={"habitId": habit_id, "date": day.isoformat(), "completed": completed},
        headers=headers,
    )


async def count_completions(db, habit_id: str) -> int:
    stmt = select(func.count()).select_from(HabitCompletion).where(
        HabitCompletion.habit_id == uuid.UUID(habit_id)
    )
    return await db.scalar(stmt)


class TestAuthentication:

    @pytest.mark.asyncio
    async def test_list_requires_session(self, client: AsyncClient):
        response = await client.get("/api/v1/habits")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTH_001"

    @pytest.mark.asyncio
    async def test_create_without_session_does_not_write(self, client: AsyncClient, db):
        response = await client.post("/api/v1/habits", json={"name": "Run"})

        assert response.status_code == 401
        assert await db.scalar(select(func.count()).select_from(Habit)) == 0

    @pytest.mark.asyncio
    async def test_invalid_token_is_rejected(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/habits",
            headers={"Authorization": "Bearer not-a-token"},
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTH_002"


class TestCreateAndList:

    @pytest.mark.asyncio
    async def test_create_habit(self, client, auth_headers):
        data = await create_habit(client, auth_headers, "Meditate")

        assert data["name"] == "Meditate"
        assert data["category"] == "other"
        assert data["frequency"] == "daily"
        assert data["completions"] == []
        assert data["currentStreak"] == 0
        assert data["completionRate"] == 0
        assert data["formationProgress"] == 0

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, client, auth_headers):
        response = await client.post("/api/v1/habits", json={"name": "   "}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_missing_name_is_rejected(self, client, auth_headers):
        response = await client.post("/api/v1/habits", json={}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"]["field"] == "name"

    @pytest.mark.asyncio
    async def test_list_only_returns_own_habits(self, client, auth_headers, other_headers):
        await create_habit(client, auth_headers, "Mine")
        await create_habit(client, other_headers, "Theirs")

        response = await client.get("/api/v1/habits", headers=auth_headers)

        assert response.status_code == 200
        names = [h["name"] for h in response.json()["data"]]
        assert names == ["Mine"]


class TestToggle:

    @pytest.mark.asyncio
    async def test_first_toggle_creates_one_row(self, client, auth_headers, db, today):
        habit = await create_habit(client, auth_headers)

        response = await toggle(client, auth_headers, habit["id"], today, True)

        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data["completions"]) == 1
        assert data["completions"][0]["completed"] is True
        assert data["currentStreak"] == 1
        assert await count_completions(db, habit["id"]) == 1

    @pytest.mark.asyncio
    async def test_second_toggle_updates_in_place(self, client, auth_headers, db, today):
        habit = await create_habit(client, auth_headers)

        await toggle(client, auth_headers, habit["id"], today, True)
        response = await toggle(client, auth_headers, habit["id"], today, False)

        data = response.json()["data"]
        assert len(data["completions"]) == 1
        assert data["completions"][0]["completed"] is False
        assert data["currentStreak"] == 0
        assert await count_completions(db, habit["id"]) == 1

    @pytest.mark.asyncio
    async def test_toggle_pair_restores_state(self, client, auth_headers, today):
        habit = await create_habit(client, auth_headers)
        await toggle(client, auth_headers, habit["id"], today, False)

        await toggle(client, auth_headers, habit["id"], today, True)
        response = await toggle(client, auth_headers, habit["id"], today, False)

        completions = response.json()["data"]["completions"]
        assert [c["completed"] for c in completions] == [False]

    @pytest.mark.asyncio
    async def test_streak_of_four(self, client, auth_headers, today):
        habit = await create_habit(client, auth_headers)
        for n in range(4):
            response = await toggle(client, auth_headers, habit["id"], today - timedelta(days=n))

        data = response.json()["data"]
        assert data["currentStreak"] == 4
        assert data["completionRate"] == 100
        assert data["formationProgress"] == 6

    @pytest.mark.asyncio
    async def test_completion_rate_counts_records(self, client, auth_headers, today):
        habit = await create_habit(client, auth_headers)
        await toggle(client, auth_headers, habit["id"], today, True)
        await toggle(client, auth_headers, habit["id"], today - timedelta(days=1), False)
        await toggle(client, auth_headers, habit["id"], today - timedelta(days=2), True)
        response = await toggle(client, auth_headers, habit["id"], today - timedelta(days=3), False)

        assert response.json()["data"]["completionRate"] == 50

    @pytest.mark.asyncio
    async def test_missing_habit_id_is_rejected(self, client, auth_headers, today):
        response = await client.post(
            "/api/v1/habits/toggle",
            json={"date": today.isoformat(), "completed": True},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["field"] == "habitId"

    @pytest.mark.asyncio
    async def test_missing_completed_is_rejected(self, client, auth_headers, db, today):
        habit = await create_habit(client, auth_headers)

        response = await client.post(
            "/api/v1/habits/toggle",
            json={"habitId": habit["id"], "date": today.isoformat()},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["field"] == "completed"
        assert await count_completions(db, habit["id"]) == 0

    @pytest.mark.asyncio
    async def test_missing_date_is_rejected(self, client, auth_headers, db, today):
        habit = await create_habit(client, auth_headers)
        await toggle(client, auth_headers, habit["id"], today, True)

        response = await client.post(
            "/api/v1/habits/toggle",
            json={"habitId": habit["id"], "completed": False},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["field"] == "date"
        listing = await client.get("/api/v1/habits", headers=auth_headers)
        completions = listing.json()["data"][0]["completions"]
        assert [c["completed"] for c in completions] == [True]

    @pytest.mark.asyncio
    async def test_unknown_habit_is_not_found(self, client, auth_headers, today):
        response = await toggle(client, auth_headers, str(uuid.uuid4()), today)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "HABIT_001"

    @pytest.mark.asyncio
    async def test_cannot_toggle_another_users_habit(self, client, auth_headers, other_headers, db, today):
        habit = await create_habit(client, other_headers)

        response = await toggle(client, auth_headers, habit["id"], today)

        assert response.status_code == 404
        assert await count_completions(db, habit["id"]) == 0


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_removes_completions(self, client, auth_headers, db, today):
        habit = await create_habit(client, auth_headers)
        await toggle(client, auth_headers, habit["id"], today)
        await toggle(client, auth_headers, habit["id"], today - timedelta(days=1))

        response = await client.delete(f"/api/v1/habits/{habit['id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"id": habit["id"], "deleted": True}
        assert await count_completions(db, habit["id"]) == 0
        assert await db.get(Habit, uuid.UUID(habit["id"])) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_habit(self, client, auth_headers):
        response = await client.delete(f"/api/v1/habits/{uuid.uuid4()}", headers=auth_headers)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_cannot_delete_another_users_habit(self, client, auth_headers, other_headers):
        habit = await create_habit(client, other_headers)

        response = await client.delete(f"/api/v1/habits/{habit['id']}", headers=auth_headers)

        assert response.status_code == 404
        listing = await client.get("/api/v1/habits", headers=other_headers)
        assert len(listing.json()["data"]) == 1
