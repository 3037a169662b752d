"""
Focus API Tests
===============

Pomodoro sessions, stats and settings; meditation sessions and stats.
"""

from datetime import datetime, time, timedelta, timezone

import pytest
from sqlalchemy import select

from lifehub.models.focus import MeditationSession, PomodoroSession


def at_noon(day) -> str:
    return datetime.combine(day, time(12, 0), tzinfo=timezone.utc).isoformat()


class TestPomodoro:

    @pytest.mark.asyncio
    async def test_record_and_list_sessions(self, client, auth_headers):
        response = await client.post(
            "/api/v1/pomodoro/sessions",
            json={"duration": 1500, "task": "Write report"},
            headers=auth_headers,
        )
        assert response.status_code == 201
        assert response.json()["data"]["task"] == "Write report"

        listing = await client.get("/api/v1/pomodoro/sessions", headers=auth_headers)
        sessions = listing.json()["data"]
        assert len(sessions) == 1
        assert sessions[0]["duration"] == 1500

    @pytest.mark.asyncio
    async def test_non_positive_duration_is_rejected(self, client, auth_headers):
        response = await client.post(
            "/api/v1/pomodoro/sessions",
            json={"duration": 0},
            headers=auth_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_stats_are_dense_over_seven_days(self, client, auth_headers, today):
        for day, duration in [(today, 1500), (today, 600), (today - timedelta(days=2), 1500),
                              (today - timedelta(days=20), 1500)]:
            await client.post(
                "/api/v1/pomodoro/sessions",
                json={"duration": duration, "date": at_noon(day)},
                headers=auth_headers,
            )

        response = await client.get("/api/v1/pomodoro/stats", headers=auth_headers)

        assert response.status_code == 200
        stats = response.json()["data"]
        assert stats["totalSessions"] == 4
        assert stats["totalFocusTime"] == 5100
        assert len(stats["recentSessions"]) == 3

        daily = stats["dailyStats"]
        assert len(daily) == 7
        assert daily[-1] == {"date": today.isoformat(), "count": 2, "duration": 2100}
        assert daily[-3]["count"] == 1
        assert daily[0]["count"] == 0
        assert sum(d["duration"] for d in daily) == 3600

    @pytest.mark.asyncio
    async def test_offset_timestamp_is_stored_in_utc(self, client, auth_headers, db):
        await client.post(
            "/api/v1/pomodoro/sessions",
            json={"duration": 1500, "date": "2026-10-17T22:30:00-05:00"},
            headers=auth_headers,
        )

        stored = await db.scalar(select(PomodoroSession))

        assert stored.date.replace(tzinfo=None) == datetime(2026, 10, 18, 3, 30)

    @pytest.mark.asyncio
    async def test_settings_default_then_persist(self, client, auth_headers):
        response = await client.get("/api/v1/pomodoro/settings", headers=auth_headers)
        assert response.json()["data"] == {
            "workDuration": 25,
            "shortBreakDuration": 5,
            "longBreakDuration": 15,
            "pomodorosUntilLongBreak": 4,
        }

        updated = {
            "workDuration": 50,
            "shortBreakDuration": 10,
            "longBreakDuration": 30,
            "pomodorosUntilLongBreak": 3,
        }
        put = await client.put("/api/v1/pomodoro/settings", json=updated, headers=auth_headers)
        assert put.status_code == 200

        response = await client.get("/api/v1/pomodoro/settings", headers=auth_headers)
        assert response.json()["data"] == updated


class TestMeditation:

    @pytest.mark.asyncio
    async def test_short_session_is_rejected(self, client, auth_headers, db):
        response = await client.post(
            "/api/v1/meditation/sessions",
            json={"duration": 29, "type": "breathing"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "MEDITATION_001"
        assert (await client.get("/api/v1/meditation/sessions", headers=auth_headers)).json()["data"] == []

    @pytest.mark.asyncio
    async def test_record_session(self, client, auth_headers):
        response = await client.post(
            "/api/v1/meditation/sessions",
            json={"duration": 30, "type": "breathing", "notes": "calm"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["type"] == "breathing"

    @pytest.mark.asyncio
    async def test_stats(self, client, auth_headers, db, user, today):
        for days_back, duration in [(0, 600), (0, 125), (3, 300), (10, 1200)]:
            db.add(
                MeditationSession(
                    user_id=user.id,
                    duration=duration,
                    type="body scan",
                    date=datetime.combine(today - timedelta(days=days_back), time(8), tzinfo=timezone.utc),
                )
            )
        await db.commit()

        response = await client.get("/api/v1/meditation/stats", headers=auth_headers)

        stats = response.json()["data"]
        assert stats["totalSessions"] == 4
        assert stats["totalTime"] == 2225
        assert stats["longestSession"] == 1200
        assert stats["averageSessionDuration"] == pytest.approx(556.25)
        assert len(stats["recentSessions"]) == 3

        last7 = stats["last7Days"]
        assert len(last7) == 7
        # 600s -> 10 min, 125s -> 2 min (whole minutes per sitting)
        assert last7[-1]["minutes"] == 12
        assert last7[-1]["label"] == today.strftime("%a")
        assert last7[-4]["minutes"] == 5
        assert sum(d["minutes"] for d in last7) == 17
