"""
Analytics & Dashboard Tests
===========================

Energy/transaction write paths and the aggregates built from them.
"""

from datetime import date, datetime, time, timedelta, timezone
import uuid

import pytest

from lifehub.core.aggregation import TimeRange, month_start
from lifehub.models.finance import Transaction, TransactionType
from lifehub.models.focus import PomodoroSession
from lifehub.models.goal import Goal, Milestone, Skill
from lifehub.models.habit import Habit, HabitCompletion
from lifehub.models.journal import JournalEntry
from lifehub.models.tracking import EnergyLog, Note, Todo
from lifehub.services.analytics_service import AnalyticsService
from lifehub.services.dashboard_service import format_duration


def at(day: date, hour: int = 9) -> datetime:
    return datetime.combine(day, time(hour), tzinfo=timezone.utc)


class TestTrackingEndpoints:

    @pytest.mark.asyncio
    async def test_energy_log_crud(self, client, auth_headers, today):
        created = await client.post(
            "/api/v1/energy",
            json={"energyLevel": 7, "focusLevel": 5},
            headers=auth_headers,
        )
        assert created.status_code == 201
        log = created.json()["data"]
        assert log["date"] == today.isoformat()

        listing = await client.get("/api/v1/energy", headers=auth_headers)
        assert [entry["energyLevel"] for entry in listing.json()["data"]] == [7]

        deleted = await client.delete(f"/api/v1/energy/{log['id']}", headers=auth_headers)
        assert deleted.status_code == 200
        assert (await client.get("/api/v1/energy", headers=auth_headers)).json()["data"] == []

    @pytest.mark.asyncio
    async def test_energy_level_out_of_range(self, client, auth_headers):
        response = await client.post("/api/v1/energy", json={"energyLevel": 11}, headers=auth_headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_transaction_crud(self, client, auth_headers, other_headers):
        created = await client.post(
            "/api/v1/transactions",
            json={"amount": 12.5, "type": "expense", "category": "Food"},
            headers=auth_headers,
        )
        assert created.status_code == 201
        transaction_id = created.json()["data"]["id"]

        foreign = await client.delete(f"/api/v1/transactions/{transaction_id}", headers=other_headers)
        assert foreign.status_code == 404
        assert foreign.json()["error"]["code"] == "TRANSACTION_001"

        deleted = await client.delete(f"/api/v1/transactions/{transaction_id}", headers=auth_headers)
        assert deleted.status_code == 200

    @pytest.mark.asyncio
    async def test_negative_amount_is_rejected(self, client, auth_headers):
        response = await client.post(
            "/api/v1/transactions",
            json={"amount": -1, "type": "income", "category": "Salary"},
            headers=auth_headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_unknown_energy_log(self, client, auth_headers):
        response = await client.delete(f"/api/v1/energy/{uuid.uuid4()}", headers=auth_headers)

        assert response.status_code == 404


@pytest.fixture
def seed_activity(db, user, today):
    """Arrange a small history across every tracker."""

    async def _seed():
        habit_a = Habit(id=uuid.uuid4(), user_id=user.id, name="Read")
        habit_b = Habit(id=uuid.uuid4(), user_id=user.id, name="Run")
        goal = Goal(id=uuid.uuid4(), user_id=user.id, title="Ship it", progress=60)
        db.add_all([habit_a, habit_b, goal])
        await db.flush()

        db.add_all([
            # habit A done today and yesterday, habit B missed today
            HabitCompletion(habit_id=habit_a.id, user_id=user.id, date=today, completed=True),
            HabitCompletion(habit_id=habit_a.id, user_id=user.id, date=today - timedelta(days=1), completed=True),
            HabitCompletion(habit_id=habit_b.id, user_id=user.id, date=today, completed=False),
            EnergyLog(user_id=user.id, date=today, energy_level=8, focus_level=6),
            EnergyLog(user_id=user.id, date=today, energy_level=5, focus_level=4),
            EnergyLog(user_id=user.id, date=today - timedelta(days=2), energy_level=3, focus_level=2),
            EnergyLog(user_id=user.id, date=today - timedelta(days=40), energy_level=10, focus_level=10),
            PomodoroSession(user_id=user.id, duration=1500, date=at(today)),
            PomodoroSession(user_id=user.id, duration=1500, date=at(today - timedelta(days=1))),
            JournalEntry(user_id=user.id, title="a", mood="Happy", date=today),
            JournalEntry(user_id=user.id, title="b", mood="Happy", date=today),
            JournalEntry(user_id=user.id, title="c", mood=None, date=today - timedelta(days=3)),
            Transaction(user_id=user.id, amount=3000, type=TransactionType.INCOME, category="Salary", date=today),
            Transaction(user_id=user.id, amount=300, type=TransactionType.EXPENSE, category="Food", date=today),
            Transaction(user_id=user.id, amount=100, type=TransactionType.EXPENSE, category="Transport", date=today),
            Transaction(
                user_id=user.id,
                amount=999,
                type=TransactionType.EXPENSE,
                category="Old",
                date=month_start(today, 7),
            ),
            Milestone(user_id=user.id, goal_id=goal.id, title="Prototype", completed=True),
            Skill(user_id=user.id, name="Python", hours_spent=120),
            Note(user_id=user.id, title="Idea"),
            Todo(user_id=user.id, title="due today", due_date=today, completed=True),
            Todo(user_id=user.id, title="also due", due_date=today),
        ])
        await db.commit()

    return _seed


class TestAnalytics:

    @pytest.mark.asyncio
    async def test_default_range_is_thirty_days(self, client, auth_headers, seed_activity, today):
        await seed_activity()

        response = await client.get("/api/v1/analytics", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["range"] == "30days"
        assert data["granularity"] == "day"
        assert len(data["energyData"]) == 30
        assert len(data["pomodoroData"]) == 30
        assert data["energyData"][-1]["date"] == today.isoformat()

    @pytest.mark.asyncio
    async def test_energy_is_averaged_per_day(self, client, auth_headers, seed_activity):
        await seed_activity()

        data = (await client.get("/api/v1/analytics?range=7days", headers=auth_headers)).json()["data"]

        energy = data["energyData"]
        assert len(energy) == 7
        assert energy[-1] == {"date": energy[-1]["date"], "value": 6.5, "focus": 5.0, "count": 2}
        assert energy[-3]["value"] == 3
        assert energy[0]["count"] == 0
        # the 40-day-old log is outside the window
        assert data["stats"]["averageEnergyLevel"] == 5

    @pytest.mark.asyncio
    async def test_habit_rates_and_streaks(self, client, auth_headers, seed_activity):
        await seed_activity()

        data = (await client.get("/api/v1/analytics?range=7days", headers=auth_headers)).json()["data"]

        rates = {h["name"]: h for h in data["habitCompletionRates"]}
        assert rates["Read"]["completionRate"] == 100
        assert rates["Read"]["streak"] == 2
        assert rates["Run"]["completionRate"] == 0
        assert rates["Run"]["streak"] == 0
        assert data["stats"]["averageHabitCompletionRate"] == 50

    @pytest.mark.asyncio
    async def test_finance_rollup_and_shares(self, client, auth_headers, seed_activity):
        await seed_activity()

        data = (await client.get("/api/v1/analytics", headers=auth_headers)).json()["data"]

        months = data["monthlyFinancialData"]
        assert len(months) == 6
        assert months[-1]["income"] == 3000
        assert months[-1]["expenses"] == 400
        assert months[-1]["savings"] == 2600
        assert sum(m["expenses"] for m in months) == 400

        shares = {s["name"]: s["value"] for s in data["expenseCategories"]}
        assert shares == {"Food": 75, "Transport": 25}

    @pytest.mark.asyncio
    async def test_mood_shares_default_to_neutral(self, client, auth_headers, seed_activity):
        await seed_activity()

        data = (await client.get("/api/v1/analytics?range=7days", headers=auth_headers)).json()["data"]

        moods = {s["name"]: s["value"] for s in data["moodData"]}
        assert moods == {"Happy": 67, "Neutral": 33}

    @pytest.mark.asyncio
    async def test_year_range_is_monthly(self, client, auth_headers, seed_activity, today):
        await seed_activity()

        data = (await client.get("/api/v1/analytics?range=year", headers=auth_headers)).json()["data"]

        assert data["granularity"] == "month"
        assert len(data["pomodoroData"]) == 12
        assert data["pomodoroData"][-1]["date"] == month_start(today).isoformat()
        assert sum(p["count"] for p in data["pomodoroData"]) == 2

    @pytest.mark.asyncio
    async def test_goals_and_skills(self, client, auth_headers, seed_activity):
        await seed_activity()

        data = (await client.get("/api/v1/analytics", headers=auth_headers)).json()["data"]

        assert data["goals"][0]["title"] == "Ship it"
        assert data["goals"][0]["milestones"][0]["title"] == "Prototype"
        assert data["skills"][0]["name"] == "Python"
        assert data["stats"]["averageGoalProgress"] == 60

    @pytest.mark.asyncio
    async def test_unknown_range_is_rejected(self, client, auth_headers):
        response = await client.get("/api/v1/analytics?range=decade", headers=auth_headers)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_empty_account(self, client, auth_headers):
        data = (await client.get("/api/v1/analytics", headers=auth_headers)).json()["data"]

        assert all(point["count"] == 0 for point in data["energyData"])
        assert data["habitCompletionRates"] == []
        assert data["expenseCategories"] == []
        assert data["stats"] == {
            "averageEnergyLevel": 0,
            "totalPomodoroSessions": 0,
            "averageHabitCompletionRate": 0,
            "averageGoalProgress": 0,
        }

    @pytest.mark.asyncio
    async def test_service_respects_given_today(self, db, user, seed_activity, today):
        await seed_activity()

        result = await AnalyticsService(db).get_analytics(
            user.id,
            TimeRange.LAST_7_DAYS,
            today=today + timedelta(days=30),
        )

        assert all(point.count == 0 for point in result.pomodoro_data)


class TestDailyStats:

    @pytest.mark.asyncio
    async def test_daily_snapshot(self, client, auth_headers, seed_activity, today):
        await seed_activity()

        data = (await client.get("/api/v1/analytics/daily", headers=auth_headers)).json()["data"]

        assert data["date"] == today.isoformat()
        assert data["pomodoroSessions"] == 1
        assert data["pomodoroMinutes"] == 25
        assert data["habitCompletionRate"] == 50
        assert data["journalWritten"] is True
        assert data["todoCompletionRate"] == 50
        assert data["energyLevel"] in (8, 5)


class TestDashboard:

    @pytest.mark.asyncio
    async def test_dashboard(self, client, auth_headers, seed_activity, today):
        await seed_activity()

        response = await client.get("/api/v1/dashboard", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]

        activity = data["activityData"]
        assert len(activity) == 7
        assert activity[-1]["date"] == today.isoformat()
        assert activity[-1]["energy"] == 7  # (8 + 5) / 2 rounded half up
        assert activity[-1]["habits"] == 50
        assert activity[-2]["habits"] == 50
        assert activity[0]["habits"] == 0

        stats = data["stats"]
        assert stats["pomodoroCount"] == 2
        assert stats["pomodoroTime"] == "0h 50m"
        assert stats["habitCompletionRate"] == 67
        assert stats["journalCount"] == 3
        assert stats["todoCompletionRate"] == 50
        assert stats["skillsCount"] == 1

        assert data["recentMilestones"][0]["goalTitle"] == "Ship it"
        assert data["notes"][0]["title"] == "Idea"

    @pytest.mark.asyncio
    async def test_dashboard_requires_session(self, client):
        response = await client.get("/api/v1/dashboard")

        assert response.status_code == 401


def test_format_duration():
    assert format_duration(0) == "0h 0m"
    assert format_duration(3 * 3600 + 125) == "3h 2m"
