"""
Analytics Service
=================

Read-only aggregates behind the analytics page.

Every series is built from flat rows by ``bucketize`` so each chart
receives a dense, chronologically ordered list for the selected range.
"""

from collections import Counter
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable, Optional
import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lifehub.core.aggregation import Granularity, TimeRange, bucketize, make_buckets
from lifehub.core.streaks import (
    build_completion_log,
    completion_rate,
    current_streak,
    formation_progress,
    percentage,
    round_half_up,
)
from lifehub.models.finance import Transaction, TransactionType
from lifehub.models.focus import PomodoroSession
from lifehub.models.goal import Goal, Skill
from lifehub.models.habit import Habit, HabitCompletion
from lifehub.models.journal import JournalEntry
from lifehub.models.tracking import EnergyLog, Todo
from lifehub.schemas.analytics import (
    AnalyticsResponse,
    AnalyticsStats,
    DailyStats,
    EnergyPoint,
    GoalSummary,
    HabitRate,
    MonthlyFinance,
    PomodoroPoint,
    ShareSlice,
    SkillSummary,
)

FINANCE_MONTHS = 6
DEFAULT_MOOD = "Neutral"


def start_of_day(day: date) -> datetime:
    """Midnight UTC at the start of ``day``."""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def average(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0


def shares(totals: dict[str, float]) -> list[ShareSlice]:
    """Turn per-name totals into rounded percentage slices."""
    whole = sum(totals.values())
    return [ShareSlice(name=name, value=percentage(value, whole)) for name, value in totals.items()]


def daily_habit_rate(
    completions: Iterable[HabitCompletion],
    habit_count: int,
    day: date,
) -> int:
    """
    Share of the user's habits completed on ``day``.

    A habit with no record for the day counts as not completed.
    """
    done = {c.habit_id for c in completions if c.date == day and c.completed}
    return percentage(len(done), habit_count)


class AnalyticsService:
    """Service for analytics aggregates."""

    def __init__(self, db: AsyncSession):
        self.db = db

    # -------------------------------------------------------------------------
    # Loaders
    # -------------------------------------------------------------------------

    async def _energy_logs(self, user_id: uuid.UUID, start: date, end: date) -> list[EnergyLog]:
        stmt = (
            select(EnergyLog)
            .where(EnergyLog.user_id == user_id, EnergyLog.date >= start, EnergyLog.date <= end)
            .order_by(EnergyLog.date.asc())
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def _pomodoros(self, user_id: uuid.UUID, start: date, end: date) -> list[PomodoroSession]:
        stmt = (
            select(PomodoroSession)
            .where(
                PomodoroSession.user_id == user_id,
                PomodoroSession.date >= start_of_day(start),
                PomodoroSession.date < start_of_day(end + timedelta(days=1)),
            )
            .order_by(PomodoroSession.date.asc())
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def _habits(self, user_id: uuid.UUID) -> list[Habit]:
        stmt = (
            select(Habit)
            .where(Habit.user_id == user_id)
            .options(selectinload(Habit.completions))
            .order_by(Habit.created_at.asc())
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def _journal_entries(self, user_id: uuid.UUID, start: date, end: date) -> list[JournalEntry]:
        stmt = (
            select(JournalEntry)
            .where(
                JournalEntry.user_id == user_id,
                JournalEntry.date >= start,
                JournalEntry.date <= end,
            )
            .order_by(JournalEntry.date.asc())
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def _transactions(self, user_id: uuid.UUID, start: date, end: date) -> list[Transaction]:
        stmt = (
            select(Transaction)
            .where(
                Transaction.user_id == user_id,
                Transaction.date >= start,
                Transaction.date <= end,
            )
            .order_by(Transaction.date.asc())
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def goals(self, user_id: uuid.UUID) -> list[Goal]:
        stmt = (
            select(Goal)
            .where(Goal.user_id == user_id)
            .options(selectinload(Goal.milestones))
            .order_by(Goal.created_at.desc())
        )
        return list((await self.db.execute(stmt)).scalars().all())

    async def _skills(self, user_id: uuid.UUID) -> list[Skill]:
        stmt = select(Skill).where(Skill.user_id == user_id).order_by(Skill.hours_spent.desc())
        return list((await self.db.execute(stmt)).scalars().all())

    # -------------------------------------------------------------------------
    # Series builders
    # -------------------------------------------------------------------------

    @staticmethod
    def energy_series(
        logs: list[EnergyLog],
        today: date,
        time_range: TimeRange,
    ) -> list[EnergyPoint]:
        """Average energy and focus per bucket."""
        options = dict(
            end=today,
            count=time_range.bucket_count,
            date_of=lambda log: log.date,
            granularity=time_range.granularity,
        )
        energy = bucketize(logs, value_of=lambda log: log.energy_level, **options)
        focus = bucketize(logs, value_of=lambda log: log.focus_level, **options)

        return [
            EnergyPoint(
                date=e.start,
                value=round(e.total / e.count, 1) if e.count else 0,
                focus=round(f.total / f.count, 1) if f.count else 0,
                count=e.count,
            )
            for e, f in zip(energy, focus)
        ]

    @staticmethod
    def pomodoro_series(
        sessions: list[PomodoroSession],
        today: date,
        time_range: TimeRange,
    ) -> list[PomodoroPoint]:
        buckets = bucketize(
            sessions,
            end=today,
            count=time_range.bucket_count,
            date_of=lambda s: s.date,
            value_of=lambda s: s.duration,
            granularity=time_range.granularity,
        )
        return [PomodoroPoint(date=b.start, count=b.count, duration=int(b.total)) for b in buckets]

    @staticmethod
    def habit_rates(habits: list[Habit], start: date, today: date) -> list[HabitRate]:
        """
        Per-habit completion rate over the window, with the current streak.

        The streak looks at the whole history since it may be longer
        than the selected window.
        """
        rates = []
        for habit in habits:
            in_window = [c for c in habit.completions if start <= c.date <= today]
            streak = current_streak(build_completion_log(habit.completions), today)
            rates.append(
                HabitRate(
                    id=habit.id,
                    name=habit.name,
                    completion_rate=completion_rate(c.completed for c in in_window),
                    streak=streak,
                    formation_progress=formation_progress(streak),
                )
            )
        return rates

    @staticmethod
    def monthly_finances(transactions: list[Transaction], today: date) -> list[MonthlyFinance]:
        """Income, expenses and savings for each of the last six months."""
        options = dict(
            end=today,
            count=FINANCE_MONTHS,
            date_of=lambda t: t.date,
            value_of=lambda t: t.amount,
            granularity=Granularity.MONTH,
        )
        income = bucketize(
            [t for t in transactions if t.type == TransactionType.INCOME], **options
        )
        expenses = bucketize(
            [t for t in transactions if t.type == TransactionType.EXPENSE], **options
        )

        return [
            MonthlyFinance(
                month=i.start.strftime("%b"),
                month_start=i.start,
                income=i.total,
                expenses=e.total,
                savings=i.total - e.total,
            )
            for i, e in zip(income, expenses)
        ]

    @staticmethod
    def expense_shares(transactions: list[Transaction]) -> list[ShareSlice]:
        totals: dict[str, float] = {}
        for t in transactions:
            if t.type == TransactionType.EXPENSE:
                totals[t.category] = totals.get(t.category, 0) + t.amount
        return shares(totals)

    @staticmethod
    def mood_shares(entries: list[JournalEntry]) -> list[ShareSlice]:
        counts = Counter(entry.mood or DEFAULT_MOOD for entry in entries)
        return shares(dict(counts))

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def get_analytics(
        self,
        user_id: uuid.UUID,
        time_range: TimeRange = TimeRange.LAST_30_DAYS,
        today: Optional[date] = None,
    ) -> AnalyticsResponse:
        """Every chart on the analytics page for ``time_range``."""
        today = today or date.today()
        start = time_range.start(today)
        finance_start = make_buckets(today, FINANCE_MONTHS, Granularity.MONTH)[0].start

        energy_logs = await self._energy_logs(user_id, start, today)
        pomodoros = await self._pomodoros(user_id, start, today)
        habits = await self._habits(user_id)
        journal_entries = await self._journal_entries(user_id, start, today)
        transactions = await self._transactions(user_id, finance_start, today)
        goals = await self.goals(user_id)
        skills = await self._skills(user_id)

        habit_rates = self.habit_rates(habits, start, today)

        stats = AnalyticsStats(
            average_energy_level=round_half_up(average([log.energy_level for log in energy_logs])),
            total_pomodoro_sessions=len(pomodoros),
            average_habit_completion_rate=round_half_up(
                average([h.completion_rate for h in habit_rates])
            ),
            average_goal_progress=round_half_up(average([g.progress for g in goals])),
        )

        return AnalyticsResponse(
            range=time_range,
            granularity=time_range.granularity,
            energy_data=self.energy_series(energy_logs, today, time_range),
            pomodoro_data=self.pomodoro_series(pomodoros, today, time_range),
            habit_completion_rates=habit_rates,
            monthly_financial_data=self.monthly_finances(transactions, today),
            expense_categories=self.expense_shares(transactions),
            mood_data=self.mood_shares(journal_entries),
            goals=[GoalSummary.model_validate(g) for g in goals],
            skills=[SkillSummary.model_validate(s) for s in skills],
            stats=stats,
        )

    async def get_daily_stats(
        self,
        user_id: uuid.UUID,
        today: Optional[date] = None,
    ) -> DailyStats:
        """Snapshot of a single day (today by default)."""
        today = today or date.today()

        energy_logs = await self._energy_logs(user_id, today, today)
        latest_log = energy_logs[-1] if energy_logs else None
        pomodoros = await self._pomodoros(user_id, today, today)

        habit_count = await self.db.scalar(
            select(func.count()).select_from(Habit).where(Habit.user_id == user_id)
        ) or 0
        completions = (
            await self.db.execute(
                select(HabitCompletion).where(
                    HabitCompletion.user_id == user_id,
                    HabitCompletion.date == today,
                )
            )
        ).scalars().all()

        journal_written = bool(await self._journal_entries(user_id, today, today))

        todos = (
            await self.db.execute(
                select(Todo).where(Todo.user_id == user_id, Todo.due_date == today)
            )
        ).scalars().all()

        return DailyStats(
            date=today,
            energy_level=latest_log.energy_level if latest_log else 0,
            focus_level=latest_log.focus_level if latest_log else 0,
            pomodoro_sessions=len(pomodoros),
            pomodoro_minutes=round_half_up(sum(s.duration for s in pomodoros) / 60),
            habit_completion_rate=daily_habit_rate(completions, habit_count, today),
            journal_written=journal_written,
            todo_completion_rate=percentage(sum(1 for t in todos if t.completed), len(todos)),
        )
