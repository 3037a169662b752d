"""
Dashboard Service
=================

The home dashboard: recent activity across every tracker plus a
seven-day activity chart.
"""

from datetime import date, timedelta
from typing import Optional
import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lifehub.core.aggregation import bucketize
from lifehub.core.streaks import completion_rate, percentage, round_half_up
from lifehub.models.focus import PomodoroSession
from lifehub.models.goal import Milestone, Skill
from lifehub.models.habit import Habit, HabitCompletion
from lifehub.models.journal import JournalEntry
from lifehub.models.tracking import EnergyLog, Note, Todo
from lifehub.schemas.analytics import (
    ActivityPoint,
    DashboardResponse,
    DashboardStats,
    GoalSummary,
    NoteSummary,
    RecentMilestone,
    SkillSummary,
)
from lifehub.schemas.focus import PomodoroSessionResponse
from lifehub.schemas.tracking import EnergyLogResponse
from lifehub.services.analytics_service import AnalyticsService, daily_habit_rate

ACTIVITY_DAYS = 7
HABIT_WINDOW_DAYS = 30
RECENT_ENERGY_LOGS = 7
RECENT_POMODOROS = 30
TOP_SKILLS = 5
RECENT_NOTES = 5
RECENT_MILESTONES = 5


def format_duration(seconds: int) -> str:
    """Render seconds as ``"<h>h <m>m"``."""
    return f"{seconds // 3600}h {(seconds % 3600) // 60}m"


class DashboardService:
    """Service for the dashboard aggregate."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _latest(self, stmt) -> list:
        return list((await self.db.execute(stmt)).scalars().all())

    @staticmethod
    def activity_series(
        energy_logs: list[EnergyLog],
        completions: list[HabitCompletion],
        habit_count: int,
        today: date,
    ) -> list[ActivityPoint]:
        """Energy, focus and habit completion for each of the last seven days."""
        options = dict(end=today, count=ACTIVITY_DAYS, date_of=lambda log: log.date)
        energy = bucketize(energy_logs, value_of=lambda log: log.energy_level, **options)
        focus = bucketize(energy_logs, value_of=lambda log: log.focus_level, **options)

        return [
            ActivityPoint(
                date=e.start,
                label=e.start.strftime("%a"),
                energy=round_half_up(e.total / e.count) if e.count else 0,
                focus=round_half_up(f.total / f.count) if f.count else 0,
                habits=daily_habit_rate(completions, habit_count, e.start),
            )
            for e, f in zip(energy, focus)
        ]

    async def get_dashboard(
        self,
        user_id: uuid.UUID,
        today: Optional[date] = None,
    ) -> DashboardResponse:
        today = today or date.today()
        activity_start = today - timedelta(days=ACTIVITY_DAYS - 1)
        habit_start = today - timedelta(days=HABIT_WINDOW_DAYS)

        recent_energy = await self._latest(
            select(EnergyLog)
            .where(EnergyLog.user_id == user_id)
            .order_by(EnergyLog.date.desc())
            .limit(RECENT_ENERGY_LOGS)
        )
        week_energy = await self._latest(
            select(EnergyLog).where(
                EnergyLog.user_id == user_id,
                EnergyLog.date >= activity_start,
                EnergyLog.date <= today,
            )
        )
        pomodoros = await self._latest(
            select(PomodoroSession)
            .where(PomodoroSession.user_id == user_id)
            .order_by(PomodoroSession.date.desc())
            .limit(RECENT_POMODOROS)
        )
        skills = await self._latest(
            select(Skill)
            .where(Skill.user_id == user_id)
            .order_by(Skill.hours_spent.desc())
            .limit(TOP_SKILLS)
        )
        notes = await self._latest(
            select(Note)
            .where(Note.user_id == user_id)
            .order_by(Note.created_at.desc())
            .limit(RECENT_NOTES)
        )
        milestones = await self._latest(
            select(Milestone)
            .where(Milestone.user_id == user_id, Milestone.completed.is_(True))
            .options(selectinload(Milestone.goal))
            .order_by(Milestone.updated_at.desc())
            .limit(RECENT_MILESTONES)
        )
        goals = await AnalyticsService(self.db).goals(user_id)

        habit_count = await self.db.scalar(
            select(func.count()).select_from(Habit).where(Habit.user_id == user_id)
        ) or 0
        completions = await self._latest(
            select(HabitCompletion).where(
                HabitCompletion.user_id == user_id,
                HabitCompletion.date >= habit_start,
                HabitCompletion.date <= today,
            )
        )
        journal_count = await self.db.scalar(
            select(func.count()).select_from(JournalEntry).where(JournalEntry.user_id == user_id)
        ) or 0
        todo_total, todo_done = (
            await self.db.execute(
                select(
                    func.count(Todo.id),
                    func.count(Todo.id).filter(Todo.completed.is_(True)),
                ).where(Todo.user_id == user_id)
            )
        ).one()

        energy_levels = [log.energy_level for log in recent_energy]
        stats = DashboardStats(
            average_energy=(
                round_half_up(sum(energy_levels) / len(energy_levels)) if energy_levels else 0
            ),
            pomodoro_count=len(pomodoros),
            pomodoro_time=format_duration(sum(s.duration for s in pomodoros)),
            skills_count=len(skills),
            notes_count=len(notes),
            habit_completion_rate=completion_rate(c.completed for c in completions),
            journal_count=journal_count,
            todo_completion_rate=percentage(todo_done, todo_total),
        )

        return DashboardResponse(
            energy_logs=[EnergyLogResponse.model_validate(log) for log in recent_energy],
            pomodoro_sessions=[PomodoroSessionResponse.model_validate(s) for s in pomodoros],
            skills=[SkillSummary.model_validate(s) for s in skills],
            notes=[NoteSummary.model_validate(n) for n in notes],
            goals=[GoalSummary.model_validate(g) for g in goals],
            recent_milestones=[
                RecentMilestone(
                    id=m.id,
                    title=m.title,
                    goal_title=m.goal.title,
                    completed_at=m.updated_at,
                )
                for m in milestones
            ],
            activity_data=self.activity_series(week_energy, completions, habit_count, today),
            stats=stats,
        )
