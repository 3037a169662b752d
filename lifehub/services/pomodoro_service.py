"""
Pomodoro Service
================

Recording finished pomodoros, their statistics, and timer settings.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Optional
import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehub.core.aggregation import bucketize
from lifehub.models.focus import PomodoroSession
from lifehub.schemas.focus import (
    PomodoroDailyStat,
    PomodoroSessionCreate,
    PomodoroSessionResponse,
    PomodoroSettings,
    PomodoroStats,
)
from lifehub.services.preferences_service import PreferencesService

STATS_WINDOW_DAYS = 7


def start_of_day(day: date) -> datetime:
    """Midnight UTC at the start of ``day``."""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Convert to UTC; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class PomodoroService:
    """Service for pomodoro operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_sessions(self, user_id: uuid.UUID) -> list[PomodoroSession]:
        stmt = (
            select(PomodoroSession)
            .where(PomodoroSession.user_id == user_id)
            .order_by(PomodoroSession.date.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_session(
        self,
        user_id: uuid.UUID,
        data: PomodoroSessionCreate,
    ) -> PomodoroSession:
        session = PomodoroSession(
            user_id=user_id,
            duration=data.duration,
            date=as_utc(data.date) if data.date else datetime.now(timezone.utc),
            task=data.task or None,
        )
        self.db.add(session)
        await self.db.flush()
        return session

    async def sessions_since(
        self,
        user_id: uuid.UUID,
        start: date,
    ) -> list[PomodoroSession]:
        """Sessions on or after the start of ``start``, oldest first."""
        stmt = (
            select(PomodoroSession)
            .where(
                PomodoroSession.user_id == user_id,
                PomodoroSession.date >= start_of_day(start),
            )
            .order_by(PomodoroSession.date.asc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_stats(
        self,
        user_id: uuid.UUID,
        today: Optional[date] = None,
    ) -> PomodoroStats:
        """
        Lifetime totals plus a dense breakdown of the last seven days.

        Days without sessions still appear with zero count and duration.
        """
        today = today or date.today()

        totals_stmt = select(
            func.count(PomodoroSession.id),
            func.coalesce(func.sum(PomodoroSession.duration), 0),
        ).where(PomodoroSession.user_id == user_id)
        total_sessions, total_focus_time = (await self.db.execute(totals_stmt)).one()

        window_start = today - timedelta(days=STATS_WINDOW_DAYS - 1)
        recent = await self.sessions_since(user_id, window_start)
        buckets = bucketize(
            recent,
            end=today,
            count=STATS_WINDOW_DAYS,
            date_of=lambda s: s.date,
            value_of=lambda s: s.duration,
        )

        return PomodoroStats(
            total_sessions=total_sessions,
            total_focus_time=int(total_focus_time),
            recent_sessions=[PomodoroSessionResponse.model_validate(s) for s in recent],
            daily_stats=[
                PomodoroDailyStat(date=b.start, count=b.count, duration=int(b.total))
                for b in buckets
            ],
        )

    async def get_settings(self, user_id: uuid.UUID) -> PomodoroSettings:
        prefs = PreferencesService(self.db)
        return await prefs.get_pomodoro_settings(user_id)

    async def save_settings(
        self,
        user_id: uuid.UUID,
        settings: PomodoroSettings,
    ) -> PomodoroSettings:
        prefs = PreferencesService(self.db)
        return await prefs.save_pomodoro_settings(user_id, settings)
