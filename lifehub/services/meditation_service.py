"""
Meditation Service
==================

Recording meditation sittings and summarising them.
"""

from datetime import date, datetime, timezone
from typing import Optional
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehub.core.aggregation import bucketize
from lifehub.core.errors import ErrorCodes, ValidationError
from lifehub.models.focus import MeditationSession
from lifehub.schemas.focus import (
    MeditationDay,
    MeditationSessionCreate,
    MeditationSessionResponse,
    MeditationStats,
)

MIN_SESSION_SECONDS = 30
RECENT_SESSION_COUNT = 3


class MeditationService:
    """Service for meditation operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_sessions(self, user_id: uuid.UUID) -> list[MeditationSession]:
        """All sittings, most recent first."""
        stmt = (
            select(MeditationSession)
            .where(MeditationSession.user_id == user_id)
            .order_by(MeditationSession.date.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_session(
        self,
        user_id: uuid.UUID,
        data: MeditationSessionCreate,
    ) -> MeditationSession:
        """
        Record a finished sitting.

        Raises:
            ValidationError: If the sitting lasted under thirty seconds
        """
        if data.duration < MIN_SESSION_SECONDS:
            raise ValidationError(
                message="Session too short",
                field="duration",
                code=ErrorCodes.MEDITATION_TOO_SHORT,
            )

        session = MeditationSession(
            user_id=user_id,
            duration=data.duration,
            type=data.type,
            notes=data.notes or None,
            date=datetime.now(timezone.utc),
        )
        self.db.add(session)
        await self.db.flush()
        return session

    async def get_stats(
        self,
        user_id: uuid.UUID,
        today: Optional[date] = None,
    ) -> MeditationStats:
        today = today or date.today()
        sessions = await self.list_sessions(user_id)

        total_time = sum(s.duration for s in sessions)
        average = total_time / len(sessions) if sessions else 0
        longest = max((s.duration for s in sessions), default=0)

        # Whole minutes per sitting, as shown on the weekly chart
        buckets = bucketize(
            sessions,
            end=today,
            count=7,
            date_of=lambda s: s.date,
            value_of=lambda s: s.duration // 60,
        )

        return MeditationStats(
            total_sessions=len(sessions),
            total_time=total_time,
            average_session_duration=average,
            longest_session=longest,
            last_7_days=[
                MeditationDay(
                    date=b.start,
                    label=b.start.strftime("%a"),
                    minutes=int(b.total),
                )
                for b in buckets
            ],
            recent_sessions=[
                MeditationSessionResponse.model_validate(s)
                for s in sessions[:RECENT_SESSION_COUNT]
            ],
        )
