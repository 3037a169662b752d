"""
Focus Session Models
====================

SQLAlchemy models for finished pomodoro and meditation sessions.
"""

import datetime as dt
from typing import Optional

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lifehub.db.base import Base, TimestampMixin, UserOwnedMixin, UUIDMixin, utc_now


class PomodoroSession(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """A completed pomodoro work interval."""

    __tablename__ = "pomodoro_sessions"

    duration: Mapped[int] = mapped_column(
        Integer,
        nullable=False,  # seconds
    )
    date: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )
    task: Mapped[Optional[str]] = mapped_column(
        String(200),
        nullable=True,
    )

    __table_args__ = (
        Index("idx_pomodoro_user_date", "user_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<PomodoroSession(user_id={self.user_id}, duration={self.duration})>"


class MeditationSession(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """A completed meditation sitting."""

    __tablename__ = "meditation_sessions"

    duration: Mapped[int] = mapped_column(
        Integer,
        nullable=False,  # seconds
    )
    type: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    date: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
    )

    __table_args__ = (
        Index("idx_meditation_user_date", "user_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<MeditationSession(user_id={self.user_id}, type={self.type})>"
