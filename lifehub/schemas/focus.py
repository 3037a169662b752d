"""
Focus Schemas
=============

Pydantic schemas for pomodoro and meditation endpoints.
"""

import datetime as dt
from typing import Optional
import uuid

from pydantic import Field

from lifehub.schemas.common import CamelModel


# =============================================================================
# Pomodoro
# =============================================================================

class PomodoroSessionCreate(CamelModel):
    """Request schema for recording a finished pomodoro."""

    duration: int = Field(gt=0, description="Length of the session in seconds.")
    date: Optional[dt.datetime] = Field(default=None, description="When the session finished. Defaults to now.")
    task: Optional[str] = Field(default=None, max_length=200)


class PomodoroSessionResponse(CamelModel):
    """A recorded pomodoro."""

    id: uuid.UUID
    duration: int
    date: dt.datetime
    task: Optional[str] = None


class PomodoroDailyStat(CamelModel):
    """Pomodoros finished on one day."""

    date: dt.date
    count: int
    duration: int


class PomodoroStats(CamelModel):
    """Totals plus a dense seven-day breakdown."""

    total_sessions: int
    total_focus_time: int
    recent_sessions: list[PomodoroSessionResponse]
    daily_stats: list[PomodoroDailyStat]


class PomodoroSettings(CamelModel):
    """Timer configuration, in minutes."""

    work_duration: int = Field(default=25, ge=1, le=180)
    short_break_duration: int = Field(default=5, ge=1, le=60)
    long_break_duration: int = Field(default=15, ge=1, le=120)
    pomodoros_until_long_break: int = Field(default=4, ge=1, le=12)


# =============================================================================
# Meditation
# =============================================================================

class MeditationSessionCreate(CamelModel):
    """Request schema for recording a meditation session."""

    duration: int = Field(ge=0, description="Length of the session in seconds.")
    type: str = Field(min_length=1, max_length=50)
    notes: Optional[str] = None


class MeditationSessionResponse(CamelModel):
    """A recorded meditation session."""

    id: uuid.UUID
    duration: int
    type: str
    notes: Optional[str] = None
    date: dt.datetime


class MeditationDay(CamelModel):
    """Minutes meditated on one day."""

    date: dt.date
    label: str
    minutes: int


class MeditationStats(CamelModel):
    """Meditation totals and the last seven days."""

    total_sessions: int
    total_time: int
    average_session_duration: float
    longest_session: int
    last_7_days: list[MeditationDay] = Field(alias="last7Days")
    recent_sessions: list[MeditationSessionResponse]
