"""
Analytics Schemas
=================

View models for the dashboard and analytics pages.
"""

import datetime as dt
from typing import Optional
import uuid

from pydantic import Field

from lifehub.core.aggregation import Granularity, TimeRange
from lifehub.schemas.common import CamelModel
from lifehub.schemas.focus import PomodoroSessionResponse
from lifehub.schemas.tracking import EnergyLogResponse


# =============================================================================
# Shared pieces
# =============================================================================

class MilestoneSummary(CamelModel):
    id: uuid.UUID
    title: str
    completed: bool


class GoalSummary(CamelModel):
    id: uuid.UUID
    title: str
    description: Optional[str] = None
    progress: int
    completed: bool
    target_date: Optional[dt.date] = None
    milestones: list[MilestoneSummary] = Field(default_factory=list)


class SkillSummary(CamelModel):
    id: uuid.UUID
    name: str
    level: Optional[str] = None
    hours_spent: float


class ShareSlice(CamelModel):
    """One slice of a percentage breakdown."""

    name: str
    value: int


# =============================================================================
# Analytics page
# =============================================================================

class EnergyPoint(CamelModel):
    """Average energy and focus for one bucket; 0 when nothing was logged."""

    date: dt.date
    value: float
    focus: float
    count: int


class PomodoroPoint(CamelModel):
    date: dt.date
    count: int
    duration: int


class HabitRate(CamelModel):
    id: uuid.UUID
    name: str
    completion_rate: int = Field(ge=0, le=100)
    streak: int
    formation_progress: int = Field(ge=0, le=100)


class MonthlyFinance(CamelModel):
    month: str
    month_start: dt.date
    income: float
    expenses: float
    savings: float


class AnalyticsStats(CamelModel):
    average_energy_level: int
    total_pomodoro_sessions: int
    average_habit_completion_rate: int
    average_goal_progress: int


class AnalyticsResponse(CamelModel):
    """Everything the analytics page charts for one time range."""

    range: TimeRange
    granularity: Granularity
    energy_data: list[EnergyPoint]
    pomodoro_data: list[PomodoroPoint]
    habit_completion_rates: list[HabitRate]
    monthly_financial_data: list[MonthlyFinance]
    expense_categories: list[ShareSlice]
    mood_data: list[ShareSlice]
    goals: list[GoalSummary]
    skills: list[SkillSummary]
    stats: AnalyticsStats


class DailyStats(CamelModel):
    """Snapshot of today."""

    date: dt.date
    energy_level: int
    focus_level: int
    pomodoro_sessions: int
    pomodoro_minutes: int
    habit_completion_rate: int
    journal_written: bool
    todo_completion_rate: int


# =============================================================================
# Dashboard
# =============================================================================

class NoteSummary(CamelModel):
    id: uuid.UUID
    title: str
    created_at: dt.datetime


class RecentMilestone(CamelModel):
    id: uuid.UUID
    title: str
    goal_title: str
    completed_at: dt.datetime


class ActivityPoint(CamelModel):
    """One day of the dashboard activity chart."""

    date: dt.date
    label: str
    energy: int
    focus: int
    habits: int


class DashboardStats(CamelModel):
    average_energy: int
    pomodoro_count: int
    pomodoro_time: str
    skills_count: int
    notes_count: int
    habit_completion_rate: int
    journal_count: int
    todo_completion_rate: int


class DashboardResponse(CamelModel):
    energy_logs: list[EnergyLogResponse]
    pomodoro_sessions: list[PomodoroSessionResponse]
    skills: list[SkillSummary]
    notes: list[NoteSummary]
    goals: list[GoalSummary]
    recent_milestones: list[RecentMilestone]
    activity_data: list[ActivityPoint]
    stats: DashboardStats
