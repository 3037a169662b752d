"""
Habit Schemas
=============

Pydantic schemas for habit endpoints.
"""

import datetime as dt
from typing import Optional
import uuid

from pydantic import Field, field_validator

from lifehub.schemas.common import CamelModel


# =============================================================================
# Request Schemas
# =============================================================================

class HabitCreate(CamelModel):
    """Request schema for creating a habit."""

    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = None
    category: str = Field(default="other", max_length=50)
    frequency: str = Field(default="daily", max_length=50)
    color: Optional[str] = Field(default=None, max_length=30)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Habit name is required")
        return v


class HabitToggleRequest(CamelModel):
    """
    Request schema for POST /habits/toggle.

    Sets the completed flag for one (habit, date) pair.
    """

    habit_id: uuid.UUID
    date: dt.date
    completed: bool
    notes: Optional[str] = None


# =============================================================================
# Response Schemas
# =============================================================================

class HabitCompletionResponse(CamelModel):
    """A single completion record."""

    id: uuid.UUID
    habit_id: uuid.UUID
    date: dt.date
    completed: bool
    notes: Optional[str] = None


class HabitResponse(CamelModel):
    """A habit with its completions and derived progress figures."""

    id: uuid.UUID
    name: str
    description: Optional[str] = None
    category: str
    frequency: str
    color: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime
    completions: list[HabitCompletionResponse] = Field(default_factory=list)
    current_streak: int = 0
    completion_rate: int = Field(default=0, ge=0, le=100)
    formation_progress: int = Field(default=0, ge=0, le=100)
