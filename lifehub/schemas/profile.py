"""
Profile Schemas
===============

Pydantic schemas for user profile and settings endpoints.
"""

import datetime as dt
from typing import Literal, Optional
import uuid

from pydantic import EmailStr, Field

from lifehub.schemas.common import CamelModel


class NotificationPreferences(CamelModel):
    """Notification preferences schema."""

    email_notifications: bool = True
    push_notifications: bool = False
    reminder_emails: bool = True
    weekly_digest: bool = True
    goal_reminders: bool = True
    habit_reminders: bool = True


class AppearancePreferences(CamelModel):
    """Appearance preferences schema."""

    theme: Literal["light", "dark", "system"] = "system"
    font_size: Literal["small", "medium", "large"] = "medium"
    reduced_motion: bool = False
    high_contrast: bool = False


class ProfileUpdate(CamelModel):
    """Request schema for profile updates."""

    name: Optional[str] = Field(None, max_length=255)
    email: Optional[EmailStr] = None
    image: Optional[str] = Field(None, max_length=500)


class PasswordChange(CamelModel):
    """Request schema for changing the account password."""

    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=72)


class EntityCounts(CamelModel):
    """How many rows of each kind the user owns."""

    todos: int = 0
    notes: int = 0
    habits: int = 0
    goals: int = 0
    journal_entries: int = 0
    books: int = 0


class ProfileResponse(CamelModel):
    """Profile fields plus entity counts."""

    id: uuid.UUID
    name: Optional[str] = None
    email: str
    image: Optional[str] = None
    created_at: dt.datetime
    counts: EntityCounts


class UserStats(CamelModel):
    """Account-wide usage statistics."""

    todo_count: int
    completed_todo_count: int
    todo_completion_rate: float
    note_count: int
    habit_count: int
    goal_count: int
    completed_goal_count: int
    goal_completion_rate: float
    journal_count: int
    book_count: int
    pomodoro_count: int
    total_pomodoro_minutes: int
    days_since_joining: int
    journals_per_week: float
