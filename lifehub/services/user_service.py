"""
User Service
============

Profile reads and edits, password changes and account statistics.
"""

import logging
from datetime import datetime, timezone
from typing import Optional
import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehub.core.errors import ConflictError, ErrorCodes, ValidationError
from lifehub.core.security import hash_password, verify_password
from lifehub.core.streaks import percentage
from lifehub.models.book import Book
from lifehub.models.focus import PomodoroSession
from lifehub.models.goal import Goal
from lifehub.models.habit import Habit
from lifehub.models.journal import JournalEntry
from lifehub.models.tracking import Note, Todo
from lifehub.models.user import User
from lifehub.schemas.profile import (
    EntityCounts,
    PasswordChange,
    ProfileResponse,
    ProfileUpdate,
    UserStats,
)

logger = logging.getLogger(__name__)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class UserService:
    """Service for user profile operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """Get user by email address."""
        stmt = select(User).where(User.email == email)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _count(self, model, user_id: uuid.UUID, *criteria) -> int:
        stmt = select(func.count()).select_from(model).where(model.user_id == user_id, *criteria)
        return (await self.db.scalar(stmt)) or 0

    async def get_entity_counts(self, user_id: uuid.UUID) -> EntityCounts:
        return EntityCounts(
            todos=await self._count(Todo, user_id),
            notes=await self._count(Note, user_id),
            habits=await self._count(Habit, user_id),
            goals=await self._count(Goal, user_id),
            journal_entries=await self._count(JournalEntry, user_id),
            books=await self._count(Book, user_id),
        )

    async def get_profile(self, user: User) -> ProfileResponse:
        return ProfileResponse(
            id=user.id,
            name=user.name,
            email=user.email,
            image=user.image,
            created_at=user.created_at,
            counts=await self.get_entity_counts(user.id),
        )

    async def update_profile(self, user: User, data: ProfileUpdate) -> User:
        """
        Update name, email and image.

        Raises:
            ConflictError: If the new email belongs to another account
        """
        if data.email is not None and data.email != user.email:
            existing = await self.get_user_by_email(data.email)
            if existing is not None and existing.id != user.id:
                raise ConflictError(
                    code=ErrorCodes.PROFILE_EMAIL_IN_USE,
                    message="Email already in use",
                    field="email",
                )
            user.email = data.email

        if data.name is not None:
            user.name = data.name

        if data.image is not None:
            user.image = data.image

        await self.db.flush()
        logger.info("Updated profile for user %s", user.id)
        return user

    async def change_password(self, user: User, data: PasswordChange) -> None:
        """
        Replace the account password after checking the current one.

        Raises:
            ValidationError: If no password is set or the current one is wrong
        """
        if not user.password_hash:
            raise ValidationError(
                message="No password set for this account",
                code=ErrorCodes.AUTH_NO_PASSWORD,
            )

        if not verify_password(data.current_password, user.password_hash):
            raise ValidationError(
                message="Current password is incorrect",
                field="currentPassword",
                code=ErrorCodes.AUTH_INVALID_PASSWORD,
            )

        user.password_hash = hash_password(data.new_password)
        await self.db.flush()
        logger.info("Password changed for user %s", user.id)

    async def get_stats(self, user: User, now: Optional[datetime] = None) -> UserStats:
        """Account-wide counts and rates."""
        now = now or datetime.now(timezone.utc)
        user_id = user.id

        todo_count = await self._count(Todo, user_id)
        completed_todo_count = await self._count(Todo, user_id, Todo.completed.is_(True))
        goal_count = await self._count(Goal, user_id)
        completed_goal_count = await self._count(Goal, user_id, Goal.completed.is_(True))
        journal_count = await self._count(JournalEntry, user_id)

        pomodoro_count, pomodoro_seconds = (
            await self.db.execute(
                select(
                    func.count(PomodoroSession.id),
                    func.coalesce(func.sum(PomodoroSession.duration), 0),
                ).where(PomodoroSession.user_id == user_id)
            )
        ).one()

        days_since_joining = max((now - _as_utc(user.created_at)).days, 0)
        journals_per_week = (
            journal_count / (days_since_joining / 7) if days_since_joining > 0 else 0
        )

        return UserStats(
            todo_count=todo_count,
            completed_todo_count=completed_todo_count,
            todo_completion_rate=percentage(completed_todo_count, todo_count),
            note_count=await self._count(Note, user_id),
            habit_count=await self._count(Habit, user_id),
            goal_count=goal_count,
            completed_goal_count=completed_goal_count,
            goal_completion_rate=percentage(completed_goal_count, goal_count),
            journal_count=journal_count,
            book_count=await self._count(Book, user_id),
            pomodoro_count=pomodoro_count,
            total_pomodoro_minutes=int(pomodoro_seconds) // 60,
            days_since_joining=days_since_joining,
            journals_per_week=round(journals_per_week, 2),
        )
