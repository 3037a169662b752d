"""
Habit Service
=============

Business logic for habits and their daily completion records.
"""

import logging
from datetime import date
from typing import Optional
import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lifehub.core.errors import ErrorCodes, NotFoundError
from lifehub.core.streaks import (
    build_completion_log,
    completion_rate,
    current_streak,
    formation_progress,
)
from lifehub.models.habit import Habit, HabitCompletion
from lifehub.schemas.habit import HabitCreate, HabitResponse, HabitToggleRequest

logger = logging.getLogger(__name__)


class HabitNotFoundError(NotFoundError):
    """The habit does not exist or belongs to someone else."""

    def __init__(self, habit_id: uuid.UUID):
        super().__init__(
            code=ErrorCodes.HABIT_NOT_FOUND,
            message="Habit not found",
            habit_id=str(habit_id),
        )


def habit_to_response(habit: Habit, today: Optional[date] = None) -> HabitResponse:
    """Reshape a habit row (completions loaded) into its view model."""
    today = today or date.today()
    log = build_completion_log(habit.completions)
    streak = current_streak(log, today)

    response = HabitResponse.model_validate(habit)
    response.current_streak = streak
    response.completion_rate = completion_rate(c.completed for c in habit.completions)
    response.formation_progress = formation_progress(streak)
    return response


class HabitService:
    """Service for habit operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_habits(self, user_id: uuid.UUID) -> list[Habit]:
        """All of the user's habits, newest first, with completions."""
        stmt = (
            select(Habit)
            .where(Habit.user_id == user_id)
            .options(selectinload(Habit.completions))
            .order_by(Habit.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_habit(
        self,
        habit_id: uuid.UUID,
        user_id: uuid.UUID,
    ) -> Habit:
        """Get a habit by ID ensuring it belongs to the user."""
        stmt = (
            select(Habit)
            .where(Habit.id == habit_id, Habit.user_id == user_id)
            .options(selectinload(Habit.completions))
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        habit = result.scalar_one_or_none()
        if habit is None:
            raise HabitNotFoundError(habit_id)
        return habit

    async def create_habit(
        self,
        user_id: uuid.UUID,
        data: HabitCreate,
    ) -> Habit:
        """Create a new habit with no completions."""
        habit = Habit(
            user_id=user_id,
            name=data.name,
            description=data.description,
            category=data.category,
            frequency=data.frequency,
            color=data.color,
        )
        self.db.add(habit)
        await self.db.flush()
        return await self.get_habit(habit.id, user_id)

    async def delete_habit(
        self,
        habit_id: uuid.UUID,
        user_id: uuid.UUID,
    ) -> None:
        """
        Delete a habit and all of its completion rows.

        Completions are removed explicitly first so none are left behind
        on databases that do not enforce the foreign-key cascade.
        """
        await self.get_habit(habit_id, user_id)

        await self.db.execute(
            delete(HabitCompletion).where(
                HabitCompletion.habit_id == habit_id,
                HabitCompletion.user_id == user_id,
            )
        )
        await self.db.execute(
            delete(Habit).where(Habit.id == habit_id, Habit.user_id == user_id)
        )
        await self.db.flush()
        logger.info("Deleted habit %s for user %s", habit_id, user_id)

    async def toggle_completion(
        self,
        user_id: uuid.UUID,
        data: HabitToggleRequest,
    ) -> Habit:
        """
        Set the completed flag for one (habit, date) pair.

        Updates the existing record for that day if there is one,
        otherwise creates it, so a day never holds two records.
        Returns the habit with its refreshed completions.
        """
        await self.get_habit(data.habit_id, user_id)

        stmt = (
            select(HabitCompletion)
            .where(
                HabitCompletion.habit_id == data.habit_id,
                HabitCompletion.user_id == user_id,
                HabitCompletion.date == data.date,
            )
            .limit(1)
        )
        result = await self.db.execute(stmt)
        completion = result.scalar_one_or_none()

        if completion is not None:
            completion.completed = data.completed
            if data.notes is not None:
                completion.notes = data.notes
        else:
            completion = HabitCompletion(
                habit_id=data.habit_id,
                user_id=user_id,
                date=data.date,
                completed=data.completed,
                notes=data.notes or "",
            )
            self.db.add(completion)

        await self.db.flush()
        return await self.get_habit(data.habit_id, user_id)

