"""
Habit API Endpoints
===================

Habit listing, creation, deletion and the per-day completion toggle.
"""

import logging
import uuid

from fastapi import APIRouter, status

from lifehub.dependencies import CurrentUser, DBSession
from lifehub.schemas.common import BaseResponse, DeleteResult
from lifehub.schemas.habit import HabitCreate, HabitResponse, HabitToggleRequest
from lifehub.services.habit_service import HabitService, habit_to_response

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=BaseResponse[list[HabitResponse]],
)
async def list_habits(
    current_user: CurrentUser,
    db: DBSession,
):
    """
    Get the user's habits, newest first.

    Each habit carries its completions, current streak, completion rate
    and progress toward the 66-day formation mark.
    """
    habits = await HabitService(db).list_habits(current_user.id)
    return BaseResponse(data=[habit_to_response(h) for h in habits])


@router.post(
    "",
    response_model=BaseResponse[HabitResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_habit(
    habit_data: HabitCreate,
    current_user: CurrentUser,
    db: DBSession,
):
    """Create a new habit."""
    habit = await HabitService(db).create_habit(current_user.id, habit_data)
    logger.info("Created habit %s for user %s", habit.id, current_user.id)
    return BaseResponse(data=habit_to_response(habit), message="Habit created")


@router.delete(
    "/{habit_id}",
    response_model=BaseResponse[DeleteResult],
)
async def delete_habit(
    habit_id: uuid.UUID,
    current_user: CurrentUser,
    db: DBSession,
):
    """Delete a habit together with all of its completions."""
    await HabitService(db).delete_habit(habit_id, current_user.id)
    return BaseResponse(data=DeleteResult(id=str(habit_id)), message="Habit deleted")


@router.post(
    "/toggle",
    response_model=BaseResponse[HabitResponse],
)
async def toggle_habit_completion(
    toggle: HabitToggleRequest,
    current_user: CurrentUser,
    db: DBSession,
):
    """Mark a habit done or not done for one day."""
    habit = await HabitService(db).toggle_completion(current_user.id, toggle)
    return BaseResponse(data=habit_to_response(habit))
