"""
Pomodoro API Endpoints
======================

Finished pomodoro sessions, their statistics, and timer settings.
Countdown itself runs on the client.
"""

from fastapi import APIRouter, status

from lifehub.dependencies import CurrentUser, DBSession
from lifehub.schemas.common import BaseResponse
from lifehub.schemas.focus import (
    PomodoroSessionCreate,
    PomodoroSessionResponse,
    PomodoroSettings,
    PomodoroStats,
)
from lifehub.services.pomodoro_service import PomodoroService

router = APIRouter()


@router.get(
    "/sessions",
    response_model=BaseResponse[list[PomodoroSessionResponse]],
)
async def list_pomodoro_sessions(
    current_user: CurrentUser,
    db: DBSession,
):
    sessions = await PomodoroService(db).list_sessions(current_user.id)
    return BaseResponse(data=[PomodoroSessionResponse.model_validate(s) for s in sessions])


@router.post(
    "/sessions",
    response_model=BaseResponse[PomodoroSessionResponse],
    status_code=status.HTTP_201_CREATED,
)
async def record_pomodoro_session(
    session_data: PomodoroSessionCreate,
    current_user: CurrentUser,
    db: DBSession,
):
    """Record a finished work interval."""
    session = await PomodoroService(db).create_session(current_user.id, session_data)
    return BaseResponse(data=PomodoroSessionResponse.model_validate(session))


@router.get(
    "/stats",
    response_model=BaseResponse[PomodoroStats],
)
async def get_pomodoro_stats(
    current_user: CurrentUser,
    db: DBSession,
):
    """Totals and a seven-day daily breakdown."""
    stats = await PomodoroService(db).get_stats(current_user.id)
    return BaseResponse(data=stats)


@router.get(
    "/settings",
    response_model=BaseResponse[PomodoroSettings],
)
async def get_pomodoro_settings(
    current_user: CurrentUser,
    db: DBSession,
):
    return BaseResponse(data=await PomodoroService(db).get_settings(current_user.id))


@router.put(
    "/settings",
    response_model=BaseResponse[PomodoroSettings],
)
async def update_pomodoro_settings(
    settings_data: PomodoroSettings,
    current_user: CurrentUser,
    db: DBSession,
):
    saved = await PomodoroService(db).save_settings(current_user.id, settings_data)
    return BaseResponse(data=saved, message="Pomodoro settings saved")
