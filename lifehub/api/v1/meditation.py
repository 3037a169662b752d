"""
Meditation API Endpoints
========================
"""

from fastapi import APIRouter, status

from lifehub.dependencies import CurrentUser, DBSession
from lifehub.schemas.common import BaseResponse
from lifehub.schemas.focus import (
    MeditationSessionCreate,
    MeditationSessionResponse,
    MeditationStats,
)
from lifehub.services.meditation_service import MeditationService

router = APIRouter()


@router.get(
    "/sessions",
    response_model=BaseResponse[list[MeditationSessionResponse]],
)
async def list_meditation_sessions(
    current_user: CurrentUser,
    db: DBSession,
):
    sessions = await MeditationService(db).list_sessions(current_user.id)
    return BaseResponse(data=[MeditationSessionResponse.model_validate(s) for s in sessions])


@router.post(
    "/sessions",
    response_model=BaseResponse[MeditationSessionResponse],
    status_code=status.HTTP_201_CREATED,
)
async def record_meditation_session(
    session_data: MeditationSessionCreate,
    current_user: CurrentUser,
    db: DBSession,
):
    """Record a sitting. Sittings under thirty seconds are rejected."""
    session = await MeditationService(db).create_session(current_user.id, session_data)
    return BaseResponse(data=MeditationSessionResponse.model_validate(session))


@router.get(
    "/stats",
    response_model=BaseResponse[MeditationStats],
)
async def get_meditation_stats(
    current_user: CurrentUser,
    db: DBSession,
):
    return BaseResponse(data=await MeditationService(db).get_stats(current_user.id))
