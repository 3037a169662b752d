"""
Settings API Endpoints
======================

Notification and appearance preferences. Unset preferences come back
as their defaults.
"""

from fastapi import APIRouter

from lifehub.dependencies import CurrentUser, DBSession
from lifehub.schemas.common import BaseResponse
from lifehub.schemas.profile import AppearancePreferences, NotificationPreferences
from lifehub.services.preferences_service import PreferencesService

router = APIRouter()


@router.get(
    "/notifications",
    response_model=BaseResponse[NotificationPreferences],
)
async def get_notification_preferences(
    current_user: CurrentUser,
    db: DBSession,
):
    prefs = await PreferencesService(db).get_notification_preferences(current_user.id)
    return BaseResponse(data=prefs)


@router.put(
    "/notifications",
    response_model=BaseResponse[NotificationPreferences],
)
async def update_notification_preferences(
    prefs_data: NotificationPreferences,
    current_user: CurrentUser,
    db: DBSession,
):
    prefs = await PreferencesService(db).save_notification_preferences(current_user.id, prefs_data)
    return BaseResponse(data=prefs, message="Notification preferences saved")


@router.get(
    "/appearance",
    response_model=BaseResponse[AppearancePreferences],
)
async def get_appearance_preferences(
    current_user: CurrentUser,
    db: DBSession,
):
    prefs = await PreferencesService(db).get_appearance_preferences(current_user.id)
    return BaseResponse(data=prefs)


@router.put(
    "/appearance",
    response_model=BaseResponse[AppearancePreferences],
)
async def update_appearance_preferences(
    prefs_data: AppearancePreferences,
    current_user: CurrentUser,
    db: DBSession,
):
    prefs = await PreferencesService(db).save_appearance_preferences(current_user.id, prefs_data)
    return BaseResponse(data=prefs, message="Appearance preferences saved")
