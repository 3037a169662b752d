"""
Profile API Endpoints
=====================

Handles user profile retrieval and updates, password changes and
account statistics.
"""

from fastapi import APIRouter

from lifehub.dependencies import CurrentUser, DBSession
from lifehub.schemas.common import BaseResponse
from lifehub.schemas.profile import (
    PasswordChange,
    ProfileResponse,
    ProfileUpdate,
    UserStats,
)
from lifehub.services.user_service import UserService

router = APIRouter()


@router.get(
    "",
    response_model=BaseResponse[ProfileResponse],
)
async def get_profile(
    current_user: CurrentUser,
    db: DBSession,
):
    """
    Get the user's profile.

    Includes how many todos, notes, habits, goals, journal entries and
    books the user has.
    """
    profile = await UserService(db).get_profile(current_user)
    return BaseResponse(data=profile)


@router.put(
    "",
    response_model=BaseResponse[ProfileResponse],
)
async def update_profile(
    profile_data: ProfileUpdate,
    current_user: CurrentUser,
    db: DBSession,
):
    """
    Update name, email and image.

    Returns 409 if the email is already used by another account.
    """
    user_service = UserService(db)
    user = await user_service.update_profile(current_user, profile_data)
    return BaseResponse(
        data=await user_service.get_profile(user),
        message="Profile updated successfully",
    )


@router.post(
    "/password",
    response_model=BaseResponse[None],
)
async def change_password(
    password_data: PasswordChange,
    current_user: CurrentUser,
    db: DBSession,
):
    await UserService(db).change_password(current_user, password_data)
    return BaseResponse(message="Password changed successfully")


@router.get(
    "/stats",
    response_model=BaseResponse[UserStats],
)
async def get_user_stats(
    current_user: CurrentUser,
    db: DBSession,
):
    return BaseResponse(data=await UserService(db).get_stats(current_user))
