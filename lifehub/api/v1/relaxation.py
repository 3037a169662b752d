"""
Relaxation API Endpoints
========================

The sound catalogue is public; favourites need a session.
"""

import uuid

from fastapi import APIRouter

from lifehub.dependencies import CurrentUser, DBSession
from lifehub.schemas.common import BaseResponse
from lifehub.schemas.relaxation import (
    FavoriteSoundsResponse,
    FavoriteToggleResponse,
    RelaxationSoundResponse,
)
from lifehub.services.relaxation_service import RelaxationService

router = APIRouter()


@router.get(
    "/sounds",
    response_model=BaseResponse[list[RelaxationSoundResponse]],
)
async def list_sounds(db: DBSession):
    """Get the sound catalogue ordered by title."""
    sounds = await RelaxationService(db).list_sounds()
    return BaseResponse(data=[RelaxationSoundResponse.model_validate(s) for s in sounds])


@router.get(
    "/favorites",
    response_model=BaseResponse[FavoriteSoundsResponse],
)
async def list_favorite_sounds(
    current_user: CurrentUser,
    db: DBSession,
):
    favorites = await RelaxationService(db).list_favorites(current_user.id)
    return BaseResponse(
        data=FavoriteSoundsResponse(
            favorites=[f.sound_id for f in favorites],
            favorite_sounds=[RelaxationSoundResponse.model_validate(f.sound) for f in favorites],
        )
    )


@router.post(
    "/favorites/{sound_id}/toggle",
    response_model=BaseResponse[FavoriteToggleResponse],
)
async def toggle_favorite_sound(
    sound_id: uuid.UUID,
    current_user: CurrentUser,
    db: DBSession,
):
    """Add the sound to favourites, or remove it if it is already there."""
    is_favorite = await RelaxationService(db).toggle_favorite(current_user.id, sound_id)
    return BaseResponse(data=FavoriteToggleResponse(sound_id=sound_id, is_favorite=is_favorite))
