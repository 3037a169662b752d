"""
Relaxation Schemas
==================

Pydantic schemas for the relaxation sound endpoints.
"""

from typing import Optional
import uuid

from pydantic import Field

from lifehub.schemas.common import CamelModel


class RelaxationSoundResponse(CamelModel):
    """A catalogue sound."""

    id: uuid.UUID
    title: str
    category: str
    duration: int
    src: str
    cover_image: Optional[str] = None


class FavoriteSoundsResponse(CamelModel):
    """The user's favourite sound ids and the sounds themselves."""

    favorites: list[uuid.UUID] = Field(default_factory=list)
    favorite_sounds: list[RelaxationSoundResponse] = Field(default_factory=list)


class FavoriteToggleResponse(CamelModel):
    """Result of toggling a favourite."""

    sound_id: uuid.UUID
    is_favorite: bool
