"""
Relaxation Service
==================

The shared sound catalogue and per-user favourites.
"""

import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from lifehub.core.errors import ErrorCodes, NotFoundError
from lifehub.models.relaxation import FavoriteSound, RelaxationSound

logger = logging.getLogger(__name__)

PLACEHOLDER_COVER = "/placeholder.svg?height=200&width=200"

DEFAULT_SOUNDS = [
    {"title": "Gentle Rain", "category": "Nature", "duration": 180, "src": "/sounds/rain.mp3"},
    {"title": "Ocean Waves", "category": "Nature", "duration": 240, "src": "/sounds/ocean.mp3"},
    {"title": "Forest Birds", "category": "Nature", "duration": 210, "src": "/sounds/forest.mp3"},
    {"title": "Meditation Bells", "category": "Meditation", "duration": 300, "src": "/sounds/bells.mp3"},
    {"title": "Deep Relaxation", "category": "Meditation", "duration": 360, "src": "/sounds/relaxation.mp3"},
    {"title": "Calm Piano", "category": "Music", "duration": 270, "src": "/sounds/piano.mp3"},
    {"title": "Ambient Melody", "category": "Music", "duration": 330, "src": "/sounds/ambient.mp3"},
    {"title": "White Noise", "category": "Noise", "duration": 240, "src": "/sounds/white-noise.mp3"},
]


class RelaxationService:
    """Service for relaxation sound operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_sounds(self) -> list[RelaxationSound]:
        """Whole catalogue ordered by title."""
        result = await self.db.execute(
            select(RelaxationSound).order_by(RelaxationSound.title.asc())
        )
        return list(result.scalars().all())

    async def list_favorites(self, user_id: uuid.UUID) -> list[FavoriteSound]:
        stmt = (
            select(FavoriteSound)
            .where(FavoriteSound.user_id == user_id)
            .options(selectinload(FavoriteSound.sound))
            .order_by(FavoriteSound.created_at.asc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def toggle_favorite(self, user_id: uuid.UUID, sound_id: uuid.UUID) -> bool:
        """
        Add the sound to the user's favourites, or remove it if present.

        Returns:
            Whether the sound is a favourite afterwards

        Raises:
            NotFoundError: If the sound is not in the catalogue
        """
        sound = await self.db.get(RelaxationSound, sound_id)
        if sound is None:
            raise NotFoundError(
                code=ErrorCodes.SOUND_NOT_FOUND,
                message="Sound not found",
            )

        stmt = select(FavoriteSound).where(
            FavoriteSound.user_id == user_id,
            FavoriteSound.sound_id == sound_id,
        )
        existing = (await self.db.execute(stmt)).scalars().first()

        if existing is not None:
            await self.db.delete(existing)
            await self.db.flush()
            return False

        self.db.add(FavoriteSound(user_id=user_id, sound_id=sound_id))
        await self.db.flush()
        return True

    async def seed_sounds(self) -> int:
        """
        Insert the default catalogue when the table is empty.

        Returns:
            Number of sounds inserted
        """
        existing = await self.db.scalar(select(func.count(RelaxationSound.id)))
        if existing:
            return 0

        self.db.add_all(
            RelaxationSound(cover_image=PLACEHOLDER_COVER, **data)
            for data in DEFAULT_SOUNDS
        )
        await self.db.flush()
        logger.info("Seeded %d relaxation sounds", len(DEFAULT_SOUNDS))
        return len(DEFAULT_SOUNDS)
