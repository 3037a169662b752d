"""
Preferences Service
===================

Per-user settings stored as JSON blobs on the ``user_preferences`` row.

A missing row, or a missing key inside a blob, falls back to the
schema defaults.
"""

import logging
from typing import TypeVar
import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from lifehub.models.user import UserPreferences
from lifehub.schemas.common import CamelModel
from lifehub.schemas.focus import PomodoroSettings
from lifehub.schemas.profile import AppearancePreferences, NotificationPreferences

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=CamelModel)


class PreferencesService:
    """Service for reading and writing stored preferences."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _get_row(self, user_id: uuid.UUID) -> UserPreferences | None:
        return await self.db.get(UserPreferences, user_id)

    async def _get_or_create_row(self, user_id: uuid.UUID) -> UserPreferences:
        row = await self._get_row(user_id)
        if row is None:
            row = UserPreferences(user_id=user_id)
            self.db.add(row)
            await self.db.flush()
            logger.debug("Created preferences row for user %s", user_id)
        return row

    async def _load(self, user_id: uuid.UUID, column: str, model: type[M]) -> M:
        row = await self._get_row(user_id)
        stored = getattr(row, column, None) if row is not None else None
        return model.model_validate(stored or {})

    async def _save(self, user_id: uuid.UUID, column: str, value: M) -> M:
        row = await self._get_or_create_row(user_id)
        # Reassign a fresh dict so the JSON column is marked dirty
        setattr(row, column, value.model_dump(mode="json"))
        await self.db.flush()
        return value

    async def get_notification_preferences(self, user_id: uuid.UUID) -> NotificationPreferences:
        return await self._load(user_id, "notification_preferences", NotificationPreferences)

    async def save_notification_preferences(
        self,
        user_id: uuid.UUID,
        prefs: NotificationPreferences,
    ) -> NotificationPreferences:
        return await self._save(user_id, "notification_preferences", prefs)

    async def get_appearance_preferences(self, user_id: uuid.UUID) -> AppearancePreferences:
        return await self._load(user_id, "appearance_preferences", AppearancePreferences)

    async def save_appearance_preferences(
        self,
        user_id: uuid.UUID,
        prefs: AppearancePreferences,
    ) -> AppearancePreferences:
        return await self._save(user_id, "appearance_preferences", prefs)

    async def get_pomodoro_settings(self, user_id: uuid.UUID) -> PomodoroSettings:
        return await self._load(user_id, "pomodoro_settings", PomodoroSettings)

    async def save_pomodoro_settings(
        self,
        user_id: uuid.UUID,
        pomodoro_settings: PomodoroSettings,
    ) -> PomodoroSettings:
        return await self._save(user_id, "pomodoro_settings", pomodoro_settings)
