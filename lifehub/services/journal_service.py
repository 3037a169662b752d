"""
Journal Service
===============

Business logic for journal entries.
"""

from typing import Optional
import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehub.core.errors import ErrorCodes, NotFoundError
from lifehub.models.journal import JournalEntry
from lifehub.schemas.journal import JournalEntryCreate, JournalEntryUpdate


class JournalService:
    """Service for journal operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_entry_by_id(
        self,
        entry_id: uuid.UUID,
        user_id: uuid.UUID,
    ) -> Optional[JournalEntry]:
        """Get journal entry by ID ensuring it belongs to user."""
        stmt = select(JournalEntry).where(
            JournalEntry.id == entry_id,
            JournalEntry.user_id == user_id,
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_owned_entry(
        self,
        entry_id: uuid.UUID,
        user_id: uuid.UUID,
    ) -> JournalEntry:
        """Like ``get_entry_by_id`` but raises 404 when missing."""
        entry = await self.get_entry_by_id(entry_id, user_id)
        if entry is None:
            raise NotFoundError(
                code=ErrorCodes.JOURNAL_NOT_FOUND,
                message="Journal entry not found",
            )
        return entry

    async def list_entries(self, user_id: uuid.UUID) -> list[JournalEntry]:
        """All entries, newest date first."""
        stmt = (
            select(JournalEntry)
            .where(JournalEntry.user_id == user_id)
            .order_by(JournalEntry.date.desc(), JournalEntry.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_entry(
        self,
        user_id: uuid.UUID,
        entry_data: JournalEntryCreate,
    ) -> JournalEntry:
        """Create a new journal entry."""
        entry = JournalEntry(
            user_id=user_id,
            title=entry_data.title,
            content=entry_data.content,
            mood=entry_data.mood,
            tags=entry_data.tags,
            date=entry_data.date,
        )
        self.db.add(entry)
        await self.db.flush()
        return entry

    async def update_entry(
        self,
        entry: JournalEntry,
        entry_data: JournalEntryUpdate,
    ) -> JournalEntry:
        """Apply the fields present in ``entry_data``."""
        for field, value in entry_data.model_dump(exclude_unset=True).items():
            if value is None and field in ("title", "date", "tags", "content"):
                continue
            setattr(entry, field, value)

        await self.db.flush()
        return entry

    async def delete_entry(self, entry: JournalEntry) -> None:
        """Delete a journal entry."""
        await self.db.delete(entry)
        await self.db.flush()
