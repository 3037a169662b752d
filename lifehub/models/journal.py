"""
Journal Models
==============

SQLAlchemy model for journal entries.
"""

import datetime as dt
from typing import Optional

from sqlalchemy import Date, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lifehub.db.base import Base, JSONType, TimestampMixin, UserOwnedMixin, UUIDMixin


class JournalEntry(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """
    Journal entry model.

    Stores a titled free-text entry with a mood label and tags.
    """

    __tablename__ = "journal_entries"

    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default="",
    )
    mood: Mapped[Optional[str]] = mapped_column(
        String(50),
        nullable=True,
    )
    tags: Mapped[list] = mapped_column(
        JSONType,
        nullable=False,
        default=list,
    )
    date: Mapped[dt.date] = mapped_column(
        Date,
        nullable=False,
    )

    __table_args__ = (
        Index("idx_journal_user_date", "user_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<JournalEntry(user_id={self.user_id}, date={self.date})>"
