"""
Tracking Models
===============

Daily energy logs, todos and notes.
"""

import datetime as dt
from typing import Optional

from sqlalchemy import Boolean, Date, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lifehub.db.base import Base, TimestampMixin, UserOwnedMixin, UUIDMixin


class EnergyLog(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """Self-reported energy and focus levels for a day."""

    __tablename__ = "energy_logs"

    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    energy_level: Mapped[int] = mapped_column(Integer, nullable=False)
    focus_level: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        Index("idx_energy_user_date", "user_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<EnergyLog(date={self.date}, energy={self.energy_level})>"


class Todo(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """A to-do item."""

    __tablename__ = "todos"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    due_date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        return f"<Todo(title={self.title}, completed={self.completed})>"


class Note(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """A free-form note."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<Note(title={self.title})>"
