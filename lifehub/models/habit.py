"""
Habit Models
============

SQLAlchemy models for habits and their daily completion records.
"""

import datetime as dt
from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import Boolean, Date, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifehub.db.base import Base, TimestampMixin, UserOwnedMixin, UUIDMixin

if TYPE_CHECKING:
    from lifehub.models.user import User


class Habit(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """
    A recurring user-defined activity tracked per calendar day.
    """

    __tablename__ = "habits"

    name: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )
    category: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="other",
    )
    frequency: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="daily",
    )
    color: Mapped[Optional[str]] = mapped_column(
        String(30),
        nullable=True,
    )

    # Relationships
    user: Mapped["User"] = relationship(
        "User",
        back_populates="habits",
    )
    completions: Mapped[list["HabitCompletion"]] = relationship(
        "HabitCompletion",
        back_populates="habit",
        order_by="HabitCompletion.date",
    )

    def __repr__(self) -> str:
        return f"<Habit(id={self.id}, name={self.name})>"


class HabitCompletion(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """
    Whether a habit was performed on a given day.

    One row per (habit, date) is kept by the toggle operation's
    find-or-create; there is no declared unique constraint.
    """

    __tablename__ = "habit_completions"

    habit_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey("habits.id", ondelete="CASCADE"),
        nullable=False,
    )
    date: Mapped[dt.date] = mapped_column(
        Date,
        nullable=False,
    )
    completed: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
    )

    habit: Mapped["Habit"] = relationship(
        "Habit",
        back_populates="completions",
    )

    __table_args__ = (
        Index("idx_habit_completion_habit_date", "habit_id", "date"),
        Index("idx_habit_completion_user_date", "user_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<HabitCompletion(habit_id={self.habit_id}, date={self.date}, completed={self.completed})>"
