"""
Goal Models
===========

Goals with milestones, and tracked skills.
"""

from datetime import date
from typing import Optional
import uuid

from sqlalchemy import Boolean, Date, Float, ForeignKey, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifehub.db.base import Base, TimestampMixin, UserOwnedMixin, UUIDMixin


class Goal(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """A long-running objective with a progress percentage."""

    __tablename__ = "goals"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    progress: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    target_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    milestones: Mapped[list["Milestone"]] = relationship(
        "Milestone",
        back_populates="goal",
        cascade="all, delete-orphan",
        order_by="Milestone.created_at",
    )

    def __repr__(self) -> str:
        return f"<Goal(title={self.title}, progress={self.progress})>"


class Milestone(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """A checkpoint on the way to a goal."""

    __tablename__ = "milestones"

    goal_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey("goals.id", ondelete="CASCADE"),
        nullable=False,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    goal: Mapped["Goal"] = relationship("Goal", back_populates="milestones")

    def __repr__(self) -> str:
        return f"<Milestone(title={self.title}, completed={self.completed})>"


class Skill(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """A skill the user is practising."""

    __tablename__ = "skills"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    level: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    hours_spent: Mapped[float] = mapped_column(Float, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Skill(name={self.name})>"
