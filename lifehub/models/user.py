"""
User Models
===========

SQLAlchemy models for user accounts and their persisted preferences.
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifehub.db.base import Base, JSONType, TimestampMixin, UUIDMixin

if TYPE_CHECKING:
    from lifehub.models.habit import Habit


class User(Base, UUIDMixin, TimestampMixin):
    """
    User account model.

    Identity is owned by the external provider; this row holds the
    profile fields the dashboard shows and edits.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
    )
    image: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
    )
    password_hash: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,  # OAuth-only accounts have no password
    )

    # Relationships
    preferences: Mapped[Optional["UserPreferences"]] = relationship(
        "UserPreferences",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
    )
    habits: Mapped[list["Habit"]] = relationship(
        "Habit",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"


class UserPreferences(Base, TimestampMixin):
    """
    Per-user settings blobs.

    One row per user; a missing row or a missing key means defaults.
    """

    __tablename__ = "user_preferences"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    notification_preferences: Mapped[Optional[dict]] = mapped_column(
        JSONType,
        nullable=True,
    )
    appearance_preferences: Mapped[Optional[dict]] = mapped_column(
        JSONType,
        nullable=True,
    )
    pomodoro_settings: Mapped[Optional[dict]] = mapped_column(
        JSONType,
        nullable=True,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="preferences",
    )

    def __repr__(self) -> str:
        return f"<UserPreferences(user_id={self.user_id})>"
