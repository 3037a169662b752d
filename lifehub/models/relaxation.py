"""
Relaxation Models
=================

The shared relaxation sound catalogue and per-user favourites.
"""

from typing import Optional
import uuid

from sqlalchemy import ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lifehub.db.base import Base, TimestampMixin, UserOwnedMixin, UUIDMixin


class RelaxationSound(Base, UUIDMixin, TimestampMixin):
    """A playable sound. Not user scoped."""

    __tablename__ = "relaxation_sounds"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # seconds
    src: Mapped[str] = mapped_column(String(500), nullable=False)
    cover_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<RelaxationSound(title={self.title})>"


class FavoriteSound(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """A user's favourite sound."""

    __tablename__ = "favorite_sounds"

    sound_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(),
        ForeignKey("relaxation_sounds.id", ondelete="CASCADE"),
        nullable=False,
    )

    sound: Mapped["RelaxationSound"] = relationship("RelaxationSound")

    def __repr__(self) -> str:
        return f"<FavoriteSound(user_id={self.user_id}, sound_id={self.sound_id})>"
