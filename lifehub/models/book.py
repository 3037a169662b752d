"""
Book Model
==========

SQLAlchemy model for the personal bookshelf.
"""

from enum import Enum
from typing import Optional

from sqlalchemy import Enum as SQLEnum, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lifehub.db.base import Base, TimestampMixin, UserOwnedMixin, UUIDMixin


class ReadingStatus(str, Enum):
    """Where a book sits on the shelf."""
    WANT_TO_READ = "want_to_read"
    READING = "reading"
    FINISHED = "finished"


class Book(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """A book on the user's shelf."""

    __tablename__ = "books"

    title: Mapped[str] = mapped_column(String(300), nullable=False)
    author: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    genre: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    status: Mapped[ReadingStatus] = mapped_column(
        SQLEnum(ReadingStatus),
        nullable=False,
        default=ReadingStatus.WANT_TO_READ,
    )
    rating: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    total_pages: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    current_page: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    cover_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<Book(title={self.title}, status={self.status})>"
