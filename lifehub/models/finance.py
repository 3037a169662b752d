"""
Finance Models
==============

Income and expense transactions.
"""

import datetime as dt
from enum import Enum
from typing import Optional

from sqlalchemy import Date, Enum as SQLEnum, Float, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from lifehub.db.base import Base, TimestampMixin, UserOwnedMixin, UUIDMixin


class TransactionType(str, Enum):
    """Direction of money flow."""
    INCOME = "income"
    EXPENSE = "expense"


class Transaction(Base, UUIDMixin, UserOwnedMixin, TimestampMixin):
    """A single income or expense."""

    __tablename__ = "transactions"

    amount: Mapped[float] = mapped_column(Float, nullable=False)
    type: Mapped[TransactionType] = mapped_column(
        SQLEnum(TransactionType),
        nullable=False,
    )
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        Index("idx_transaction_user_date", "user_id", "date"),
    )

    def __repr__(self) -> str:
        return f"<Transaction(type={self.type}, amount={self.amount})>"
