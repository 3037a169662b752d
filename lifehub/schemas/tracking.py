"""
Tracking Schemas
================

Pydantic schemas for energy logs and money transactions.
"""

import datetime as dt
from typing import Optional
import uuid

from pydantic import Field

from lifehub.models.finance import TransactionType
from lifehub.schemas.common import CamelModel


class EnergyLogCreate(CamelModel):
    """Request schema for logging energy and focus."""

    date: dt.date = Field(default_factory=dt.date.today)
    energy_level: int = Field(ge=0, le=10)
    focus_level: int = Field(default=0, ge=0, le=10)
    notes: Optional[str] = None


class EnergyLogResponse(CamelModel):
    """A logged energy reading."""

    id: uuid.UUID
    date: dt.date
    energy_level: int
    focus_level: int
    notes: Optional[str] = None


class TransactionCreate(CamelModel):
    """Request schema for recording income or an expense."""

    amount: float = Field(gt=0)
    type: TransactionType
    category: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    date: dt.date = Field(default_factory=dt.date.today)


class TransactionResponse(CamelModel):
    """A recorded transaction."""

    id: uuid.UUID
    amount: float
    type: TransactionType
    category: str
    description: Optional[str] = None
    date: dt.date
