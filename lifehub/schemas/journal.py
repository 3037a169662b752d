"""
Journal Schemas
===============

Pydantic schemas for journal entry endpoints.
"""

import datetime as dt
from typing import Optional
import uuid

from pydantic import Field, field_validator

from lifehub.schemas.common import CamelModel


def _clean_tags(tags: list[str]) -> list[str]:
    """Strip, drop empties and de-duplicate while keeping order."""
    seen: set[str] = set()
    cleaned = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in seen:
            seen.add(tag)
            cleaned.append(tag)
    return cleaned


class JournalEntryCreate(CamelModel):
    """Request schema for creating a journal entry."""

    title: str = Field(min_length=1, max_length=200)
    content: str = ""
    mood: Optional[str] = Field(default=None, max_length=50)
    tags: list[str] = Field(default_factory=list)
    date: dt.date = Field(default_factory=dt.date.today)

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: list[str]) -> list[str]:
        return _clean_tags(v)


class JournalEntryUpdate(CamelModel):
    """Request schema for updating a journal entry. Omitted fields are kept."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = None
    mood: Optional[str] = Field(default=None, max_length=50)
    tags: Optional[list[str]] = None
    date: Optional[dt.date] = None

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        if v is None:
            return v
        return _clean_tags(v)


class JournalEntryResponse(CamelModel):
    """Response schema for a journal entry."""

    id: uuid.UUID
    title: str
    content: str
    mood: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    date: dt.date
    created_at: dt.datetime
    updated_at: dt.datetime
