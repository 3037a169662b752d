"""
Book Schemas
============

Pydantic schemas for bookshelf endpoints.
"""

import datetime as dt
from typing import Optional
import uuid

from pydantic import Field, model_validator

from lifehub.models.book import ReadingStatus
from lifehub.schemas.common import CamelModel


class BookCreate(CamelModel):
    """Request schema for adding a book."""

    title: str = Field(min_length=1, max_length=300)
    author: Optional[str] = Field(default=None, max_length=200)
    genre: Optional[str] = Field(default=None, max_length=100)
    status: ReadingStatus = ReadingStatus.WANT_TO_READ
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    total_pages: Optional[int] = Field(default=None, ge=1)
    current_page: int = Field(default=0, ge=0)
    notes: Optional[str] = None
    cover_image: Optional[str] = Field(default=None, max_length=500)

    @model_validator(mode="after")
    def check_page_bounds(self) -> "BookCreate":
        if self.total_pages is not None and self.current_page > self.total_pages:
            raise ValueError("currentPage cannot exceed totalPages")
        return self


class BookUpdate(CamelModel):
    """Request schema for editing a book. Omitted fields are kept."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=300)
    author: Optional[str] = Field(default=None, max_length=200)
    genre: Optional[str] = Field(default=None, max_length=100)
    status: Optional[ReadingStatus] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    total_pages: Optional[int] = Field(default=None, ge=1)
    current_page: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None
    cover_image: Optional[str] = Field(default=None, max_length=500)


class BookResponse(CamelModel):
    """A book on the shelf."""

    id: uuid.UUID
    title: str
    author: Optional[str] = None
    genre: Optional[str] = None
    status: ReadingStatus
    rating: Optional[int] = None
    total_pages: Optional[int] = None
    current_page: int = 0
    notes: Optional[str] = None
    cover_image: Optional[str] = None
    created_at: dt.datetime
    updated_at: dt.datetime
