"""
Book Service
============

Business logic for the bookshelf.
"""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehub.core.errors import ErrorCodes, NotFoundError, ValidationError
from lifehub.models.book import Book
from lifehub.schemas.book import BookCreate, BookUpdate


class BookService:
    """Service for book operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_books(self, user_id: uuid.UUID) -> list[Book]:
        """Books, most recently updated first."""
        stmt = (
            select(Book)
            .where(Book.user_id == user_id)
            .order_by(Book.updated_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def get_book(self, book_id: uuid.UUID, user_id: uuid.UUID) -> Book:
        stmt = select(Book).where(Book.id == book_id, Book.user_id == user_id)
        book = (await self.db.execute(stmt)).scalar_one_or_none()
        if book is None:
            raise NotFoundError(code=ErrorCodes.BOOK_NOT_FOUND, message="Book not found")
        return book

    async def create_book(self, user_id: uuid.UUID, data: BookCreate) -> Book:
        book = Book(user_id=user_id, **data.model_dump())
        self.db.add(book)
        await self.db.flush()
        return book

    async def update_book(self, book: Book, data: BookUpdate) -> Book:
        """Apply provided fields; page bounds are checked on the merged result."""
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field in ("title", "status", "current_page"):
                continue
            setattr(book, field, value)

        if book.total_pages is not None and book.current_page > book.total_pages:
            raise ValidationError(
                message="currentPage cannot exceed totalPages",
                field="currentPage",
            )

        await self.db.flush()
        return book

    async def delete_book(self, book: Book) -> None:
        await self.db.delete(book)
        await self.db.flush()
