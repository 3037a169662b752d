"""
Book API Endpoints
==================

Bookshelf CRUD.
"""

import uuid

from fastapi import APIRouter, status

from lifehub.dependencies import CurrentUser, DBSession
from lifehub.schemas.book import BookCreate, BookResponse, BookUpdate
from lifehub.schemas.common import BaseResponse, DeleteResult
from lifehub.services.book_service import BookService

router = APIRouter()


@router.get(
    "",
    response_model=BaseResponse[list[BookResponse]],
)
async def list_books(
    current_user: CurrentUser,
    db: DBSession,
):
    """Get all books, most recently updated first."""
    books = await BookService(db).list_books(current_user.id)
    return BaseResponse(data=[BookResponse.model_validate(b) for b in books])


@router.get(
    "/{book_id}",
    response_model=BaseResponse[BookResponse],
)
async def get_book(
    book_id: uuid.UUID,
    current_user: CurrentUser,
    db: DBSession,
):
    book = await BookService(db).get_book(book_id, current_user.id)
    return BaseResponse(data=BookResponse.model_validate(book))


@router.post(
    "",
    response_model=BaseResponse[BookResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_book(
    book_data: BookCreate,
    current_user: CurrentUser,
    db: DBSession,
):
    book = await BookService(db).create_book(current_user.id, book_data)
    return BaseResponse(data=BookResponse.model_validate(book), message="Book added")


@router.put(
    "/{book_id}",
    response_model=BaseResponse[BookResponse],
)
async def update_book(
    book_id: uuid.UUID,
    book_data: BookUpdate,
    current_user: CurrentUser,
    db: DBSession,
):
    book_service = BookService(db)
    book = await book_service.get_book(book_id, current_user.id)
    book = await book_service.update_book(book, book_data)
    return BaseResponse(data=BookResponse.model_validate(book), message="Book updated")


@router.delete(
    "/{book_id}",
    response_model=BaseResponse[DeleteResult],
)
async def delete_book(
    book_id: uuid.UUID,
    current_user: CurrentUser,
    db: DBSession,
):
    book_service = BookService(db)
    book = await book_service.get_book(book_id, current_user.id)
    await book_service.delete_book(book)
    return BaseResponse(data=DeleteResult(id=str(book_id)), message="Book deleted")
