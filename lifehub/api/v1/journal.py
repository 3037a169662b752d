"""
Journal API Endpoints
=====================

Journal entry CRUD.
"""

import uuid

from fastapi import APIRouter, status

from lifehub.dependencies import CurrentUser, DBSession
from lifehub.schemas.common import BaseResponse, DeleteResult
from lifehub.schemas.journal import (
    JournalEntryCreate,
    JournalEntryResponse,
    JournalEntryUpdate,
)
from lifehub.services.journal_service import JournalService

router = APIRouter()


@router.get(
    "",
    response_model=BaseResponse[list[JournalEntryResponse]],
)
async def list_journal_entries(
    current_user: CurrentUser,
    db: DBSession,
):
    """Get all journal entries, newest date first."""
    entries = await JournalService(db).list_entries(current_user.id)
    return BaseResponse(data=[JournalEntryResponse.model_validate(e) for e in entries])


@router.post(
    "",
    response_model=BaseResponse[JournalEntryResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_journal_entry(
    entry_data: JournalEntryCreate,
    current_user: CurrentUser,
    db: DBSession,
):
    entry = await JournalService(db).create_entry(current_user.id, entry_data)
    return BaseResponse(
        data=JournalEntryResponse.model_validate(entry),
        message="Journal entry created",
    )


@router.put(
    "/{entry_id}",
    response_model=BaseResponse[JournalEntryResponse],
)
async def update_journal_entry(
    entry_id: uuid.UUID,
    entry_data: JournalEntryUpdate,
    current_user: CurrentUser,
    db: DBSession,
):
    """Update the provided fields of an entry."""
    journal_service = JournalService(db)
    entry = await journal_service.get_owned_entry(entry_id, current_user.id)
    entry = await journal_service.update_entry(entry, entry_data)
    return BaseResponse(
        data=JournalEntryResponse.model_validate(entry),
        message="Journal entry updated",
    )


@router.delete(
    "/{entry_id}",
    response_model=BaseResponse[DeleteResult],
)
async def delete_journal_entry(
    entry_id: uuid.UUID,
    current_user: CurrentUser,
    db: DBSession,
):
    journal_service = JournalService(db)
    entry = await journal_service.get_owned_entry(entry_id, current_user.id)
    await journal_service.delete_entry(entry)
    return BaseResponse(data=DeleteResult(id=str(entry_id)), message="Journal entry deleted")
