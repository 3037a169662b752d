"""
Tracking API Endpoints
======================

Energy logs and income/expense transactions.
"""

import uuid

from fastapi import APIRouter, status

from lifehub.dependencies import CurrentUser, DBSession
from lifehub.schemas.common import BaseResponse, DeleteResult
from lifehub.schemas.tracking import (
    EnergyLogCreate,
    EnergyLogResponse,
    TransactionCreate,
    TransactionResponse,
)
from lifehub.services.tracking_service import EnergyService, TransactionService

energy_router = APIRouter()
transactions_router = APIRouter()


# =============================================================================
# Energy
# =============================================================================

@energy_router.get(
    "",
    response_model=BaseResponse[list[EnergyLogResponse]],
)
async def list_energy_logs(
    current_user: CurrentUser,
    db: DBSession,
):
    logs = await EnergyService(db).list_logs(current_user.id)
    return BaseResponse(data=[EnergyLogResponse.model_validate(log) for log in logs])


@energy_router.post(
    "",
    response_model=BaseResponse[EnergyLogResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_energy_log(
    log_data: EnergyLogCreate,
    current_user: CurrentUser,
    db: DBSession,
):
    log = await EnergyService(db).create_log(current_user.id, log_data)
    return BaseResponse(data=EnergyLogResponse.model_validate(log))


@energy_router.delete(
    "/{log_id}",
    response_model=BaseResponse[DeleteResult],
)
async def delete_energy_log(
    log_id: uuid.UUID,
    current_user: CurrentUser,
    db: DBSession,
):
    await EnergyService(db).delete_log(log_id, current_user.id)
    return BaseResponse(data=DeleteResult(id=str(log_id)))


# =============================================================================
# Transactions
# =============================================================================

@transactions_router.get(
    "",
    response_model=BaseResponse[list[TransactionResponse]],
)
async def list_transactions(
    current_user: CurrentUser,
    db: DBSession,
):
    transactions = await TransactionService(db).list_transactions(current_user.id)
    return BaseResponse(data=[TransactionResponse.model_validate(t) for t in transactions])


@transactions_router.post(
    "",
    response_model=BaseResponse[TransactionResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_transaction(
    transaction_data: TransactionCreate,
    current_user: CurrentUser,
    db: DBSession,
):
    transaction = await TransactionService(db).create_transaction(current_user.id, transaction_data)
    return BaseResponse(data=TransactionResponse.model_validate(transaction))


@transactions_router.delete(
    "/{transaction_id}",
    response_model=BaseResponse[DeleteResult],
)
async def delete_transaction(
    transaction_id: uuid.UUID,
    current_user: CurrentUser,
    db: DBSession,
):
    await TransactionService(db).delete_transaction(transaction_id, current_user.id)
    return BaseResponse(data=DeleteResult(id=str(transaction_id)))
