"""
Tracking Service
================

Energy logs and money transactions feeding the analytics pages.
"""

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from lifehub.core.errors import ErrorCodes, NotFoundError
from lifehub.models.finance import Transaction
from lifehub.models.tracking import EnergyLog
from lifehub.schemas.tracking import EnergyLogCreate, TransactionCreate


class EnergyService:
    """Service for energy log operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_logs(self, user_id: uuid.UUID) -> list[EnergyLog]:
        stmt = (
            select(EnergyLog)
            .where(EnergyLog.user_id == user_id)
            .order_by(EnergyLog.date.desc(), EnergyLog.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_log(self, user_id: uuid.UUID, data: EnergyLogCreate) -> EnergyLog:
        log = EnergyLog(user_id=user_id, **data.model_dump())
        self.db.add(log)
        await self.db.flush()
        return log

    async def delete_log(self, log_id: uuid.UUID, user_id: uuid.UUID) -> None:
        stmt = select(EnergyLog).where(EnergyLog.id == log_id, EnergyLog.user_id == user_id)
        log = (await self.db.execute(stmt)).scalar_one_or_none()
        if log is None:
            raise NotFoundError(
                code=ErrorCodes.ENERGY_LOG_NOT_FOUND,
                message="Energy log not found",
            )
        await self.db.delete(log)
        await self.db.flush()


class TransactionService:
    """Service for income and expense records."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_transactions(self, user_id: uuid.UUID) -> list[Transaction]:
        stmt = (
            select(Transaction)
            .where(Transaction.user_id == user_id)
            .order_by(Transaction.date.desc(), Transaction.created_at.desc())
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create_transaction(
        self,
        user_id: uuid.UUID,
        data: TransactionCreate,
    ) -> Transaction:
        transaction = Transaction(user_id=user_id, **data.model_dump())
        self.db.add(transaction)
        await self.db.flush()
        return transaction

    async def delete_transaction(self, transaction_id: uuid.UUID, user_id: uuid.UUID) -> None:
        stmt = select(Transaction).where(
            Transaction.id == transaction_id,
            Transaction.user_id == user_id,
        )
        transaction = (await self.db.execute(stmt)).scalar_one_or_none()
        if transaction is None:
            raise NotFoundError(
                code=ErrorCodes.TRANSACTION_NOT_FOUND,
                message="Transaction not found",
            )
        await self.db.delete(transaction)
        await self.db.flush()
