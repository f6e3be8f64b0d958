# app/db/repositories/transactions.py
import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import delete, func, select

from app.core.errors import PersistenceError
from app.db.models.transactions import Transaction
from app.db.models.line_items import TransactionItem

logger = logging.getLogger(__name__)


async def get_transaction_by_id(
    db: AsyncSession,
    transaction_id: UUID
) -> Optional[Transaction]:
    result = await db.execute(
        select(Transaction).where(Transaction.id == transaction_id)
    )
    txn = result.scalar_one_or_none()
    return txn


async def create_transaction_with_items(
    db: AsyncSession,
    txn: Transaction,
    items: List[TransactionItem],
) -> Transaction:
    """Insert the header and its line items in one database transaction.

    Either both land or neither does.
    """
    txn.items = items
    try:
        # The unit of work inserts the header before the items
        db.add(txn)
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error("Failed to persist transaction for %s: %s", txn.customer_name, exc)
        raise PersistenceError(str(exc)) from exc

    await db.refresh(txn)
    return txn


async def delete_transaction(
    db: AsyncSession,
    txn: Transaction,
) -> None:
    try:
        await db.execute(
            delete(TransactionItem).where(TransactionItem.transaction_id == txn.id)
        )
        await db.execute(
            delete(Transaction).where(Transaction.id == txn.id)
        )
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.error("Failed to delete transaction %s: %s", txn.id, exc)
        raise PersistenceError(str(exc)) from exc


async def list_transactions(
    db: AsyncSession,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    payment_method: Optional[str] = None,
    employee_id: Optional[UUID] = None,
) -> List[Transaction]:
    query = select(Transaction)

    if start_date is not None:
        query = query.where(Transaction.service_date >= start_date)
    if end_date is not None:
        query = query.where(Transaction.service_date <= end_date)
    if payment_method is not None:
        query = query.where(Transaction.payment_method == payment_method)
    if employee_id is not None:
        query = query.where(Transaction.employee_id == employee_id)

    query = query.order_by(Transaction.service_date.desc(), Transaction.created_at.desc())
    result = await db.execute(query)
    return list(result.scalars().all())


async def list_recent_transactions(
    db: AsyncSession,
    employee_id: UUID,
    limit: int,
) -> List[Transaction]:
    result = await db.execute(
        select(Transaction)
        .where(Transaction.employee_id == employee_id)
        .order_by(Transaction.created_at.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def count_transactions(
    db: AsyncSession,
    employee_id: Optional[UUID] = None,
) -> int:
    query = select(func.count(Transaction.id))
    if employee_id is not None:
        query = query.where(Transaction.employee_id == employee_id)
    result = await db.execute(query)
    return result.scalar() or 0
