# app/domain/checkout/service.py
import logging
from collections import OrderedDict
from typing import List, Optional, Tuple
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.errors import BusinessError, PermissionDeniedError
from app.core.security import CurrentUser
from app.db.models.transactions import Transaction
from app.db.models.line_items import TransactionItem
from app.db.repositories import transactions as transactions_repo
from app.db.repositories.treatments import get_active_treatments_by_ids
from app.domain.pricing.calculator import (
    applied_discount,
    clamp_percentage,
    effective_price,
    final_total,
    subtotal,
)
from app.domain.reports.projector import build_receipt
from app.domain.reports.schemas import Receipt
from .schemas import TransactionCreate

logger = logging.getLogger(__name__)


def validate_transaction(data: TransactionCreate) -> None:
    """Reject an entry form before anything is computed or stored."""
    if not data.customer_name or not data.customer_name.strip():
        raise BusinessError("Nama pelanggan harus diisi")
    if not data.treatments:
        raise BusinessError("Pilih minimal 1 treatment")
    if data.payment_method is None:
        raise BusinessError("Pilih metode pembayaran")


def merge_quantities(data: TransactionCreate) -> "OrderedDict[UUID, int]":
    # Same treatment picked twice becomes one line with a larger quantity
    quantities: "OrderedDict[UUID, int]" = OrderedDict()
    for selected in data.treatments:
        quantities[selected.treatment_id] = quantities.get(selected.treatment_id, 0) + selected.quantity
    return quantities


def expand_selection(treatments_by_id, quantities) -> list:
    return [
        treatments_by_id[treatment_id]
        for treatment_id, quantity in quantities.items()
        for _ in range(quantity)
    ]


def _optional(value):
    if value is None:
        return None
    value = value.strip()
    return value or None


async def create_transaction(
    db: AsyncSession,
    data: TransactionCreate,
    user: CurrentUser,
) -> Tuple[Transaction, Receipt]:
    validate_transaction(data)

    quantities = merge_quantities(data)
    treatments = await get_active_treatments_by_ids(db, quantities.keys())
    treatments_by_id = {t.id: t for t in treatments}
    missing = [str(tid) for tid in quantities if tid not in treatments_by_id]
    if missing:
        raise BusinessError(f"Treatment tidak ditemukan: {', '.join(missing)}")

    amount = subtotal(expand_selection(treatments_by_id, quantities))
    discount_pct = clamp_percentage(data.discount_percentage) if data.discount_active else None
    total = final_total(amount, data.discount_active, discount_pct)

    items: List[TransactionItem] = []
    for line_number, (treatment_id, quantity) in enumerate(quantities.items(), start=1):
        treatment = treatments_by_id[treatment_id]
        items.append(
            TransactionItem(
                treatment_id=treatment.id,
                line_number=line_number,
                treatment_name=treatment.name,
                price=effective_price(treatment),
                quantity=quantity,
            )
        )

    txn = Transaction(
        employee_id=user.id,
        service_date=data.service_date,
        customer_name=data.customer_name.strip(),
        customer_age=_optional(data.customer_age),
        customer_address=_optional(data.customer_address),
        payment_method=data.payment_method.value,
        discount_active=data.discount_active,
        discount_percentage=discount_pct or 0,
        total_amount=total,
        notes=_optional(data.notes),
    )

    txn = await transactions_repo.create_transaction_with_items(db, txn, items)
    logger.info(
        "Transaction %s created by %s: %d line(s), subtotal=%s total=%s",
        txn.id, user.id, len(items), amount, total,
    )

    receipt = build_receipt(txn, discount_amount=applied_discount(amount, total))
    return txn, receipt


async def delete_transaction(
    db: AsyncSession,
    transaction_id: UUID,
    user: CurrentUser,
) -> None:
    txn = await transactions_repo.get_transaction_by_id(db, transaction_id)
    if txn is None:
        # Already gone; deleting twice is not an error
        logger.info("Transaction %s already deleted", transaction_id)
        return

    if not user.is_admin and txn.employee_id != user.id:
        raise PermissionDeniedError("Only the employee who recorded a transaction may delete it")

    await transactions_repo.delete_transaction(db, txn)
    logger.info("Transaction %s deleted by %s", transaction_id, user.id)


async def list_recent_transactions(
    db: AsyncSession,
    user: CurrentUser,
    limit: Optional[int] = None,
) -> List[Transaction]:
    return await transactions_repo.list_recent_transactions(
        db, user.id, limit or settings.REPORT_HISTORY_LIMIT
    )
