# app/domain/reports/projector.py
"""Rebuilds receipts and reports from persisted transactions.

Only the final ``total_amount`` is stored on a transaction, so the subtotal
and the discount line are re-derived from the line items every time. The
displayed discount is ``subtotal * pct / 100`` and may differ from
``subtotal - total`` by one rupiah because the stored total was rounded.
"""
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

from app.core.config import settings
from app.domain.pricing.calculator import (
    HUNDRED,
    ZERO,
    clamp_percentage,
    line_subtotal,
    to_decimal,
)
from .formatting import (
    format_currency,
    format_long_date,
    format_percentage,
    format_short_date,
    payment_label,
    receipt_number,
)
from .schemas import (
    DailyReport,
    PaymentTotals,
    RangeReport,
    Receipt,
    ReceiptLine,
    ReportRow,
)


def reconstruct_subtotal(tx) -> Decimal:
    items = tx.items or []
    if not items:
        # A receipt must always render something
        return to_decimal(tx.total_amount)
    return line_subtotal(items)


def discount_shown(tx) -> bool:
    pct = clamp_percentage(tx.discount_percentage)
    return bool(tx.discount_active and pct and pct > 0)


def displayed_discount(tx) -> Decimal:
    if not discount_shown(tx):
        return ZERO
    pct = clamp_percentage(tx.discount_percentage)
    return reconstruct_subtotal(tx) * pct / HUNDRED


def build_receipt(tx, discount_amount: Optional[Decimal] = None, locale: Optional[str] = None) -> Receipt:
    """Single-transaction receipt with the full line-item breakdown.

    ``discount_amount`` overrides the re-derived discount; the entry form
    passes ``subtotal - total`` so its receipt adds up to the rupiah.
    """
    subtotal = reconstruct_subtotal(tx)
    show_discount = discount_shown(tx)
    if discount_amount is None:
        discount_amount = displayed_discount(tx)
    elif not show_discount:
        discount_amount = ZERO

    lines = []
    for item in tx.items or []:
        line_total = to_decimal(item.price) * item.quantity
        lines.append(
            ReceiptLine(
                treatment_name=item.treatment_name,
                unit_price=to_decimal(item.price),
                quantity=item.quantity,
                line_total=line_total,
                line_total_display=format_currency(line_total, locale),
            )
        )

    pct = clamp_percentage(tx.discount_percentage) if show_discount else None
    total = to_decimal(tx.total_amount)

    return Receipt(
        shop_name=settings.SHOP_NAME,
        shop_whatsapp=settings.SHOP_WHATSAPP,
        transaction_id=tx.id,
        receipt_number=receipt_number(tx.id),
        service_date=tx.service_date,
        service_date_display=format_long_date(tx.service_date, locale),
        customer_name=tx.customer_name,
        customer_age=tx.customer_age,
        customer_address=tx.customer_address,
        payment_method=tx.payment_method,
        payment_label=payment_label(tx.payment_method),
        lines=lines,
        subtotal=subtotal,
        subtotal_display=format_currency(subtotal, locale),
        show_discount=show_discount,
        discount_percentage=pct,
        discount_percentage_display=format_percentage(pct) if pct is not None else None,
        discount_amount=discount_amount,
        discount_amount_display=format_currency(discount_amount, locale),
        total_amount=total,
        total_display=format_currency(total, locale),
        notes=tx.notes,
    )


def build_row(number: int, tx, locale: Optional[str] = None) -> ReportRow:
    total = to_decimal(tx.total_amount)
    return ReportRow(
        number=number,
        transaction_id=tx.id,
        service_date=tx.service_date,
        service_date_display=format_short_date(tx.service_date, locale),
        customer_name=tx.customer_name,
        customer_age=tx.customer_age,
        customer_address=tx.customer_address or "-",
        treatments=", ".join(item.treatment_name for item in tx.items or []),
        payment_method=tx.payment_method,
        payment_label=payment_label(tx.payment_method),
        notes=tx.notes or "-",
        total_amount=total,
        total_display=format_currency(total, locale),
    )


def sum_totals(transactions: Iterable) -> Decimal:
    return sum((to_decimal(tx.total_amount) for tx in transactions), ZERO)


def payment_totals(transactions: Iterable) -> PaymentTotals:
    total = cash = transfer = ZERO
    for tx in transactions:
        amount = to_decimal(tx.total_amount)
        total += amount
        if tx.payment_method == "cash":
            cash += amount
        else:
            transfer += amount
    return PaymentTotals(total=total, cash=cash, transfer=transfer)


def report_dates(transactions: Iterable) -> List[date]:
    return sorted({tx.service_date for tx in transactions}, reverse=True)


def build_daily_report(transactions: Sequence, day: date, locale: Optional[str] = None) -> DailyReport:
    day_transactions = [tx for tx in transactions if tx.service_date == day]
    day_total = sum_totals(day_transactions)
    return DailyReport(
        shop_name=settings.SHOP_NAME,
        day=day,
        day_display=format_long_date(day, locale),
        rows=[build_row(i, tx, locale) for i, tx in enumerate(day_transactions, start=1)],
        day_total=day_total,
        day_total_display=format_currency(day_total, locale),
        count=len(day_transactions),
    )


def build_range_report(
    transactions: Sequence,
    start_date: date,
    end_date: date,
    locale: Optional[str] = None,
) -> RangeReport:
    totals = payment_totals(transactions)
    return RangeReport(
        shop_name=settings.SHOP_NAME,
        start_date=start_date,
        end_date=end_date,
        period_display=f"{format_long_date(start_date, locale)} - {format_long_date(end_date, locale)}",
        rows=[build_row(i, tx, locale) for i, tx in enumerate(transactions, start=1)],
        totals=totals,
        total_display=format_currency(totals.total, locale),
        cash_display=format_currency(totals.cash, locale),
        transfer_display=format_currency(totals.transfer, locale),
        count=len(transactions),
    )
