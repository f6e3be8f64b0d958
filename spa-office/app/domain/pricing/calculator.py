# app/domain/pricing/calculator.py
"""Pricing rules shared by the entry form, receipts and reports.

Money is handled as ``Decimal`` end to end. The only rounding step is the
transaction-level discount in ``final_total``, which rounds half away from
zero to whole rupiah.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional, Union

Number = Union[Decimal, int, float, str]

ZERO = Decimal("0")
HUNDRED = Decimal("100")
WHOLE_UNIT = Decimal("1")


def to_decimal(value: Optional[Number]) -> Decimal:
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # str() first so floats like 0.1 do not drag binary noise along
    return Decimal(str(value))


def clamp_percentage(value: Optional[Number]) -> Optional[Decimal]:
    if value is None:
        return None
    pct = to_decimal(value)
    return min(max(pct, ZERO), HUNDRED)


def round_currency(amount: Decimal) -> Decimal:
    return amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP)


def effective_price(treatment) -> Decimal:
    """Unit price after the treatment's own discount.

    ``treatment`` is anything exposing ``price``, ``discount_active`` and
    ``discount_percentage``. No rounding happens here.
    """
    price = to_decimal(treatment.price)
    pct = clamp_percentage(treatment.discount_percentage)
    if treatment.discount_active and pct and pct > 0:
        return price - price * pct / HUNDRED
    return price


def subtotal(treatments: Iterable) -> Decimal:
    """Sum of effective prices, one unit per entry."""
    return sum((effective_price(t) for t in treatments), ZERO)


def line_subtotal(items: Iterable) -> Decimal:
    """Sum of ``price * quantity`` over persisted line items."""
    return sum((to_decimal(item.price) * item.quantity for item in items), ZERO)


def final_total(
    amount: Number,
    discount_active: bool,
    discount_percentage: Optional[Number] = None,
) -> Decimal:
    amount = to_decimal(amount)
    pct = clamp_percentage(discount_percentage)
    if not discount_active or not pct:
        return amount
    return round_currency(amount - amount * pct / HUNDRED)


def applied_discount(amount: Number, total: Number) -> Decimal:
    return to_decimal(amount) - to_decimal(total)
