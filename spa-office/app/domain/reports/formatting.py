# app/domain/reports/formatting.py
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, Optional, Tuple

from app.core.config import settings
from app.domain.pricing.calculator import Number, round_currency, to_decimal


@dataclass(frozen=True)
class LocaleFormat:
    currency_prefix: str
    group_separator: str
    weekdays: Tuple[str, ...]
    months: Tuple[str, ...]
    long_date: str
    short_date: str


LOCALES: Dict[str, LocaleFormat] = {
    "id_ID": LocaleFormat(
        currency_prefix="Rp",
        group_separator=".",
        weekdays=("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu"),
        months=(
            "Januari", "Februari", "Maret", "April", "Mei", "Juni",
            "Juli", "Agustus", "September", "Oktober", "November", "Desember",
        ),
        long_date="{weekday}, {day} {month} {year}",
        short_date="{day}/{month_number}/{year}",
    ),
    "en_US": LocaleFormat(
        currency_prefix="IDR ",
        group_separator=",",
        weekdays=("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
        months=(
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
        long_date="{weekday}, {month} {day}, {year}",
        short_date="{month_number}/{day}/{year}",
    ),
}


def get_locale(name: Optional[str] = None) -> LocaleFormat:
    return LOCALES.get(name or settings.LOCALE, LOCALES["id_ID"])


def format_currency(amount: Number, locale: Optional[str] = None) -> str:
    fmt = get_locale(locale)
    value = round_currency(to_decimal(amount))
    sign = "-" if value < 0 else ""
    grouped = f"{abs(value):,.0f}".replace(",", fmt.group_separator)
    return f"{sign}{fmt.currency_prefix}{grouped}"


def format_percentage(value: Number) -> str:
    # 10.00 -> "10", 12.50 -> "12.5"
    pct = to_decimal(value)
    text = f"{pct:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_long_date(day: date, locale: Optional[str] = None) -> str:
    fmt = get_locale(locale)
    return fmt.long_date.format(
        weekday=fmt.weekdays[day.weekday()],
        day=day.day,
        month=fmt.months[day.month - 1],
        year=day.year,
    )


def format_short_date(day: date, locale: Optional[str] = None) -> str:
    fmt = get_locale(locale)
    return fmt.short_date.format(day=day.day, month_number=day.month, year=day.year)


def payment_label(method: str) -> str:
    return "Cash" if method == "cash" else "Transfer"


def receipt_number(transaction_id) -> str:
    return str(transaction_id)[:8].upper()
