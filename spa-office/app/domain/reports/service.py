# app/domain/reports/service.py
import logging
from datetime import date
from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, PermissionDeniedError
from app.core.security import CurrentUser
from app.db.models.transactions import Transaction
from app.db.repositories import transactions as transactions_repo
from .formatting import format_currency
from .projector import build_daily_report, build_range_report, build_receipt, report_dates, sum_totals
from .schemas import DailyReport, DashboardStats, RangeReport, Receipt

logger = logging.getLogger(__name__)


def _scope(user: CurrentUser) -> Optional[UUID]:
    # Admins see every employee's sales, employees only their own
    return None if user.is_admin else user.id


async def fetch_transactions(
    db: AsyncSession,
    user: CurrentUser,
    start_date: date,
    end_date: date,
    payment_method: Optional[str] = None,
) -> List[Transaction]:
    return await transactions_repo.list_transactions(
        db,
        start_date=start_date,
        end_date=end_date,
        payment_method=payment_method,
        employee_id=_scope(user),
    )


async def transaction_receipt(
    db: AsyncSession,
    user: CurrentUser,
    transaction_id: UUID,
) -> Receipt:
    txn = await transactions_repo.get_transaction_by_id(db, transaction_id)
    if txn is None:
        raise NotFoundError("Transaction not found")
    if not user.is_admin and txn.employee_id != user.id:
        raise PermissionDeniedError("Transaction belongs to another employee")
    return build_receipt(txn)


async def daily_report(
    db: AsyncSession,
    user: CurrentUser,
    day: date,
    payment_method: Optional[str] = None,
) -> DailyReport:
    transactions = await fetch_transactions(db, user, day, day, payment_method)
    report = build_daily_report(transactions, day)
    logger.info("Daily report %s for %s: %d transaction(s)", day, user.id, report.count)
    return report


async def range_report(
    db: AsyncSession,
    user: CurrentUser,
    start_date: date,
    end_date: date,
    payment_method: Optional[str] = None,
) -> RangeReport:
    transactions = await fetch_transactions(db, user, start_date, end_date, payment_method)
    report = build_range_report(transactions, start_date, end_date)
    logger.info(
        "Range report %s..%s for %s: %d transaction(s)",
        start_date, end_date, user.id, report.count,
    )
    return report


async def dashboard_stats(
    db: AsyncSession,
    user: CurrentUser,
    today: Optional[date] = None,
) -> DashboardStats:
    today = today or date.today()
    month_start = today.replace(day=1)

    total_count = await transactions_repo.count_transactions(db, employee_id=_scope(user))
    month_transactions = await transactions_repo.list_transactions(
        db,
        start_date=month_start,
        end_date=today,
        employee_id=_scope(user),
    )
    today_transactions = [tx for tx in month_transactions if tx.service_date == today]

    today_revenue = sum_totals(today_transactions)
    month_revenue = sum_totals(month_transactions)
    return DashboardStats(
        total_transactions=total_count,
        today_transactions=len(today_transactions),
        today_revenue=today_revenue,
        month_revenue=month_revenue,
        today_revenue_display=format_currency(today_revenue),
        month_revenue_display=format_currency(month_revenue),
    )


async def available_dates(
    db: AsyncSession,
    user: CurrentUser,
    start_date: date,
    end_date: date,
    payment_method: Optional[str] = None,
) -> List[date]:
    """Dates with at least one sale, newest first, for picking a daily export."""
    transactions = await fetch_transactions(db, user, start_date, end_date, payment_method)
    return report_dates(transactions)
