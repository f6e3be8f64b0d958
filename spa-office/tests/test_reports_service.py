from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from app.core.errors import NotFoundError, PermissionDeniedError
from app.domain.checkout.schemas import PaymentMethod, SelectedTreatment, TransactionCreate
from app.domain.checkout.service import create_transaction
from app.domain.reports import service as reports_service


async def sell(db, user, treatment, day, method=PaymentMethod.CASH, **overrides):
    values = dict(
        service_date=day,
        customer_name="Ibu Sari",
        payment_method=method,
        treatments=[SelectedTreatment(treatment_id=treatment.id)],
    )
    values.update(overrides)
    txn, _ = await create_transaction(db, TransactionCreate(**values), user)
    return txn


@pytest.fixture
async def catalog(make_treatment):
    return {
        "massage": await make_treatment("Baby Massage", 50000),
        "swim": await make_treatment("Baby Swim", 30000),
        "spa": await make_treatment("Mom Spa", 20000),
    }


async def test_range_report_splits_by_payment_method(db, admin, catalog):
    await sell(db, admin, catalog["massage"], date(2024, 1, 3))
    await sell(db, admin, catalog["swim"], date(2024, 1, 4), PaymentMethod.TRANSFER)
    await sell(db, admin, catalog["spa"], date(2024, 1, 5))
    await sell(db, admin, catalog["massage"], date(2024, 2, 1))

    report = await reports_service.range_report(db, admin, date(2024, 1, 1), date(2024, 1, 31))

    assert report.count == 3
    assert report.totals.total == Decimal("100000")
    assert report.totals.cash == Decimal("70000")
    assert report.totals.transfer == Decimal("30000")
    assert [row.service_date for row in report.rows] == [
        date(2024, 1, 5), date(2024, 1, 4), date(2024, 1, 3),
    ]


async def test_range_report_filters_payment_method(db, admin, catalog):
    await sell(db, admin, catalog["massage"], date(2024, 1, 3))
    await sell(db, admin, catalog["swim"], date(2024, 1, 4), PaymentMethod.TRANSFER)

    report = await reports_service.range_report(
        db, admin, date(2024, 1, 1), date(2024, 1, 31), payment_method="transfer"
    )

    assert report.count == 1
    assert report.totals.transfer == Decimal("30000")
    assert report.totals.cash == 0


async def test_daily_report_counts_one_day(db, admin, catalog):
    day = date(2024, 1, 5)
    await sell(db, admin, catalog["massage"], day)
    await sell(
        db, admin, catalog["massage"], day,
        discount_active=True, discount_percentage=Decimal("50"),
    )
    await sell(db, admin, catalog["swim"], date(2024, 1, 6))

    report = await reports_service.daily_report(db, admin, day)

    assert report.count == 2
    assert report.day_total == Decimal("75000")
    assert report.day_total_display == "Rp75.000"


async def test_employee_reports_only_include_own_sales(db, admin, employee, catalog):
    day = date(2024, 1, 5)
    await sell(db, employee, catalog["massage"], day)
    await sell(db, admin, catalog["swim"], day)

    own = await reports_service.range_report(db, employee, day, day)
    everything = await reports_service.range_report(db, admin, day, day)

    assert own.count == 1
    assert own.totals.total == Decimal("50000")
    assert everything.count == 2


async def test_receipt_is_projected_from_stored_items(db, employee, catalog):
    txn = await sell(
        db, employee, catalog["massage"], date(2024, 1, 5),
        discount_active=True, discount_percentage=Decimal("10"),
    )
    db.expunge_all()

    receipt = await reports_service.transaction_receipt(db, employee, txn.id)

    assert receipt.subtotal == Decimal("50000")
    assert receipt.discount_amount == Decimal("5000")
    assert receipt.total_amount == Decimal("45000")
    assert receipt.show_discount is True


async def test_receipt_of_missing_transaction(db, admin):
    with pytest.raises(NotFoundError):
        await reports_service.transaction_receipt(db, admin, uuid4())


async def test_employee_cannot_read_someone_elses_receipt(db, admin, employee, catalog):
    txn = await sell(db, admin, catalog["massage"], date(2024, 1, 5))
    with pytest.raises(PermissionDeniedError):
        await reports_service.transaction_receipt(db, employee, txn.id)


async def test_dashboard_stats(db, admin, employee, catalog):
    today = date(2024, 3, 15)
    await sell(db, employee, catalog["massage"], today)
    await sell(db, employee, catalog["swim"], date(2024, 3, 2))
    await sell(db, employee, catalog["spa"], date(2024, 2, 28))
    await sell(db, admin, catalog["spa"], today)

    stats = await reports_service.dashboard_stats(db, employee, today=today)
    assert stats.total_transactions == 3
    assert stats.today_transactions == 1
    assert stats.today_revenue == Decimal("50000")
    assert stats.month_revenue == Decimal("80000")
    assert stats.month_revenue_display == "Rp80.000"

    overall = await reports_service.dashboard_stats(db, admin, today=today)
    assert overall.total_transactions == 4
    assert overall.today_revenue == Decimal("70000")


async def test_available_dates_newest_first(db, admin, catalog):
    await sell(db, admin, catalog["massage"], date(2024, 1, 3))
    await sell(db, admin, catalog["swim"], date(2024, 1, 5))
    await sell(db, admin, catalog["spa"], date(2024, 1, 3))

    dates = await reports_service.available_dates(db, admin, date(2024, 1, 1), date(2024, 1, 31))
    assert dates == [date(2024, 1, 5), date(2024, 1, 3)]
