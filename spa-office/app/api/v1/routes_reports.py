# app/api/v1/routes_reports.py
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import CurrentUser, get_current_user
from app.db.base import get_db
from app.domain.checkout.schemas import PaymentMethod
from app.domain.reports import service as reports_service
from app.domain.reports.export import render_report_html
from app.domain.reports.schemas import DailyReport, DashboardStats, RangeReport, Receipt


router = APIRouter(prefix="/api/v1/reports", tags=["reports"])


def _method(payment_method: Optional[PaymentMethod]) -> Optional[str]:
    return payment_method.value if payment_method else None


@router.get("/receipt/{transaction_id}", response_model=Receipt)
async def receipt_endpoint(
    transaction_id: UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return await reports_service.transaction_receipt(db, user, transaction_id)


@router.get("/daily", response_model=DailyReport)
async def daily_report_endpoint(
    day: date = Query(...),
    payment_method: Optional[PaymentMethod] = Query(None),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return await reports_service.daily_report(db, user, day, _method(payment_method))


@router.get("/range", response_model=RangeReport)
async def range_report_endpoint(
    start_date: date = Query(...),
    end_date: date = Query(...),
    payment_method: Optional[PaymentMethod] = Query(None),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return await reports_service.range_report(db, user, start_date, end_date, _method(payment_method))


@router.get("/dates", response_model=List[date])
async def report_dates_endpoint(
    start_date: date = Query(...),
    end_date: date = Query(...),
    payment_method: Optional[PaymentMethod] = Query(None),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return await reports_service.available_dates(db, user, start_date, end_date, _method(payment_method))


@router.get("/dashboard", response_model=DashboardStats)
async def dashboard_endpoint(
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    return await reports_service.dashboard_stats(db, user)


@router.get("/receipt/{transaction_id}/print", response_class=HTMLResponse)
async def print_receipt_endpoint(
    transaction_id: UUID,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    report = await reports_service.transaction_receipt(db, user, transaction_id)
    return HTMLResponse(render_report_html(report))


@router.get("/daily/print", response_class=HTMLResponse)
async def print_daily_endpoint(
    day: date = Query(...),
    payment_method: Optional[PaymentMethod] = Query(None),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    report = await reports_service.daily_report(db, user, day, _method(payment_method))
    return HTMLResponse(render_report_html(report))


@router.get("/range/print", response_class=HTMLResponse)
async def print_range_endpoint(
    start_date: date = Query(...),
    end_date: date = Query(...),
    payment_method: Optional[PaymentMethod] = Query(None),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    report = await reports_service.range_report(db, user, start_date, end_date, _method(payment_method))
    return HTMLResponse(render_report_html(report))
