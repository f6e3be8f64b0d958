# app/domain/reports/schemas.py
from datetime import date
from decimal import Decimal
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel


class ReceiptLine(BaseModel):
    treatment_name: str
    unit_price: Decimal
    quantity: int
    line_total: Decimal
    line_total_display: str


class Receipt(BaseModel):
    mode: Literal["single"] = "single"
    shop_name: str
    shop_whatsapp: str
    transaction_id: UUID
    receipt_number: str
    service_date: date
    service_date_display: str
    customer_name: str
    customer_age: Optional[str] = None
    customer_address: Optional[str] = None
    payment_method: str
    payment_label: str
    lines: List[ReceiptLine]
    subtotal: Decimal
    subtotal_display: str
    show_discount: bool
    discount_percentage: Optional[Decimal] = None
    discount_percentage_display: Optional[str] = None
    discount_amount: Decimal
    discount_amount_display: str
    total_amount: Decimal
    total_display: str
    notes: Optional[str] = None


class ReportRow(BaseModel):
    number: int
    transaction_id: UUID
    service_date: date
    service_date_display: str
    customer_name: str
    customer_age: Optional[str] = None
    customer_address: str
    treatments: str
    payment_method: str
    payment_label: str
    notes: str
    total_amount: Decimal
    total_display: str


class PaymentTotals(BaseModel):
    total: Decimal
    cash: Decimal
    transfer: Decimal


class DailyReport(BaseModel):
    mode: Literal["daily"] = "daily"
    shop_name: str
    day: date
    day_display: str
    rows: List[ReportRow]
    day_total: Decimal
    day_total_display: str
    count: int


class RangeReport(BaseModel):
    mode: Literal["all"] = "all"
    shop_name: str
    start_date: date
    end_date: date
    period_display: str
    rows: List[ReportRow]
    totals: PaymentTotals
    total_display: str
    cash_display: str
    transfer_display: str
    count: int


class DashboardStats(BaseModel):
    total_transactions: int
    today_transactions: int
    today_revenue: Decimal
    month_revenue: Decimal
    today_revenue_display: str
    month_revenue_display: str
