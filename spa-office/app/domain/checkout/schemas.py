# app/domain/checkout/schemas.py
import enum
from datetime import date, datetime
from decimal import Decimal
from pydantic import BaseModel, Field
from uuid import UUID
from typing import List, Optional

from app.domain.reports.schemas import Receipt


class PaymentMethod(str, enum.Enum):
    CASH = "cash"
    TRANSFER = "transfer"


class SelectedTreatment(BaseModel):
    treatment_id: UUID
    quantity: int = Field(default=1, ge=1)


class TransactionCreate(BaseModel):
    service_date: date = Field(default_factory=date.today)
    customer_name: str = ""
    customer_age: Optional[str] = None
    customer_address: Optional[str] = None
    payment_method: Optional[PaymentMethod] = None
    treatments: List[SelectedTreatment] = Field(default_factory=list)
    discount_active: bool = False
    discount_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100, decimal_places=2)
    notes: Optional[str] = None


class LineItemOut(BaseModel):
    id: UUID
    treatment_id: Optional[UUID]
    treatment_name: str
    quantity: int
    price: Decimal

    class Config:
        from_attributes = True


class TransactionOut(BaseModel):
    id: UUID
    employee_id: Optional[UUID]
    service_date: date
    customer_name: str
    customer_age: Optional[str]
    customer_address: Optional[str]
    payment_method: str
    discount_active: bool
    discount_percentage: Optional[Decimal]
    total_amount: Decimal
    notes: Optional[str]
    created_at: datetime
    items: List[LineItemOut]

    class Config:
        from_attributes = True


class TransactionCreated(BaseModel):
    transaction: TransactionOut
    receipt: Receipt
