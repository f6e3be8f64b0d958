# app/domain/catalog/schemas.py
from decimal import Decimal
from pydantic import BaseModel, Field
from uuid import UUID
from typing import List, Optional


class TreatmentCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    category_id: Optional[UUID] = None
    price: Decimal = Field(ge=0, decimal_places=0)
    discount_active: bool = False
    discount_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100, decimal_places=2)
    is_active: bool = True


class TreatmentUpdate(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = None
    category_id: Optional[UUID] = None
    price: Optional[Decimal] = Field(default=None, ge=0, decimal_places=0)
    discount_active: Optional[bool] = None
    discount_percentage: Optional[Decimal] = Field(default=None, ge=0, le=100, decimal_places=2)
    is_active: Optional[bool] = None


class TreatmentOut(BaseModel):
    id: UUID
    name: str
    description: Optional[str]
    image_url: Optional[str]
    category_id: Optional[UUID]
    price: Decimal
    discount_active: bool
    discount_percentage: Optional[Decimal]
    is_active: bool
    effective_price: Decimal


class CategoryOut(BaseModel):
    id: UUID
    name: str
    description: Optional[str]
    display_order: int
    treatments: List[TreatmentOut]
