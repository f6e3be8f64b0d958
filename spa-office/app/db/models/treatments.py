# app/db/models/treatments.py
from sqlalchemy import Boolean, Column, ForeignKey, Numeric, String, DateTime, Text, Uuid
from sqlalchemy.sql import func
import uuid

from app.db.base import Base


class Treatment(Base):
    __tablename__ = "treatments"

    """Represents a sellable spa treatment in the catalog.

    Holds the base price and an optional treatment-level percentage discount.
    Transactions never point back at a live treatment for pricing: line items
    copy the name and effective price at the moment of sale, so editing or
    deleting a treatment leaves history untouched.
    """

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    category_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("treatment_categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    image_url = Column(String, nullable=True)

    # Whole rupiah; line items need four places for two-decimal discounts
    price = Column(Numeric(18, 2), nullable=False)
    discount_active = Column(Boolean, nullable=False, default=False)
    discount_percentage = Column(Numeric(5, 2), nullable=True)

    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

