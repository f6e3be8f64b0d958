from sqlalchemy import Boolean, Column, Date, Index, String, DateTime, Numeric, Text, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from app.db.base import Base


class Transaction(Base):
    __tablename__ = "transactions"

    """Represents a single spa sale (receipt header).

    A transaction owns one or more line items, records who was served and how
    they paid, and stores only the final payable total. The subtotal before
    the transaction-level discount is not persisted; it is always rebuilt
    from the line items. Transactions are created once and never updated,
    only deleted as a whole.
    """

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    employee_id = Column(Uuid(as_uuid=True), nullable=True, index=True)

    service_date = Column(Date, nullable=False)
    customer_name = Column(String, nullable=False)
    customer_age = Column(String, nullable=True)
    customer_address = Column(Text, nullable=True)

    payment_method = Column(String, nullable=False)
    discount_active = Column(Boolean, nullable=False, default=False)
    discount_percentage = Column(Numeric(5, 2), nullable=True)
    # Same scale as line-item prices so an undiscounted total equals their sum
    total_amount = Column(Numeric(18, 4), nullable=False, default=0)

    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    items = relationship(
        "TransactionItem",
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by="TransactionItem.line_number",
        lazy="selectin",
    )

    __table_args__ = (
        Index("ix_transactions_service_date_payment", "service_date", "payment_method"),
    )
