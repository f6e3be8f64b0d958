from sqlalchemy import Column, ForeignKey, Index, Integer, Numeric, String, Uuid
from sqlalchemy.orm import relationship
import uuid

from app.db.base import Base


class TransactionItem(Base):
    __tablename__ = "transaction_items"

    """Represents a single treatment line within a transaction.

    A line item snapshots the treatment name and its effective unit price
    (after the treatment's own discount, before any transaction discount)
    at the time of sale, so receipts and reports do not depend on the
    mutable catalog. ``treatment_id`` is kept for traceability only.
    """

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    transaction_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("transactions.id", ondelete="CASCADE"),
        nullable=False,
    )
    treatment_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("treatments.id", ondelete="SET NULL"),
        nullable=True,
    )
    line_number = Column(Integer, nullable=False)

    treatment_name = Column(String, nullable=False)
    # Four places keep whole-rupiah prices with two-decimal discounts exact
    price = Column(Numeric(18, 4), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    transaction = relationship("Transaction", back_populates="items")

    __table_args__ = (
        Index("ix_transaction_items_transaction_line", "transaction_id", "line_number", unique=True),
    )
