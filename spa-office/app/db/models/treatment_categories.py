# app/db/models/treatment_categories.py
from sqlalchemy import Column, Integer, String, DateTime, Text, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from app.db.base import Base


class TreatmentCategory(Base):
    __tablename__ = "treatment_categories"

    """Groups treatments on the public services page (baby, mom, kids...)."""

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    display_order = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    treatments = relationship("Treatment", order_by="Treatment.name", lazy="selectin")
