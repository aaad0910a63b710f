from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from firegear.models.base import Base


class Inspection(Base):
    """Inspection scheduled against one specific piece of equipment."""

    __tablename__ = "inspections"

    id = Column(Integer, primary_key=True, index=True)
    equipment_id = Column(
        Integer, ForeignKey("equipment.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    template_id = Column(String(100), nullable=True)
    due_date = Column(Date, nullable=False, index=True)
    last_completed = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(32), nullable=False, default="scheduled", index=True)
    notes = Column(Text, nullable=True)
    external_vendor = Column(Boolean, nullable=False, default=False)
    vendor_contact = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
