from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import func

from firegear.models.base import Base


class CategoryInspection(Base):
    """Inspection rule covering every item of a category.

    station_id NULL means the rule applies at all stations.
    """

    __tablename__ = "category_inspections"

    id = Column(Integer, primary_key=True, index=True)
    category = Column(String(32), nullable=False, index=True)
    station_id = Column(
        Integer, ForeignKey("stations.id", ondelete="CASCADE"), nullable=True, index=True
    )
    name = Column(String(255), nullable=False)
    template_id = Column(String(100), nullable=True)
    due_date = Column(Date, nullable=False, index=True)
    last_completed = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(32), nullable=False, default="scheduled")
    notes = Column(Text, nullable=True)
    external_vendor = Column(Boolean, nullable=False, default=False)
    vendor_contact = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
