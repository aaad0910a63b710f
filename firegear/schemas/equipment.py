from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from firegear.schemas.common import RequestModel


class EquipmentCreate(RequestModel):
    name: str = Field(min_length=1, max_length=255)
    serial_number: str = Field(min_length=1, max_length=100)
    manufacturer: str | None = Field(default=None, max_length=255)
    model: str | None = Field(default=None, max_length=255)
    category: str
    subcategory: str | None = Field(default=None, max_length=100)
    station_id: int
    status: str = "in-service"
    notes: str | None = None


class EquipmentUpdate(RequestModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    serial_number: str | None = Field(default=None, min_length=1, max_length=100)
    manufacturer: str | None = Field(default=None, max_length=255)
    model: str | None = Field(default=None, max_length=255)
    category: str | None = None
    subcategory: str | None = Field(default=None, max_length=100)
    station_id: int | None = None
    status: str | None = None
    notes: str | None = None


class StatusChangeRequest(RequestModel):
    status: str
    note: str = Field(min_length=1, description="reason for the change")


class HistoryEntryOut(BaseModel):
    id: str
    date: str
    type: str
    action: str
    user: str
    details: str
    notes: str = ""

    # previous_status, new_status, inspection_id, ... depending on type
    model_config = ConfigDict(extra="allow")


class InspectionStatusOut(BaseModel):
    status: Literal["past-due", "critical", "warning", "attention", "normal", "upcoming"]
    days: int = Field(description="days until due; days overdue when past-due")
    due_date: date
    inspection_id: int
    inspection_kind: Literal["individual", "category"]
    inspection_name: str


class EquipmentOut(BaseModel):
    id: int
    name: str
    serial_number: str
    manufacturer: str | None = None
    model: str | None = None
    category: str
    subcategory: str | None = None
    station_id: int
    status: str
    notes: str | None = None
    history: list[HistoryEntryOut] = Field(default_factory=list)
    inspection_status: InspectionStatusOut | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
