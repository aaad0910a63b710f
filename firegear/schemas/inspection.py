from __future__ import annotations

from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from firegear.schemas.common import RequestModel

InspectionState = Literal["scheduled", "completed"]


class InspectionCreate(RequestModel):
    equipment_id: int
    name: str | None = Field(default=None, max_length=255)
    template_id: str | None = None
    due_date: date
    notes: str | None = None
    external_vendor: bool | None = None
    vendor_contact: str | None = Field(default=None, max_length=255)


class InspectionUpdate(RequestModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    template_id: str | None = None
    due_date: date | None = None
    last_completed: datetime | None = None
    status: InspectionState | None = None
    notes: str | None = None
    external_vendor: bool | None = None
    vendor_contact: str | None = Field(default=None, max_length=255)


class CategoryInspectionCreate(RequestModel):
    category: str
    station_id: int | None = Field(default=None, description="omit for all stations")
    name: str | None = Field(default=None, max_length=255)
    template_id: str | None = None
    due_date: date
    notes: str | None = None
    external_vendor: bool | None = None
    vendor_contact: str | None = Field(default=None, max_length=255)


class CategoryInspectionUpdate(RequestModel):
    station_id: int | None = None
    name: str | None = Field(default=None, min_length=1, max_length=255)
    template_id: str | None = None
    due_date: date | None = None
    last_completed: datetime | None = None
    status: InspectionState | None = None
    notes: str | None = None
    external_vendor: bool | None = None
    vendor_contact: str | None = Field(default=None, max_length=255)


class CompleteInspectionRequest(RequestModel):
    completed_at: datetime | None = None
    notes: str | None = None
    next_due_date: date | None = Field(
        default=None, description="next due date for inspections without a template"
    )


class _InspectionFields(BaseModel):
    id: int
    name: str
    template_id: str | None = None
    due_date: date
    last_completed: datetime | None = None
    status: str
    notes: str | None = None
    external_vendor: bool = False
    vendor_contact: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class InspectionOut(_InspectionFields):
    equipment_id: int


class CategoryInspectionOut(_InspectionFields):
    category: str
    station_id: int | None = None
    all_stations: bool


class InspectionCompletionOut(BaseModel):
    inspection: InspectionOut
    recurring: bool
    next_due_date: date | None = None
    equipment_ids: list[int]


class CategoryInspectionCompletionOut(BaseModel):
    inspection: CategoryInspectionOut
    recurring: bool
    next_due_date: date | None = None
    equipment_ids: list[int] = Field(description="equipment that received a history entry")


class ScheduleItem(BaseModel):
    kind: Literal["individual", "category"]
    id: int
    name: str
    template_id: str | None = None
    due_date: date
    status: Literal["past-due", "critical", "warning", "attention", "normal", "upcoming"]
    days: int
    completable: bool = Field(description="due within the completion window")
    equipment_id: int | None = None
    category: str | None = None
    station_id: int | None = None


class ScheduleResponse(BaseModel):
    items: list[ScheduleItem]
