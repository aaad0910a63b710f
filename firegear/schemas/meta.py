from __future__ import annotations

from pydantic import BaseModel


class CategoryOption(BaseModel):
    key: str
    name: str
    items: list[str]


class StatusOption(BaseModel):
    key: str
    label: str


class InspectionTemplateOut(BaseModel):
    template_id: str
    name: str
    interval: int
    type: str
    regulation: str
    external: bool
    categories: list[str]


class DashboardSummary(BaseModel):
    total: int
    in_service: int
    out_of_service: int
    critical_inspections: int
    by_inspection_status: dict[str, int]


class HealthResponse(BaseModel):
    status: str
    env: str
    timestamp: str


class DatabaseHealthResponse(BaseModel):
    status: str
    database: str
