from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from firegear.schemas.common import RequestModel
from firegear.services.validation import is_valid_phone


def _check_phone(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    if not is_valid_phone(value):
        raise ValueError("Phone must be a valid phone number")
    return value.strip()


class StationCreate(RequestModel):
    name: str = Field(min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=500)
    phone: str | None = Field(default=None, max_length=20)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str | None) -> str | None:
        return _check_phone(value)


class StationUpdate(RequestModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, max_length=500)
    phone: str | None = Field(default=None, max_length=20)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str | None) -> str | None:
        return _check_phone(value)


class StationOut(BaseModel):
    id: int
    name: str
    address: str | None = None
    phone: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
