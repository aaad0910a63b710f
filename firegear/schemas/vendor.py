from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, HttpUrl, field_validator

from firegear.schemas.common import RequestModel
from firegear.services.validation import is_valid_phone


class VendorCreate(RequestModel):
    name: str = Field(min_length=1, max_length=255)
    contact_person: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, max_length=20)
    email: EmailStr | None = None
    address: str | None = Field(default=None, max_length=500)
    website: HttpUrl | None = None
    services: str | None = None
    certifications: str | None = None
    notes: str | None = None

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        if not is_valid_phone(value):
            raise ValueError("Phone must be a valid phone number")
        return value.strip()


class VendorUpdate(VendorCreate):
    name: str | None = Field(default=None, min_length=1, max_length=255)


class VendorOut(BaseModel):
    id: int
    name: str
    contact_person: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    website: str | None = None
    services: str | None = None
    certifications: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
