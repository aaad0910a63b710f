"""Business rules shared by the CRUD services."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel

from firegear.catalog import (
    IN_SERVICE,
    InspectionTemplate,
    get_template,
    is_known_category,
    is_known_status,
)
from firegear.core.exceptions import ValidationError
from firegear.services.inspection_status import COMPLETED

SERIAL_NUMBER_RE = re.compile(r"[A-Za-z0-9 _-]+")
_PHONE_STRIP_RE = re.compile(r"[\s\-()]")
_PHONE_RE = re.compile(r"^\+?\d{10,15}$")


def normalize_serial_number(serial_number: str) -> str:
    value = (serial_number or "").strip()
    if not value:
        raise ValidationError("Serial number is required", field="serial_number")
    if not SERIAL_NUMBER_RE.fullmatch(value):
        raise ValidationError(
            "Serial number can only contain letters, numbers, spaces, dashes, and underscores",
            field="serial_number",
        )
    return value


def is_valid_phone(phone: str) -> bool:
    return bool(_PHONE_RE.match(_PHONE_STRIP_RE.sub("", phone)))


def require_category(category: str) -> None:
    if not is_known_category(category):
        raise ValidationError(f"unknown equipment category: {category}", field="category")


def require_status(status: str) -> None:
    if not is_known_status(status):
        raise ValidationError(f"unknown equipment status: {status}", field="status")


def require_note_for_status(status: str, notes: str | None) -> None:
    """Equipment that is not in service must say why."""
    if status != IN_SERVICE and not (notes or "").strip():
        raise ValidationError(
            "A note is required when equipment is not in service", field="notes"
        )


def resolve_template(template_id: str | None, *, category: str) -> InspectionTemplate | None:
    if not template_id:
        return None
    template = get_template(template_id)
    if template is None:
        raise ValidationError(f"unknown inspection template: {template_id}", field="template_id")
    if not template.applies_to(category):
        raise ValidationError(
            f"template {template_id} does not apply to category {category}",
            field="template_id",
        )
    return template


def require_open_if_recurring(status: str | None, template_id: str | None) -> None:
    """Template-driven inspections only move forward through completion, never close."""
    if status == COMPLETED and template_id:
        raise ValidationError(
            "Recurring inspections are completed through the complete action", field="status"
        )


def changes_from(
    payload: BaseModel, *, required: Iterable[str] = (), mode: str = "python"
) -> dict[str, Any]:
    """Fields the client actually sent; required columns may not be nulled."""
    data = payload.model_dump(exclude_unset=True, mode=mode)
    for key in required:
        if key in data and data[key] is None:
            raise ValidationError(f"{key} cannot be null", field=key)
    return data
