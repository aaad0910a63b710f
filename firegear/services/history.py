"""Builders for equipment audit-trail entries.

Entries are plain JSON objects stored on the equipment row. They are only
ever appended; `append` returns a new list so the ORM sees the change.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from datetime import date, datetime
from typing import Any

from firegear.catalog import status_label
from firegear.utils.datetime import iso, utcnow

HistoryEntry = dict[str, Any]


def _entry(
    type_: str,
    action: str,
    details: str,
    *,
    actor: str,
    notes: str | None = None,
    at: datetime | None = None,
    **extra: Any,
) -> HistoryEntry:
    entry: HistoryEntry = {
        "id": str(uuid.uuid4()),
        "date": iso(at or utcnow()),
        "type": type_,
        "action": action,
        "user": actor,
        "details": details,
        "notes": notes or "",
    }
    entry.update({k: v for k, v in extra.items() if v is not None})
    return entry


def append(history: Sequence[HistoryEntry] | None, *entries: HistoryEntry) -> list[HistoryEntry]:
    return [*(history or []), *entries]


def equipment_created(*, status: str, notes: str | None, actor: str) -> HistoryEntry:
    return _entry(
        "created",
        "Equipment Created",
        "Equipment added to inventory",
        actor=actor,
        notes=notes,
        status=status,
    )


def equipment_updated(
    *, previous_status: str, new_status: str, notes: str | None, actor: str
) -> HistoryEntry:
    if previous_status != new_status:
        return status_changed(
            previous_status=previous_status, new_status=new_status, notes=notes, actor=actor
        )
    return _entry(
        "updated",
        "Equipment Updated",
        "Equipment information updated",
        actor=actor,
        notes=notes,
    )


def status_changed(
    *, previous_status: str, new_status: str, notes: str | None, actor: str
) -> HistoryEntry:
    return _entry(
        "status-changed",
        "Status Changed",
        f"Status changed from {status_label(previous_status)} to {status_label(new_status)}",
        actor=actor,
        notes=notes,
        previous_status=previous_status,
        new_status=new_status,
    )


def inspection_scheduled(
    *, inspection_id: int, name: str, due_date: date, actor: str
) -> HistoryEntry:
    return _entry(
        "inspection-scheduled",
        "Inspection Scheduled",
        f"{name} scheduled for {due_date.isoformat()}",
        actor=actor,
        inspection_id=inspection_id,
        next_due_date=due_date.isoformat(),
    )


def inspection_completed(
    *,
    name: str,
    completed_at: datetime,
    next_due: date | None,
    notes: str | None,
    actor: str,
    inspection_id: int | None = None,
    category_inspection_id: int | None = None,
) -> HistoryEntry:
    details = f"{name} completed"
    if next_due is not None:
        details += f"; next due {next_due.isoformat()}"
    return _entry(
        "inspection-completed",
        "Inspection Completed",
        details,
        actor=actor,
        notes=notes,
        at=completed_at,
        inspection_id=inspection_id,
        category_inspection_id=category_inspection_id,
        next_due_date=next_due.isoformat() if next_due else None,
    )


def inspection_removed(*, inspection_id: int, name: str, actor: str) -> HistoryEntry:
    return _entry(
        "inspection-removed",
        "Inspection Removed",
        f"{name} removed from the schedule",
        actor=actor,
        inspection_id=inspection_id,
    )
