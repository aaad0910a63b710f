# firegear/utils/datetime.py
from __future__ import annotations

from datetime import UTC, date, datetime

from dateutil.relativedelta import relativedelta


def utcnow() -> datetime:
    return datetime.now(UTC)


def utc_today() -> date:
    return utcnow().date()


def as_utc(dt: datetime | None) -> datetime | None:
    """Attach UTC to naive values (SQLite drops tzinfo) and normalise aware ones."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def add_months(value: date, months: int) -> date:
    """Calendar-month addition; the day is clamped to the end of the target month."""
    return value + relativedelta(months=months)


def days_until(due: date, today: date) -> int:
    return (due - today).days


def iso(dt: datetime | date | None) -> str | None:
    if dt is None:
        return None
    if isinstance(dt, datetime):
        dt = as_utc(dt)
    return dt.isoformat()
