"""Inspection status resolution.

An equipment item's inspection status is never stored. It is derived from the
nearest-due inspection among the item's own inspections and every category
rule that covers it, then bucketed by how many days remain.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Literal

from firegear.utils.datetime import days_until

COMPLETED = "completed"
SCHEDULED = "scheduled"


class Severity(str, Enum):
    past_due = "past-due"
    critical = "critical"
    warning = "warning"
    attention = "attention"
    normal = "normal"
    upcoming = "upcoming"


# (upper bound inclusive, bucket); anything past the last bound is "upcoming"
_BUCKETS: tuple[tuple[int, Severity], ...] = (
    (3, Severity.critical),
    (7, Severity.warning),
    (14, Severity.attention),
    (30, Severity.normal),
)


def severity_for(days_until_due: int) -> Severity:
    if days_until_due < 0:
        return Severity.past_due
    for upper, bucket in _BUCKETS:
        if days_until_due <= upper:
            return bucket
    return Severity.upcoming


@dataclass(frozen=True)
class StationScope:
    """Which stations a category rule covers. station_id None means all of them."""

    station_id: int | None = None

    @classmethod
    def all(cls) -> StationScope:
        return cls(None)

    @classmethod
    def only(cls, station_id: int) -> StationScope:
        return cls(station_id)

    @property
    def all_stations(self) -> bool:
        return self.station_id is None

    def covers(self, station_id: int | None) -> bool:
        return self.all_stations or self.station_id == station_id


@dataclass(frozen=True)
class EquipmentRef:
    id: int
    category: str
    station_id: int | None


@dataclass(frozen=True)
class IndividualInspection:
    id: int
    equipment_id: int
    name: str
    due_date: date
    template_id: str | None = None
    status: str = SCHEDULED
    kind: Literal["individual"] = "individual"

    def applies_to(self, equipment: EquipmentRef) -> bool:
        return self.equipment_id == equipment.id


@dataclass(frozen=True)
class CategoryRule:
    id: int
    category: str
    scope: StationScope
    name: str
    due_date: date
    template_id: str | None = None
    status: str = SCHEDULED
    kind: Literal["category"] = "category"

    def applies_to(self, equipment: EquipmentRef) -> bool:
        return self.category == equipment.category and self.scope.covers(equipment.station_id)


InspectionCandidate = IndividualInspection | CategoryRule


@dataclass(frozen=True)
class InspectionStatus:
    status: Severity
    days: int
    due_date: date
    source: InspectionCandidate


def is_open(candidate: InspectionCandidate) -> bool:
    """Completed one-off inspections are no longer due."""
    return candidate.status != COMPLETED


def evaluate(candidate: InspectionCandidate, *, today: date) -> InspectionStatus:
    """Bucket a single inspection. days is the absolute distance for past-due."""
    delta = days_until(candidate.due_date, today)
    return InspectionStatus(
        status=severity_for(delta),
        days=abs(delta),
        due_date=candidate.due_date,
        source=candidate,
    )


def matching_equipment(rule: CategoryRule, equipment: Iterable[EquipmentRef]) -> list[EquipmentRef]:
    return [item for item in equipment if rule.applies_to(item)]


def applicable_inspections(
    equipment: EquipmentRef,
    inspections: Iterable[IndividualInspection],
    rules: Iterable[CategoryRule],
) -> list[InspectionCandidate]:
    individual = [i for i in inspections if i.applies_to(equipment)]
    by_rule = [r for r in rules if r.applies_to(equipment)]
    return [c for c in (*individual, *by_rule) if is_open(c)]


def resolve_status(
    equipment: EquipmentRef,
    inspections: Iterable[IndividualInspection],
    rules: Iterable[CategoryRule],
    *,
    today: date,
) -> InspectionStatus | None:
    candidates = applicable_inspections(equipment, inspections, rules)
    if not candidates:
        return None
    # min() keeps the first of equal due dates, so individual inspections win ties
    nearest = min(candidates, key=lambda c: c.due_date)
    return evaluate(nearest, today=today)


__all__ = [
    "Severity",
    "severity_for",
    "StationScope",
    "EquipmentRef",
    "IndividualInspection",
    "CategoryRule",
    "InspectionCandidate",
    "InspectionStatus",
    "is_open",
    "evaluate",
    "matching_equipment",
    "applicable_inspections",
    "resolve_status",
]
