from __future__ import annotations

from datetime import date, timedelta

import pytest

from firegear.services.inspection_status import (
    CategoryRule,
    EquipmentRef,
    IndividualInspection,
    Severity,
    StationScope,
    matching_equipment,
    resolve_status,
    severity_for,
)

TODAY = date(2024, 6, 1)
SCBA = EquipmentRef(id=1, category="breathing", station_id=10)


def _individual(days: int, *, id_: int = 1, equipment_id: int = 1, status: str = "scheduled"):
    return IndividualInspection(
        id=id_,
        equipment_id=equipment_id,
        name=f"inspection {id_}",
        due_date=TODAY + timedelta(days=days),
        status=status,
    )


def _rule(days: int, *, id_: int = 100, category: str = "breathing", station_id: int | None = None):
    scope = StationScope.all() if station_id is None else StationScope.only(station_id)
    return CategoryRule(
        id=id_,
        category=category,
        scope=scope,
        name=f"rule {id_}",
        due_date=TODAY + timedelta(days=days),
    )


@pytest.mark.parametrize(
    ("days", "expected"),
    [
        (-1, Severity.past_due),
        (0, Severity.critical),
        (3, Severity.critical),
        (4, Severity.warning),
        (7, Severity.warning),
        (8, Severity.attention),
        (14, Severity.attention),
        (15, Severity.normal),
        (30, Severity.normal),
        (31, Severity.upcoming),
    ],
)
def test_bucket_boundaries(days, expected):
    assert severity_for(days) is expected


def test_no_inspections_resolves_to_none():
    assert resolve_status(SCBA, [], [], today=TODAY) is None


def test_due_in_five_days_is_warning():
    result = resolve_status(SCBA, [_individual(5)], [], today=TODAY)
    assert result is not None
    assert result.status is Severity.warning
    assert result.days == 5


def test_past_due_reports_days_overdue():
    result = resolve_status(SCBA, [_individual(-2)], [], today=TODAY)
    assert result.status is Severity.past_due
    assert result.days == 2


def test_earliest_due_date_wins_across_sources():
    result = resolve_status(
        SCBA,
        [_individual(20, id_=1)],
        [_rule(2, id_=7)],
        today=TODAY,
    )
    assert result.status is Severity.critical
    assert result.source.kind == "category"
    assert result.source.id == 7


def test_tie_prefers_individual_inspection():
    result = resolve_status(SCBA, [_individual(10, id_=3)], [_rule(10, id_=9)], today=TODAY)
    assert result.source.kind == "individual"
    assert result.source.id == 3


def test_other_equipment_inspections_are_ignored():
    result = resolve_status(SCBA, [_individual(1, equipment_id=99)], [], today=TODAY)
    assert result is None


def test_rule_for_other_category_does_not_apply():
    assert resolve_status(SCBA, [], [_rule(1, category="hose")], today=TODAY) is None


def test_station_scoped_rule_only_covers_that_station():
    assert resolve_status(SCBA, [], [_rule(1, station_id=11)], today=TODAY) is None
    result = resolve_status(SCBA, [], [_rule(1, station_id=10)], today=TODAY)
    assert result.status is Severity.critical


def test_completed_one_off_is_not_a_candidate():
    result = resolve_status(
        SCBA,
        [_individual(-30, id_=1, status="completed"), _individual(40, id_=2)],
        [],
        today=TODAY,
    )
    assert result.status is Severity.upcoming
    assert result.source.id == 2


def test_matching_equipment_respects_category_and_scope():
    fleet = [
        EquipmentRef(id=1, category="breathing", station_id=10),
        EquipmentRef(id=2, category="breathing", station_id=11),
        EquipmentRef(id=3, category="hose", station_id=10),
    ]
    assert [e.id for e in matching_equipment(_rule(0), fleet)] == [1, 2]
    assert [e.id for e in matching_equipment(_rule(0, station_id=11), fleet)] == [2]
