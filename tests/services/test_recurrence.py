from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from firegear.catalog import get_template
from firegear.core.exceptions import ConflictError, ValidationError
from firegear.services.recurrence import next_due_date, plan_completion
from firegear.utils.datetime import add_months

NOW = datetime(2024, 1, 20, 9, 30, tzinfo=UTC)


def test_annual_template_advances_twelve_months():
    hose = get_template("hose-annual")
    assert next_due_date(date(2024, 1, 15), hose) == date(2025, 1, 15)


def test_month_end_is_clamped():
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)


def test_template_completion_reschedules():
    plan = plan_completion(
        due_date=date(2024, 1, 15),
        status="scheduled",
        template=get_template("scba-annual-flow"),
        completed_at=NOW,
    )
    assert plan.recurring is True
    assert plan.status == "scheduled"
    assert plan.due_date == date(2025, 1, 15)
    assert plan.last_completed == NOW


def test_one_off_completion_closes_inspection():
    plan = plan_completion(
        due_date=date(2024, 1, 15), status="scheduled", template=None, completed_at=NOW
    )
    assert plan.recurring is False
    assert plan.status == "completed"
    assert plan.due_date == date(2024, 1, 15)


def test_explicit_next_due_makes_custom_inspection_recur():
    plan = plan_completion(
        due_date=date(2024, 1, 15),
        status="scheduled",
        template=None,
        completed_at=NOW,
        explicit_next_due=date(2024, 7, 15),
    )
    assert plan.recurring is True
    assert plan.due_date == date(2024, 7, 15)


def test_explicit_next_due_must_move_forward():
    with pytest.raises(ValidationError):
        plan_completion(
            due_date=date(2024, 1, 15),
            status="scheduled",
            template=None,
            completed_at=NOW,
            explicit_next_due=date(2024, 1, 15),
        )


def test_completed_one_off_cannot_be_completed_again():
    with pytest.raises(ConflictError):
        plan_completion(
            due_date=date(2024, 1, 15), status="completed", template=None, completed_at=NOW
        )
