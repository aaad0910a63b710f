"""Completion of recurring inspections.

Completing an inspection never deletes it: the same row is moved forward to
its next due date and stamped with the completion time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from firegear.catalog import InspectionTemplate
from firegear.core.exceptions import ConflictError, ValidationError
from firegear.services.inspection_status import COMPLETED, SCHEDULED
from firegear.utils.datetime import add_months


@dataclass(frozen=True)
class CompletionPlan:
    due_date: date
    status: str
    last_completed: datetime
    recurring: bool


def next_due_date(due_date: date, template: InspectionTemplate) -> date:
    if template.type != "months":
        raise ValidationError(f"unsupported interval type: {template.type}")
    return add_months(due_date, template.interval)


def plan_completion(
    *,
    due_date: date,
    status: str,
    template: InspectionTemplate | None,
    completed_at: datetime,
    explicit_next_due: date | None = None,
) -> CompletionPlan:
    """Work out the post-completion state of an inspection.

    Template present: due date advances by the template interval.
    No template: an explicit next due date makes it recur on that date,
    otherwise it is a one-off and is closed with its due date unchanged.
    """
    if status == COMPLETED:
        raise ConflictError("inspection already completed")

    if template is not None:
        return CompletionPlan(
            due_date=next_due_date(due_date, template),
            status=SCHEDULED,
            last_completed=completed_at,
            recurring=True,
        )

    if explicit_next_due is not None:
        if explicit_next_due <= due_date:
            raise ValidationError(
                "next_due_date must be after the current due date", field="next_due_date"
            )
        return CompletionPlan(
            due_date=explicit_next_due,
            status=SCHEDULED,
            last_completed=completed_at,
            recurring=True,
        )

    return CompletionPlan(
        due_date=due_date,
        status=COMPLETED,
        last_completed=completed_at,
        recurring=False,
    )
