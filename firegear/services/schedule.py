"""Read-only views over the inspection schedule: upcoming work and dashboard counts."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

from firegear.catalog import IN_SERVICE, OUT_OF_SERVICE
from firegear.infra.unit_of_work import UnitOfWork
from firegear.schemas import ScheduleItem, ScheduleResponse
from firegear.schemas.meta import DashboardSummary
from firegear.services.equipment import resolve_statuses
from firegear.services.inspection_status import (
    CategoryRule,
    IndividualInspection,
    Severity,
    evaluate,
    is_open,
)
from firegear.services.mappers import to_individual, to_rule
from firegear.utils.datetime import days_until, utc_today

UnitOfWorkFactory = Callable[[], UnitOfWork]

# inspections due within this many days may be signed off
COMPLETION_WINDOW_DAYS = 30
NO_INSPECTION = "none"


def schedule_item(candidate: IndividualInspection | CategoryRule, *, today: date) -> ScheduleItem:
    result = evaluate(candidate, today=today)
    item = ScheduleItem(
        kind=candidate.kind,
        id=candidate.id,
        name=candidate.name,
        template_id=candidate.template_id,
        due_date=candidate.due_date,
        status=result.status.value,
        days=result.days,
        completable=days_until(candidate.due_date, today) <= COMPLETION_WINDOW_DAYS,
    )
    if isinstance(candidate, IndividualInspection):
        item.equipment_id = candidate.equipment_id
    else:
        item.category = candidate.category
        item.station_id = candidate.scope.station_id
    return item


class ScheduleService:
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def upcoming(self, *, within_days: int | None = None) -> ScheduleResponse:
        """Open inspections ordered by due date; past-due work is always listed."""
        today = utc_today()
        async with self._uow_factory() as uow:
            candidates: list[IndividualInspection | CategoryRule] = [
                to_individual(row) for row in await uow.inspections.list()
            ]
            candidates.extend(to_rule(row) for row in await uow.category_inspections.list())

        open_ = [c for c in candidates if is_open(c)]
        if within_days is not None:
            open_ = [c for c in open_ if days_until(c.due_date, today) <= within_days]
        open_.sort(key=lambda c: (c.due_date, c.kind != "individual", c.id))
        return ScheduleResponse(items=[schedule_item(c, today=today) for c in open_])

    async def dashboard(self) -> DashboardSummary:
        async with self._uow_factory() as uow:
            items = await uow.equipment.list()
            statuses = await resolve_statuses(uow, items, today=utc_today())

        buckets = {severity.value: 0 for severity in Severity}
        buckets[NO_INSPECTION] = 0
        for result in statuses.values():
            buckets[result.status.value if result else NO_INSPECTION] += 1

        in_service = sum(1 for item in items if item.status == IN_SERVICE)
        # repair, training and missing gear are neither in nor out of service
        out_of_service = sum(1 for item in items if item.status == OUT_OF_SERVICE)
        return DashboardSummary(
            total=len(items),
            in_service=in_service,
            out_of_service=out_of_service,
            critical_inspections=buckets[Severity.past_due.value] + buckets[Severity.critical.value],
            by_inspection_status=buckets,
        )
