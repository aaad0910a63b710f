"""Individual inspections and category inspection rules."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import structlog

from firegear.catalog import InspectionTemplate, get_template
from firegear.core.exceptions import NotFoundError, ValidationError
from firegear.infra.unit_of_work import UnitOfWork
from firegear.models import CategoryInspection, Equipment, Inspection
from firegear.schemas import (
    CategoryInspectionCompletionOut,
    CategoryInspectionCreate,
    CategoryInspectionOut,
    CategoryInspectionUpdate,
    CompleteInspectionRequest,
    EquipmentOut,
    InspectionCompletionOut,
    InspectionCreate,
    InspectionOut,
    InspectionUpdate,
)
from firegear.services import history
from firegear.services.equipment import resolve_statuses
from firegear.services.mappers import (
    map_category_inspection,
    map_equipment,
    map_inspection,
)
from firegear.services.recurrence import plan_completion
from firegear.services.validation import (
    changes_from,
    require_category,
    require_open_if_recurring,
    resolve_template,
)
from firegear.utils.datetime import as_utc, utc_today, utcnow

UnitOfWorkFactory = Callable[[], UnitOfWork]

CUSTOM_INSPECTION_NAME = "Custom Inspection"

logger = structlog.get_logger(__name__)


def _defaults(
    fields: dict[str, Any], template: InspectionTemplate | None
) -> dict[str, Any]:
    """Fill name and external_vendor from the template when the client left them out."""
    if not fields.get("name"):
        fields["name"] = template.name if template else CUSTOM_INSPECTION_NAME
    if fields.get("external_vendor") is None:
        fields["external_vendor"] = template.external if template else False
    return fields


class InspectionService:
    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def list(self, *, equipment_id: int | None = None) -> list[InspectionOut]:
        async with self._uow_factory() as uow:
            ids = [equipment_id] if equipment_id is not None else None
            return [map_inspection(row) for row in await uow.inspections.list(equipment_ids=ids)]

    async def get(self, inspection_id: int) -> InspectionOut:
        async with self._uow_factory() as uow:
            return map_inspection(await self._require(uow, inspection_id))

    async def create(self, payload: InspectionCreate, *, actor: str) -> InspectionOut:
        async with self._uow_factory() as uow:
            equipment = await uow.equipment.get(payload.equipment_id)
            if equipment is None:
                raise ValidationError(
                    f"equipment {payload.equipment_id} does not exist", field="equipment_id"
                )
            template = resolve_template(payload.template_id, category=equipment.category)
            fields = _defaults(payload.model_dump(), template)
            inspection = await uow.inspections.add(**fields)

            await uow.equipment.update(
                equipment,
                history=history.append(
                    equipment.history,
                    history.inspection_scheduled(
                        inspection_id=int(inspection.id),
                        name=inspection.name,
                        due_date=inspection.due_date,
                        actor=actor,
                    ),
                ),
            )
            logger.info(
                "inspection_created",
                inspection_id=inspection.id,
                equipment_id=equipment.id,
                template_id=inspection.template_id,
            )
            return map_inspection(inspection)

    async def update(self, inspection_id: int, payload: InspectionUpdate) -> InspectionOut:
        changes = changes_from(payload, required=("name", "due_date", "status"))
        async with self._uow_factory() as uow:
            inspection = await self._require(uow, inspection_id)
            if changes.get("template_id"):
                equipment = await uow.equipment.get(inspection.equipment_id)
                resolve_template(changes["template_id"], category=equipment.category)
            require_open_if_recurring(
                changes.get("status", inspection.status),
                changes.get("template_id", inspection.template_id),
            )
            inspection = await uow.inspections.update(inspection, **changes)
            return map_inspection(inspection)

    async def delete(self, inspection_id: int, *, actor: str) -> None:
        async with self._uow_factory() as uow:
            inspection = await self._require(uow, inspection_id)
            equipment = await uow.equipment.get(inspection.equipment_id)
            if equipment is not None:
                await uow.equipment.update(
                    equipment,
                    history=history.append(
                        equipment.history,
                        history.inspection_removed(
                            inspection_id=int(inspection.id), name=inspection.name, actor=actor
                        ),
                    ),
                )
            await uow.inspections.delete(inspection)
            logger.info("inspection_deleted", inspection_id=inspection_id)

    async def complete(
        self, inspection_id: int, payload: CompleteInspectionRequest, *, actor: str
    ) -> InspectionCompletionOut:
        """Record a completion and move the inspection to its next due date."""
        completed_at = as_utc(payload.completed_at) or utcnow()
        async with self._uow_factory() as uow:
            inspection = await self._require(uow, inspection_id)
            plan = plan_completion(
                due_date=inspection.due_date,
                status=inspection.status,
                template=get_template(inspection.template_id) if inspection.template_id else None,
                completed_at=completed_at,
                explicit_next_due=payload.next_due_date,
            )
            inspection = await uow.inspections.update(
                inspection,
                due_date=plan.due_date,
                status=plan.status,
                last_completed=plan.last_completed,
            )

            equipment_ids: list[int] = []
            equipment = await uow.equipment.get(inspection.equipment_id)
            if equipment is not None:
                await uow.equipment.update(
                    equipment,
                    history=history.append(
                        equipment.history,
                        history.inspection_completed(
                            name=inspection.name,
                            completed_at=completed_at,
                            next_due=plan.due_date if plan.recurring else None,
                            notes=payload.notes,
                            actor=actor,
                            inspection_id=int(inspection.id),
                        ),
                    ),
                )
                equipment_ids.append(int(equipment.id))

            logger.info(
                "inspection_completed",
                inspection_id=inspection_id,
                recurring=plan.recurring,
                next_due_date=plan.due_date.isoformat(),
            )
            return InspectionCompletionOut(
                inspection=map_inspection(inspection),
                recurring=plan.recurring,
                next_due_date=plan.due_date if plan.recurring else None,
                equipment_ids=equipment_ids,
            )

    @staticmethod
    async def _require(uow: UnitOfWork, inspection_id: int) -> Inspection:
        inspection = await uow.inspections.get(inspection_id)
        if inspection is None:
            raise NotFoundError("Inspection not found")
        return inspection


class CategoryInspectionService:
    """Category rules apply to every item of a category, at one station or all of them."""

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def list(
        self, *, category: str | None = None, station_id: int | None = None
    ) -> list[CategoryInspectionOut]:
        async with self._uow_factory() as uow:
            rows = await uow.category_inspections.list(category=category, station_id=station_id)
            return [map_category_inspection(row) for row in rows]

    async def get(self, inspection_id: int) -> CategoryInspectionOut:
        async with self._uow_factory() as uow:
            return map_category_inspection(await self._require(uow, inspection_id))

    async def create(self, payload: CategoryInspectionCreate) -> CategoryInspectionOut:
        require_category(payload.category)
        template = resolve_template(payload.template_id, category=payload.category)
        async with self._uow_factory() as uow:
            if payload.station_id is not None:
                await self._require_station(uow, payload.station_id)
            fields = _defaults(payload.model_dump(), template)
            rule = await uow.category_inspections.add(**fields)
            logger.info(
                "category_inspection_created",
                category_inspection_id=rule.id,
                category=rule.category,
                station_id=rule.station_id,
            )
            return map_category_inspection(rule)

    async def update(
        self, inspection_id: int, payload: CategoryInspectionUpdate
    ) -> CategoryInspectionOut:
        changes = changes_from(payload, required=("name", "due_date", "status"))
        async with self._uow_factory() as uow:
            rule = await self._require(uow, inspection_id)
            if changes.get("template_id"):
                resolve_template(changes["template_id"], category=rule.category)
            require_open_if_recurring(
                changes.get("status", rule.status),
                changes.get("template_id", rule.template_id),
            )
            if changes.get("station_id") is not None:
                await self._require_station(uow, changes["station_id"])
            rule = await uow.category_inspections.update(rule, **changes)
            return map_category_inspection(rule)

    async def delete(self, inspection_id: int) -> None:
        async with self._uow_factory() as uow:
            rule = await self._require(uow, inspection_id)
            await uow.category_inspections.delete(rule)
            logger.info("category_inspection_deleted", category_inspection_id=inspection_id)

    async def matched_equipment(self, inspection_id: int) -> list[EquipmentOut]:
        async with self._uow_factory() as uow:
            rule = await self._require(uow, inspection_id)
            items = await self._matching(uow, rule)
            statuses = await resolve_statuses(uow, items, today=utc_today())
            return [map_equipment(item, statuses.get(int(item.id))) for item in items]

    async def complete(
        self, inspection_id: int, payload: CompleteInspectionRequest, *, actor: str
    ) -> CategoryInspectionCompletionOut:
        """Advance the rule and record the completion on every matching item.

        The match is taken now; equipment added later is not touched.
        """
        completed_at = as_utc(payload.completed_at) or utcnow()
        async with self._uow_factory() as uow:
            rule = await self._require(uow, inspection_id)
            plan = plan_completion(
                due_date=rule.due_date,
                status=rule.status,
                template=get_template(rule.template_id) if rule.template_id else None,
                completed_at=completed_at,
                explicit_next_due=payload.next_due_date,
            )
            rule = await uow.category_inspections.update(
                rule,
                due_date=plan.due_date,
                status=plan.status,
                last_completed=plan.last_completed,
            )

            next_due = plan.due_date if plan.recurring else None
            items = await self._matching(uow, rule)
            for item in items:
                await uow.equipment.update(
                    item,
                    history=history.append(
                        item.history,
                        history.inspection_completed(
                            name=rule.name,
                            completed_at=completed_at,
                            next_due=next_due,
                            notes=payload.notes,
                            actor=actor,
                            category_inspection_id=int(rule.id),
                        ),
                    ),
                )

            logger.info(
                "category_inspection_completed",
                category_inspection_id=inspection_id,
                equipment=len(items),
                recurring=plan.recurring,
            )
            return CategoryInspectionCompletionOut(
                inspection=map_category_inspection(rule),
                recurring=plan.recurring,
                next_due_date=next_due,
                equipment_ids=[int(item.id) for item in items],
            )

    @staticmethod
    async def _matching(uow: UnitOfWork, rule: CategoryInspection) -> list[Equipment]:
        return await uow.equipment.list_matching(
            category=rule.category, station_id=rule.station_id
        )

    @staticmethod
    async def _require(uow: UnitOfWork, inspection_id: int) -> CategoryInspection:
        rule = await uow.category_inspections.get(inspection_id)
        if rule is None:
            raise NotFoundError("Category inspection not found")
        return rule

    @staticmethod
    async def _require_station(uow: UnitOfWork, station_id: int) -> None:
        if await uow.stations.get(station_id) is None:
            raise ValidationError(f"station {station_id} does not exist", field="station_id")
