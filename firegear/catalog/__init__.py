"""Static reference data: equipment categories, statuses and inspection templates."""

from .categories import EQUIPMENT_CATEGORIES, CategoryInfo, is_known_category
from .statuses import (
    EQUIPMENT_STATUSES,
    IN_SERVICE,
    OUT_OF_SERVICE,
    is_known_status,
    status_label,
)
from .templates import INSPECTION_TEMPLATES, InspectionTemplate, get_template, templates_for

__all__ = [
    "EQUIPMENT_CATEGORIES",
    "CategoryInfo",
    "is_known_category",
    "EQUIPMENT_STATUSES",
    "IN_SERVICE",
    "OUT_OF_SERVICE",
    "is_known_status",
    "status_label",
    "INSPECTION_TEMPLATES",
    "InspectionTemplate",
    "get_template",
    "templates_for",
]
