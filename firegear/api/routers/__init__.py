from . import (
    category_inspections,
    dashboard,
    equipment,
    health,
    inspections,
    meta,
    stations,
    vendors,
)

__all__ = [
    "category_inspections",
    "dashboard",
    "equipment",
    "health",
    "inspections",
    "meta",
    "stations",
    "vendors",
]
