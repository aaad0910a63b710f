# Imported here so Alembic autogenerate sees every table
# firegear/models/__init__.py
from .base import Base
from .category_inspection import CategoryInspection
from .equipment import Equipment
from .inspection import Inspection
from .station import Station
from .vendor import Vendor

__all__ = [
    "Base",
    "Station",
    "Equipment",
    "Inspection",
    "CategoryInspection",
    "Vendor",
]
