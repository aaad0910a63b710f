"""SQLAlchemy implementations of repository interfaces."""

from .equipment import SqlAlchemyEquipmentRepository
from .inspection import SqlAlchemyCategoryInspectionRepository, SqlAlchemyInspectionRepository
from .station import SqlAlchemyStationRepository
from .vendor import SqlAlchemyVendorRepository

__all__ = [
    "SqlAlchemyStationRepository",
    "SqlAlchemyEquipmentRepository",
    "SqlAlchemyInspectionRepository",
    "SqlAlchemyCategoryInspectionRepository",
    "SqlAlchemyVendorRepository",
]
