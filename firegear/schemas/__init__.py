from .common import ErrorResponse, MessageResponse
from .equipment import (
    EquipmentCreate,
    EquipmentOut,
    EquipmentUpdate,
    HistoryEntryOut,
    InspectionStatusOut,
    StatusChangeRequest,
)
from .inspection import (
    CategoryInspectionCompletionOut,
    CategoryInspectionCreate,
    CategoryInspectionOut,
    CategoryInspectionUpdate,
    CompleteInspectionRequest,
    InspectionCompletionOut,
    InspectionCreate,
    InspectionOut,
    InspectionUpdate,
    ScheduleItem,
    ScheduleResponse,
)
from .station import StationCreate, StationOut, StationUpdate
from .vendor import VendorCreate, VendorOut, VendorUpdate

__all__ = [
    "ErrorResponse",
    "MessageResponse",
    "StationCreate",
    "StationUpdate",
    "StationOut",
    "EquipmentCreate",
    "EquipmentUpdate",
    "EquipmentOut",
    "HistoryEntryOut",
    "InspectionStatusOut",
    "StatusChangeRequest",
    "InspectionCreate",
    "InspectionUpdate",
    "InspectionOut",
    "CategoryInspectionCreate",
    "CategoryInspectionUpdate",
    "CategoryInspectionOut",
    "CompleteInspectionRequest",
    "InspectionCompletionOut",
    "CategoryInspectionCompletionOut",
    "ScheduleItem",
    "ScheduleResponse",
    "VendorCreate",
    "VendorUpdate",
    "VendorOut",
]
