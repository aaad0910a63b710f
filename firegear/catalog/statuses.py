from __future__ import annotations

from typing import Final

IN_SERVICE: Final[str] = "in-service"
OUT_OF_SERVICE: Final[str] = "out-of-service"

EQUIPMENT_STATUSES: Final[dict[str, str]] = {
    IN_SERVICE: "In Service",
    OUT_OF_SERVICE: "Out of Service",
    "out-for-repair": "Out for Repair",
    "cannot-locate": "Cannot Locate",
    "in-training": "In Training",
    "other": "Other",
}


def is_known_status(key: str | None) -> bool:
    return key in EQUIPMENT_STATUSES


def status_label(key: str | None) -> str:
    if key is None:
        return "Unknown"
    return EQUIPMENT_STATUSES.get(key, key)
