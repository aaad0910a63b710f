"""Equipment categories and their suggested subcategories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class CategoryInfo:
    key: str
    name: str
    items: tuple[str, ...]


EQUIPMENT_CATEGORIES: Final[dict[str, CategoryInfo]] = {
    info.key: info
    for info in (
        CategoryInfo(
            "breathing",
            "Breathing Equipment",
            ("SCBA Units", "Face Pieces/Masks", "Air Cylinders/Tanks"),
        ),
        CategoryInfo(
            "ppe",
            "Personal Protective Equipment",
            ("Turnout Gear", "Helmets", "Boots", "Gloves"),
        ),
        CategoryInfo("rescue", "Rescue Equipment", ("Ladders", "Ropes/Hardware", "Extrication Tools")),
        CategoryInfo(
            "detection",
            "Detection Equipment",
            ("Gas Detection Meters", "Thermal Imaging Cameras"),
        ),
        CategoryInfo("apparatus", "Fire Apparatus", ("Engines", "Trucks", "Ambulances", "Tankers")),
        CategoryInfo("pumps", "Pumps and Hydraulics", ("Portable Pumps", "Hydraulic Tools")),
        CategoryInfo("hose", "Hose and Water Supply Equipment", ("Fire Hose", "Nozzles and Tips")),
        CategoryInfo(
            "communications",
            "Communications Equipment",
            ("Two-way Radios", "Mobile Data Terminals"),
        ),
        CategoryInfo("medical", "Medical/EMS Equipment", ("First Aid Supplies", "Defibrillators")),
        CategoryInfo(
            "ventilation",
            "Ventilation Equipment",
            ("Positive Pressure Fans", "Smoke Ejectors"),
        ),
        CategoryInfo("electrical", "Electrical Equipment", ("Generators", "Scene Lighting")),
        CategoryInfo("other", "Other/Miscellaneous", ("General Supplies", "Station Equipment")),
    )
}


def is_known_category(key: str | None) -> bool:
    return key in EQUIPMENT_CATEGORIES


def category_name(key: str) -> str:
    info = EQUIPMENT_CATEGORIES.get(key)
    return info.name if info else "Unknown Category"
