"""Recurring inspection templates keyed on the governing standard.

Intervals are calendar months. `external` marks work normally performed by an
outside vendor (flow testing, hydrostatic testing, certification).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class InspectionTemplate:
    template_id: str
    name: str
    interval: int
    regulation: str
    categories: tuple[str, ...]
    external: bool = False
    type: str = "months"

    def applies_to(self, category: str) -> bool:
        return category in self.categories


def _t(
    template_id: str,
    name: str,
    interval: int,
    regulation: str,
    categories: Iterable[str],
    external: bool = False,
) -> InspectionTemplate:
    return InspectionTemplate(
        template_id=template_id,
        name=name,
        interval=interval,
        regulation=regulation,
        categories=tuple(categories),
        external=external,
    )


_TEMPLATES: Final[tuple[InspectionTemplate, ...]] = (
    # Breathing apparatus
    _t("scba-annual-flow", "SCBA Annual Flow Test (NFPA 1852)", 12, "NFPA 1852 §7.3", ["breathing"], True),
    _t("scba-monthly", "SCBA Monthly Operational Inspection", 1, "NFPA 1852 §7.1", ["breathing"]),
    _t("scba-facepiece-fit", "Facepiece Annual Fit Test", 12, "OSHA 29 CFR 1910.134(f)", ["breathing"]),
    _t("cylinder-hydro", "Air Cylinder 5-Year Hydrostatic Test (DOT/NFPA 1852)", 60, "DOT 49 CFR 180.205", ["breathing"], True),
    _t("cylinder-visual", "Air Cylinder Quarterly Visual Inspection", 3, "NFPA 1852 §7.2", ["breathing"]),
    _t("air-quality", "Breathing Air Quarterly Quality Test", 3, "NFPA 1989 §6.3", ["breathing"], True),
    # Protective ensembles
    _t("turnout-routine", "Turnout Gear Routine Inspection", 1, "NFPA 1851 §6.2", ["ppe"]),
    _t("turnout-advanced", "Turnout Gear Advanced Inspection (NFPA 1851)", 12, "NFPA 1851 §6.3", ["ppe"], True),
    _t("turnout-advanced-cleaning", "Turnout Gear Advanced Cleaning", 12, "NFPA 1851 §7.3", ["ppe"], True),
    _t("helmet-annual", "Helmet Annual Inspection", 12, "NFPA 1851 §6.3", ["ppe"]),
    _t("pass-device", "PASS Device Monthly Test", 1, "NFPA 1982 §4.4", ["ppe", "breathing"]),
    # Rescue
    _t("ladder-ground-annual", "Ground Ladder Annual Inspection (NFPA 1932)", 12, "NFPA 1932 §5.1", ["rescue"]),
    _t("ladder-service-test", "Ground Ladder Service Test", 12, "NFPA 1932 §6", ["rescue"], True),
    _t("rope-after-use", "Life Safety Rope Quarterly Inspection", 3, "NFPA 1983 §5.1", ["rescue"]),
    _t("rope-hardware", "Rope Rescue Hardware Annual Inspection", 12, "NFPA 1983 §5.2", ["rescue"]),
    _t("extrication-tools", "Hydraulic Extrication Tool Annual Service", 12, "NFPA 1936 §7", ["rescue", "pumps"], True),
    _t("harness-annual", "Harness Annual Inspection", 12, "NFPA 1983 §5.3", ["rescue", "ppe"]),
    # Detection
    _t("gas-meter-bump", "Gas Meter Monthly Bump Test", 1, "ISEA 2010 / Manufacturer", ["detection"]),
    _t("gas-meter-calibration", "Gas Meter Semi-Annual Calibration", 6, "Manufacturer / NFPA 1500 §7.9", ["detection"], True),
    _t("tic-annual", "Thermal Imaging Camera Annual Service", 12, "NFPA 1801 §4", ["detection"], True),
    # Apparatus
    _t("apparatus-annual", "Fire Apparatus Annual Pump Test (NFPA 1911)", 12, "NFPA 1911 §18", ["apparatus"], True),
    _t("apparatus-monthly", "Apparatus Monthly Check", 1, "NFPA 1911 §6", ["apparatus"]),
    _t("aerial-annual", "Aerial Device Annual Inspection", 12, "NFPA 1911 §17", ["apparatus"], True),
    _t("aerial-nondestructive", "Aerial Device 5-Year Non-Destructive Test", 60, "NFPA 1911 §17.4", ["apparatus"], True),
    _t("ambulance-annual", "Ambulance Annual Safety Inspection", 12, "NFPA 1917 §8", ["apparatus", "medical"], True),
    # Pumps and hydraulics
    _t("portable-pump-annual", "Portable Pump Annual Service Test", 12, "NFPA 1911 §18", ["pumps"], True),
    _t("hydraulic-hose-annual", "Hydraulic Hose and Coupler Annual Inspection", 12, "NFPA 1936 §7.2", ["pumps"]),
    # Hose and water supply
    _t("hose-annual", "Fire Hose Annual Pressure Test (NFPA 1962)", 12, "NFPA 1962 §7", ["hose"]),
    _t("nozzle-annual", "Nozzle Annual Inspection", 12, "NFPA 1962 §6", ["hose"]),
    _t("appliance-annual", "Hose Appliance Annual Inspection", 12, "NFPA 1962 §8", ["hose"]),
    # Communications
    _t("radio-annual", "Portable Radio Annual Alignment", 12, "NFPA 1221 / Manufacturer", ["communications"], True),
    _t("radio-battery", "Radio Battery Quarterly Capacity Test", 3, "Manufacturer", ["communications"]),
    # Medical
    _t("aed-monthly", "AED Monthly Readiness Check", 1, "AHA / Manufacturer", ["medical"]),
    _t("aed-annual", "AED Annual Preventive Maintenance", 12, "Manufacturer / FDA", ["medical"], True),
    _t("oxygen-cylinder-hydro", "Oxygen Cylinder 5-Year Hydrostatic Test", 60, "DOT 49 CFR 180.209", ["medical"], True),
    _t("medical-supplies", "Medical Supply Monthly Expiration Check", 1, "State EMS Regulations", ["medical"]),
    # Ventilation and electrical
    _t("ppv-fan-annual", "PPV Fan Annual Service", 12, "Manufacturer", ["ventilation"]),
    _t("smoke-ejector", "Smoke Ejector Semi-Annual Inspection", 6, "Manufacturer", ["ventilation"]),
    _t("generator-monthly", "Generator Monthly Run Test", 1, "NFPA 110 §8.4", ["electrical"]),
    _t("generator-annual", "Generator Annual Load Bank Test", 12, "NFPA 110 §8.4.2", ["electrical"], True),
    _t("cord-reel-annual", "Cord Reel and Scene Lighting Annual Inspection", 12, "NFPA 1901 §22", ["electrical"]),
    # Station and miscellaneous
    _t("extinguisher-annual", "Portable Extinguisher Annual Maintenance", 12, "NFPA 10 §7.3", ["other"], True),
    _t("extinguisher-monthly", "Portable Extinguisher Monthly Inspection", 1, "NFPA 10 §7.2", ["other"]),
    _t("eyewash-monthly", "Eyewash Station Monthly Activation", 1, "ANSI Z358.1 §5.5", ["other"]),
)

INSPECTION_TEMPLATES: Final[dict[str, InspectionTemplate]] = {t.template_id: t for t in _TEMPLATES}


def get_template(template_id: str | None) -> InspectionTemplate | None:
    if not template_id:
        return None
    return INSPECTION_TEMPLATES.get(template_id)


def templates_for(category: str | None = None) -> list[InspectionTemplate]:
    if category is None:
        return list(_TEMPLATES)
    return [t for t in _TEMPLATES if t.applies_to(category)]
