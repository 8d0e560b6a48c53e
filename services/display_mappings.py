# -*- coding: utf-8 -*-
"""
Centralized label <-> backend value mappings for report vocabularies (DRY).

UI-facing strings differ from the wire vocabulary; these tables are the only
place the two are tied together. Lookups never drop an unknown value.
"""

from typing import Dict, List, Tuple

from app.config import Vocabularies
from services.translation_manager import get_language
from services.wizard.submission_assembler import FieldMapping


# ============ Disaster detail -> backend disaster type ============

DISASTER_DETAIL_TO_BACKEND: Dict[str, str] = {
    # Natural disasters
    "Earthquake": "earthquake",
    "Flood": "flood",
    "Hurricane/Typhoon": "hurricane",
    "Tornado": "tornado",
    "Wildfire": "wildfire",
    "Landslide": "landslide",
    "Tsunami": "tsunami",
    "Volcanic Eruption": "volcano",
    "Drought": "drought",
    "Blizzard/Ice Storm": "storm",
    "Hailstorm": "storm",
    "Other Natural": "other",
    # Human-made disasters
    "Industrial Accident": "industrial_accident",
    "Chemical Spill": "chemical_spill",
    "Oil Spill": "chemical_spill",
    "Nuclear Incident": "nuclear_incident",
    "Building Collapse": "structural_failure",
    "Transportation Accident": "transportation_accident",
    "Cyber Attack": "cyber_attack",
    "Infrastructure Failure": "structural_failure",
    "Civil Unrest": "other",
    "Other Non-Natural": "other",
}

# ============ Category / severity / urgency ============

# Backend DisasterCategory: 0 = Natural, 1 = NonNatural
DISASTER_CATEGORY_TO_BACKEND: Dict[str, int] = {
    value: code for code, (value, _en, _ar) in enumerate(Vocabularies.DISASTER_CATEGORIES)
}

SEVERITY_TO_BACKEND: Dict[str, int] = {
    value: code for value, code, _en, _ar in Vocabularies.SEVERITY_LEVELS
}

URGENCY_TO_BACKEND: Dict[str, str] = {
    label: value for label, value, _ar in Vocabularies.URGENCY_LEVELS
}


def report_field_mappings() -> List[FieldMapping]:
    """Mapping tables applied when a report is assembled for submission."""
    return [
        FieldMapping("disasterDetail", DISASTER_DETAIL_TO_BACKEND, target="disasterType"),
        FieldMapping("disasterCategory", DISASTER_CATEGORY_TO_BACKEND),
        FieldMapping("severity", SEVERITY_TO_BACKEND),
        FieldMapping("urgencyLevel", URGENCY_TO_BACKEND),
    ]


def map_disaster_type(disaster_detail: str) -> str:
    """Backend disaster type for a UI detail label (verbatim when unknown)."""
    return DISASTER_DETAIL_TO_BACKEND.get(disaster_detail, disaster_detail)


# ============ Display helpers ============

def get_disaster_category_display(value: str) -> str:
    for key, en, ar in Vocabularies.DISASTER_CATEGORIES:
        if key == value:
            return ar if get_language() == "ar" else en
    return value


def get_severity_display(value: str) -> str:
    for key, _code, en, ar in Vocabularies.SEVERITY_LEVELS:
        if key == value:
            return ar if get_language() == "ar" else en
    return value


def get_urgency_display(label: str) -> str:
    for key, _value, ar in Vocabularies.URGENCY_LEVELS:
        if key == label:
            return ar if get_language() == "ar" else key
    return label


def get_disaster_category_options() -> List[Tuple[str, str]]:
    return [(key, get_disaster_category_display(key)) for key, _en, _ar in Vocabularies.DISASTER_CATEGORIES]


def get_disaster_detail_options(category: str) -> List[str]:
    return list(Vocabularies.DISASTER_DETAILS.get(category, ()))


def get_severity_options() -> List[Tuple[str, str]]:
    return [(key, get_severity_display(key)) for key, _code, _en, _ar in Vocabularies.SEVERITY_LEVELS]


def get_urgency_options() -> List[Tuple[str, str]]:
    return [(label, get_urgency_display(label)) for label, _value, _ar in Vocabularies.URGENCY_LEVELS]
