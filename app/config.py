# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000/api")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_UPLOAD_TIMEOUT = int(os.getenv("API_UPLOAD_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")

# Report wizard limits
_MAX_ATTACHMENTS = int(os.getenv("REPORT_MAX_ATTACHMENTS", "10"))
_MAX_ATTACHMENT_SIZE_MB = int(os.getenv("REPORT_MAX_ATTACHMENT_SIZE_MB", "10"))
_ALLOWED_ATTACHMENT_TYPES = tuple(
    t.strip() for t in os.getenv("REPORT_ALLOWED_ATTACHMENT_TYPES", "image/*").split(",")
    if t.strip()
)
_DESCRIPTION_MIN_LENGTH = int(os.getenv("REPORT_DESCRIPTION_MIN_LENGTH", "20"))

# Language: "en" or "ar"
_DEFAULT_LANGUAGE = os.getenv("APP_LANGUAGE", "en")

_LOGS_DIR = os.getenv("LOGS_DIR", None)


@dataclass
class Config:
    """Application configuration."""

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, ...)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_UPLOAD_TIMEOUT: int = _API_UPLOAD_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL
    TOKEN_REFRESH_MARGIN_SECONDS: int = 300

    # Report Wizard
    MAX_ATTACHMENTS: int = _MAX_ATTACHMENTS
    MAX_ATTACHMENT_SIZE: int = _MAX_ATTACHMENT_SIZE_MB * 1024 * 1024
    ALLOWED_ATTACHMENT_TYPES: tuple = _ALLOWED_ATTACHMENT_TYPES
    DESCRIPTION_MIN_LENGTH: int = _DESCRIPTION_MIN_LENGTH
    REFERENCE_PREFIX: str = "RPT"

    # Language
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = Path(_LOGS_DIR) if _LOGS_DIR else PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Date/Time Formats
    DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"


# Controlled vocabularies
class Vocabularies:
    # Disaster categories: (UI value, English, Arabic)
    # Backend: DisasterCategory 0 = Natural, 1 = NonNatural
    DISASTER_CATEGORIES = [
        ("Natural", "Natural Disasters", "كوارث طبيعية"),
        ("NonNatural", "Non-Natural Disasters", "كوارث غير طبيعية"),
    ]

    DISASTER_DETAILS = {
        "Natural": (
            "Earthquake",
            "Flood",
            "Hurricane/Typhoon",
            "Tornado",
            "Wildfire",
            "Landslide",
            "Tsunami",
            "Volcanic Eruption",
            "Drought",
            "Blizzard/Ice Storm",
            "Hailstorm",
            "Other Natural",
        ),
        "NonNatural": (
            "Industrial Accident",
            "Chemical Spill",
            "Oil Spill",
            "Nuclear Incident",
            "Building Collapse",
            "Transportation Accident",
            "Cyber Attack",
            "Infrastructure Failure",
            "Civil Unrest",
            "Other Non-Natural",
        ),
    }

    # Details that require a free-text qualifier
    OTHER_DISASTER_DETAILS = ("Other Natural", "Other Non-Natural")

    IMPACT_TYPES = (
        "Property Damage",
        "Infrastructure Damage",
        "Environmental Impact",
        "Human Casualties",
        "Economic Loss",
        "Service Disruption",
        "Agricultural Loss",
        "Cultural Heritage Damage",
        "Other",
    )

    ASSISTANCE_TYPES = (
        "Emergency Rescue",
        "Medical Assistance",
        "Food & Water",
        "Temporary Shelter",
        "Transportation",
        "Communication Support",
        "Financial Aid",
        "Cleanup & Restoration",
        "Psychological Support",
        "Legal Assistance",
        "Technical Expertise",
        "Volunteer Coordination",
        "Other",
    )

    OTHER_OPTION = "Other"

    # Severity: (UI value, backend SeverityLevel code, English, Arabic)
    SEVERITY_LEVELS = [
        ("low", 0, "Low", "منخفضة"),
        ("medium", 1, "Medium", "متوسطة"),
        ("high", 2, "High", "عالية"),
        ("critical", 3, "Critical", "حرجة"),
    ]

    # Urgency: (UI label, backend value, Arabic)
    URGENCY_LEVELS = [
        ("Immediate", "immediate", "فوري"),
        ("Within 24 hours", "within_24h", "خلال 24 ساعة"),
        ("Within a week", "within_week", "خلال أسبوع"),
        ("Not urgent", "non_urgent", "غير عاجل"),
    ]
