# -*- coding: utf-8 -*-
"""
Shared fixtures for the report wizard tests.
"""

import pytest

from models.attachment import Attachment
from models.location import ReportLocation
from services.translation_manager import get_language, set_language

MB = 1024 * 1024


@pytest.fixture(autouse=True)
def english():
    """Run every test with English messages."""
    previous = get_language()
    set_language("en")
    yield
    set_language(previous)


@pytest.fixture
def valid_report_fields():
    """Field values that satisfy every step of the disaster report."""
    return {
        # Step 1
        "disasterCategory": "Natural",
        "disasterDetail": "Flood",
        "description": "The river overflowed into the lower town overnight",
        "severity": "high",
        "dateTime": "2026-10-18T14:30",
        # Step 2
        "location": ReportLocation(address="Main Street, Lower Town", lat=36.2021, lng=37.1343),
        "impactType": ("Property Damage",),
        "impactDescription": "Dozens of homes along Main Street are flooded",
        # Step 3
        "assistanceNeeded": ("Food & Water",),
        "assistanceDescription": "Drinking water for about 40 families",
        "urgencyLevel": "Immediate",
        "contactName": "Sara Haddad",
        "contactPhone": "+963 912 345 678",
    }


@pytest.fixture
def make_photo():
    """Factory for attachments with a fake handle; contents are never read."""
    def _make(name: str = "photo.jpg", size_bytes: int = MB,
              mime_type: str = "image/jpeg") -> Attachment:
        return Attachment(handle=f"/tmp/{name}", mime_type=mime_type,
                          size_bytes=size_bytes, file_name=name)
    return _make
