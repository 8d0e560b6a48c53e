# -*- coding: utf-8 -*-
"""
Disaster impact report wizard: schema, rules and facade.
"""

from .schema import (
    STEP_DISASTER_INFO, STEP_LOCATION_IMPACT, STEP_ASSISTANCE_CONTACT, STEP_REVIEW,
    CONTACT_ERROR_KEY, build_report_schema, build_report_steps
)
from .report_wizard import DisasterReportWizard

__all__ = [
    'STEP_DISASTER_INFO',
    'STEP_LOCATION_IMPACT',
    'STEP_ASSISTANCE_CONTACT',
    'STEP_REVIEW',
    'CONTACT_ERROR_KEY',
    'build_report_schema',
    'build_report_steps',
    'DisasterReportWizard',
]
