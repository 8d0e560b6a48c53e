# -*- coding: utf-8 -*-
"""
Disaster report schema: fields and step rules of the report wizard.

Step 1 - Disaster Information
Step 2 - Location & Impact
Step 3 - Assistance & Contact
Step 4 - Review & Submit (confirm, no rules)
"""

from typing import List

from app.config import Config, Vocabularies
from services.wizard.field_store import FieldKind, FieldSchema, FieldSpec
from services.wizard.step_definition import (
    ConditionalRequirement, StepDefinition, at_least_one_of
)

STEP_DISASTER_INFO = 1
STEP_LOCATION_IMPACT = 2
STEP_ASSISTANCE_CONTACT = 3
STEP_REVIEW = 4

CONTACT_ERROR_KEY = "contact"

_ALL_DISASTER_DETAILS = tuple(
    detail for details in Vocabularies.DISASTER_DETAILS.values() for detail in details
)


def build_report_schema(description_min_length: int = None) -> FieldSchema:
    """Field schema of the disaster report."""
    min_length = description_min_length or Config.DESCRIPTION_MIN_LENGTH
    return FieldSchema([
        # Step 1: Disaster Information
        FieldSpec("disasterCategory", FieldKind.CHOICE,
                  required_message="validation.report.disaster_category",
                  options=tuple(key for key, _en, _ar in Vocabularies.DISASTER_CATEGORIES)),
        FieldSpec("disasterDetail", FieldKind.CHOICE,
                  required_message="validation.report.disaster_detail",
                  options=_ALL_DISASTER_DETAILS),
        FieldSpec("customDisasterDetail", FieldKind.TEXT,
                  required_message="validation.report.custom_disaster_detail"),
        FieldSpec("description", FieldKind.TEXT,
                  required_message="validation.report.description",
                  min_length=min_length,
                  min_length_message="validation.report.description_min_length"),
        FieldSpec("severity", FieldKind.CHOICE,
                  required_message="validation.report.severity",
                  options=tuple(key for key, _code, _en, _ar in Vocabularies.SEVERITY_LEVELS)),
        FieldSpec("dateTime", FieldKind.TEXT,
                  required_message="validation.report.date_time"),

        # Step 2: Location & Impact
        FieldSpec("location", FieldKind.LOCATION,
                  required_message="validation.report.location"),
        FieldSpec("impactType", FieldKind.TAGS,
                  required_message="validation.report.impact_type",
                  options=Vocabularies.IMPACT_TYPES),
        FieldSpec("customImpactType", FieldKind.TEXT,
                  required_message="validation.report.custom_impact_type"),
        FieldSpec("impactDescription", FieldKind.TEXT,
                  required_message="validation.report.impact_description",
                  min_length=min_length,
                  min_length_message="validation.report.impact_description_min_length"),

        # Step 3: Assistance & Contact
        FieldSpec("assistanceNeeded", FieldKind.TAGS,
                  required_message="validation.report.assistance_needed",
                  options=Vocabularies.ASSISTANCE_TYPES),
        FieldSpec("customAssistanceType", FieldKind.TEXT,
                  required_message="validation.report.custom_assistance_type"),
        FieldSpec("assistanceDescription", FieldKind.TEXT,
                  required_message="validation.report.assistance_description"),
        FieldSpec("urgencyLevel", FieldKind.CHOICE,
                  required_message="validation.report.urgency_level",
                  options=tuple(label for label, _value, _ar in Vocabularies.URGENCY_LEVELS)),
        FieldSpec("contactName", FieldKind.TEXT,
                  required_message="validation.report.contact_name"),
        FieldSpec("contactPhone", FieldKind.TEXT),
        FieldSpec("contactEmail", FieldKind.TEXT),
        FieldSpec("isEmergency", FieldKind.FLAG),
    ])


def build_report_steps() -> List[StepDefinition]:
    """Step rules of the disaster report wizard (confirm step excluded)."""
    other = Vocabularies.OTHER_OPTION
    return [
        StepDefinition(
            index=STEP_DISASTER_INFO,
            title_key="wizard.step.disaster_info",
            required_fields=(
                "disasterCategory", "disasterDetail", "description", "severity", "dateTime",
            ),
            conditional_requirements=tuple(
                ConditionalRequirement("disasterDetail", detail, "customDisasterDetail")
                for detail in Vocabularies.OTHER_DISASTER_DETAILS
            ),
        ),
        StepDefinition(
            index=STEP_LOCATION_IMPACT,
            title_key="wizard.step.location_impact",
            required_fields=("location", "impactType", "impactDescription"),
            conditional_requirements=(
                ConditionalRequirement("impactType", other, "customImpactType"),
            ),
        ),
        StepDefinition(
            index=STEP_ASSISTANCE_CONTACT,
            title_key="wizard.step.assistance_contact",
            required_fields=(
                "assistanceNeeded", "assistanceDescription", "urgencyLevel", "contactName",
            ),
            conditional_requirements=(
                ConditionalRequirement("assistanceNeeded", other, "customAssistanceType"),
            ),
            cross_field_rules=(
                at_least_one_of(CONTACT_ERROR_KEY, ("contactPhone", "contactEmail"),
                                "validation.report.contact"),
            ),
            optional_fields=("isEmergency",),
        ),
    ]
