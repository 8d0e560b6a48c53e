# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.success": "Success",

    # Buttons
    "button.next": "Next",
    "button.previous": "Previous",
    "button.submit": "Submit Report",
    "button.retry": "Retry",
    "button.login": "Log in",

    # Wizard steps
    "wizard.report.title": "Report Disaster Impact",
    "wizard.step.disaster_info": "Disaster Information",
    "wizard.step.location_impact": "Location & Impact",
    "wizard.step.assistance_contact": "Assistance & Contact",
    "wizard.step.review": "Review & Submit",
    "wizard.progress": "Step {current} of {total}",

    # Generic validation messages
    "validation.field_required": "Field '{field}' is required",
    "validation.min_length": "Field '{field}' must be at least {min} characters",
    "validation.check_data": "Please check the entered data",

    # Report validation - Step 1
    "validation.report.disaster_category": "Please select a disaster category",
    "validation.report.disaster_detail": "Please specify the type of disaster",
    "validation.report.custom_disaster_detail": "Please specify the disaster type",
    "validation.report.description": "Please provide a description",
    "validation.report.description_min_length": "Description must be at least {min} characters",
    "validation.report.severity": "Please select severity level",
    "validation.report.date_time": "Please specify when the disaster occurred",

    # Report validation - Step 2
    "validation.report.location": "Please select a location on the map",
    "validation.report.impact_type": "Please select at least one impact type",
    "validation.report.custom_impact_type": "Please specify the custom impact type",
    "validation.report.impact_description": "Please provide a detailed description of the impact",
    "validation.report.impact_description_min_length": "Impact description must be at least {min} characters",

    # Report validation - Step 3
    "validation.report.assistance_needed": "Please select at least one type of assistance needed",
    "validation.report.custom_assistance_type": "Please specify the custom assistance type",
    "validation.report.assistance_description": "Please describe the assistance needed",
    "validation.report.urgency_level": "Please select urgency level",
    "validation.report.contact_name": "Contact name is required",
    "validation.report.contact": "Please provide either phone number or email",

    # Attachments
    "attachment.rejected.unsupported_type": "{name}: file type '{mime}' is not accepted",
    "attachment.rejected.too_large": "{name}: file exceeds the {max_mb} MB limit",
    "attachment.rejected.limit_reached": "{name}: a report can have at most {max} attachments",
    "attachment.rejected.busy": "{name}: attachments cannot change while the report is being submitted",
    "attachment.rejected.submitted": "{name}: attachments cannot change after the report was submitted",

    # Submission
    "submit.login_required": "You need to be logged in to submit a disaster impact report.",
    "submit.failed": "Failed to submit report. Please try again.",
    "success.report.submitted": "Report submitted successfully",

    # Error Messages - API
    "error.api.connection": "Could not connect to the server. Please check your connection.",
    "error.api.timeout": "The server took too long to respond. Please try again.",
    "error.api.unauthorized": "Your session has expired. Please log in again.",
    "error.unexpected": "An unexpected error occurred.",
}
