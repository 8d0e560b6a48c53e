# -*- coding: utf-8 -*-
"""
Disaster Report Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "DisasterReportWizard",
    "ReportsApiClient",
    "ApiConfig",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "DisasterReportWizard":
        from .disaster_report import DisasterReportWizard
        return DisasterReportWizard
    elif name in ("ReportsApiClient", "ApiConfig"):
        from . import reports_api_client
        return getattr(reports_api_client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
