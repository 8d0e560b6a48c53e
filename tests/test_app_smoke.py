# -*- coding: utf-8 -*-
"""
Smoke tests to ensure application doesn't break after changes.
These tests verify basic functionality works.
"""
import pytest


def test_imports():
    """Test that all main modules can be imported."""
    try:
        from app.config import Config, Vocabularies
        from models import Attachment, ReportLocation, SubmissionReceipt, SubmissionRecord
        from services.wizard import StepNavigator, SubmissionGate
        from services.disaster_report import DisasterReportWizard
        from services.reports_api_client import ReportsApiClient
        assert True
    except ImportError as e:
        pytest.fail(f"Import failed: {e}")


def test_lazy_service_exports():
    """Test the service layer's lazy exports."""
    import services

    assert services.DisasterReportWizard.__name__ == "DisasterReportWizard"
    assert services.ReportsApiClient.__name__ == "ReportsApiClient"
    with pytest.raises(AttributeError):
        services.NoSuchService


def test_config_defaults():
    """Test configuration values used by the wizard."""
    from app.config import Config, Vocabularies

    assert Config.MAX_ATTACHMENTS > 0
    assert Config.MAX_ATTACHMENT_SIZE >= 1024 * 1024
    assert Config.REFERENCE_PREFIX == "RPT"
    for unused in ("API_USERNAME", "API_PASSWORD", "APP_NAME", "APP_TITLE", "VERSION"):
        assert not hasattr(Config, unused)
    assert Vocabularies.OTHER_OPTION in Vocabularies.IMPACT_TYPES
    assert Vocabularies.OTHER_OPTION in Vocabularies.ASSISTANCE_TYPES
    for detail in Vocabularies.OTHER_DISASTER_DETAILS:
        assert any(detail in details for details in Vocabularies.DISASTER_DETAILS.values())


def test_translations():
    """Test language switching and fallbacks."""
    from services.translation_manager import get_language, set_language, tr
    from services.translations.ar import AR_TRANSLATIONS
    from services.translations.en import EN_TRANSLATIONS

    assert set(AR_TRANSLATIONS) == set(EN_TRANSLATIONS)
    assert tr("validation.report.description_min_length", min=20) == (
        "Description must be at least 20 characters"
    )
    assert tr("no.such.key") == "no.such.key"

    set_language("ar")
    assert tr("wizard.step.review") == AR_TRANSLATIONS["wizard.step.review"]
    assert get_language() == "ar"

    set_language("xx")
    assert tr("wizard.step.review") == "Review & Submit"


def test_wizard_instantiation():
    """Test that the wizard can be created."""
    from services.disaster_report import DisasterReportWizard

    wizard = DisasterReportWizard()
    assert wizard.current_step == 1
    assert wizard.navigator.confirm_index == 4
    assert wizard.step_title(4) == "Review & Submit"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
