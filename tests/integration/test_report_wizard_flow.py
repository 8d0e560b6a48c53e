# -*- coding: utf-8 -*-
"""
End-to-end tests for the disaster report wizard.

Tests cover:
- Full happy path from step 1 to submission
- Login interruption and retry
- Back navigation and late edits
- Review summary
- Draft export/restore
- Reset
"""

from unittest.mock import Mock

import pytest

from models.location import ReportLocation
from services.disaster_report import (
    CONTACT_ERROR_KEY, STEP_ASSISTANCE_CONTACT, STEP_DISASTER_INFO, STEP_REVIEW,
    DisasterReportWizard
)
from services.exceptions import NetworkException
from services.wizard.submission_gate import SubmitOutcome
from services.wizard.wizard_state import WizardStatus


def fill_step(wizard, fields, names):
    for name in names:
        wizard.set_field(name, fields[name])


STEP_ONE = ("disasterCategory", "disasterDetail", "description", "severity", "dateTime")
STEP_TWO = ("location", "impactType", "impactDescription")
STEP_THREE = ("assistanceNeeded", "assistanceDescription", "urgencyLevel", "contactName", "contactPhone")


@pytest.fixture
def wizard():
    return DisasterReportWizard(identity={"name": "Sara Haddad", "email": "sara@example.org"})


@pytest.fixture
def wizard_at_review(wizard, valid_report_fields):
    for names in (STEP_ONE, STEP_TWO, STEP_THREE):
        fill_step(wizard, valid_report_fields, names)
        assert wizard.advance() is True
    assert wizard.current_step == STEP_REVIEW
    return wizard


class TestHappyPath:
    """Test a complete report."""

    def test_identity_prefills_contact(self, wizard):
        assert wizard.get_field("contactName") == "Sara Haddad"
        assert wizard.get_field("contactEmail") == "sara@example.org"

    def test_reference_number_format(self, wizard):
        assert wizard.reference_number.startswith("RPT-")
        assert len(wizard.reference_number.split("-")) == 3

    def test_walk_through_and_submit(self, wizard, valid_report_fields):
        transport = Mock(return_value={"id": "r-77", "status": "pending"})

        fill_step(wizard, valid_report_fields, STEP_ONE)
        assert wizard.advance() is True
        assert wizard.step_title() == "Location & Impact"

        wizard.on_location_select(36.2021, 37.1343, "Main Street")
        wizard.toggle_impact_type("Property Damage")
        wizard.set_field("impactDescription", valid_report_fields["impactDescription"])
        assert wizard.advance() is True

        wizard.toggle_assistance_type("Food & Water")
        fill_step(wizard, valid_report_fields, ("assistanceDescription", "urgencyLevel"))
        assert wizard.advance() is True
        assert wizard.current_step == STEP_REVIEW
        assert wizard.get_progress_percentage() == 100.0

        outcome = wizard.try_submit(is_authenticated=True, submit_fn=transport)

        assert outcome == SubmitOutcome.SUBMITTED
        transport.assert_called_once()
        record = transport.call_args[0][0]
        assert record.get("disasterType") == "flood"
        assert record.get("location") == ReportLocation("Main Street", 36.2021, 37.1343)
        assert wizard.status == WizardStatus.SUBMITTED
        assert wizard.state.receipt.id == "r-77"

    def test_uses_api_client_by_default(self, wizard_at_review):
        client = Mock(is_authenticated=True)
        client.submit_report.return_value = {"id": "r-1", "status": "pending"}
        wizard_at_review.api_client = client

        assert wizard_at_review.try_submit() == SubmitOutcome.SUBMITTED
        client.submit_report.assert_called_once()

    def test_no_transport_configured(self, wizard_at_review):
        with pytest.raises(ValueError):
            wizard_at_review.try_submit(True)


class TestInterruptions:
    """Test login gate and failures on the review step."""

    def test_login_required_then_retry(self, wizard_at_review, make_photo):
        wizard_at_review.add_photos([make_photo("roof.jpg")])
        transport = Mock(return_value={"id": "r-2", "status": "pending"})

        assert wizard_at_review.try_submit(False, transport) == SubmitOutcome.AUTH_REQUIRED
        assert wizard_at_review.state.pending_auth_gate is True
        assert wizard_at_review.current_step == STEP_REVIEW
        assert len(wizard_at_review.photos) == 1

        assert wizard_at_review.try_submit(True, transport) == SubmitOutcome.SUBMITTED
        assert transport.call_args[0][0].attachments[0].file_name == "roof.jpg"

    def test_transport_failure_keeps_everything(self, wizard_at_review):
        transport = Mock(side_effect=RuntimeError("503 Service Unavailable"))
        assert wizard_at_review.try_submit(True, transport) == SubmitOutcome.FAILED
        assert wizard_at_review.submit_error == "503 Service Unavailable"
        assert wizard_at_review.current_step == STEP_REVIEW
        assert wizard_at_review.get_field("disasterDetail") == "Flood"

    def test_status_messages(self, wizard_at_review):
        assert wizard_at_review.status_message is None

        wizard_at_review.try_submit(False, Mock())
        assert wizard_at_review.status_message == (
            "You need to be logged in to submit a disaster impact report."
        )

        offline = Mock(side_effect=NetworkException(
            "refused", original_error=ConnectionError("refused")
        ))
        assert wizard_at_review.try_submit(True, offline) == SubmitOutcome.FAILED
        assert wizard_at_review.submit_error == "refused"
        assert wizard_at_review.status_message == (
            "Could not connect to the server. Please check your connection."
        )

        online = Mock(return_value={"id": "r-8", "status": "pending"})
        assert wizard_at_review.try_submit(True, online) == SubmitOutcome.SUBMITTED
        assert wizard_at_review.status_message == "Report submitted successfully"

    def test_submitted_report_is_frozen(self, wizard_at_review, make_photo):
        wizard_at_review.add_photos([make_photo("roof.jpg")])
        transport = Mock(return_value={"id": "r-3", "status": "pending"})
        assert wizard_at_review.try_submit(True, transport) == SubmitOutcome.SUBMITTED

        assert wizard_at_review.retreat() is False
        assert wizard_at_review.current_step == STEP_REVIEW
        assert wizard_at_review.add_photos([make_photo("late.jpg")]).accepted == []
        assert wizard_at_review.remove_photo(0) is None
        assert [p.file_name for p in wizard_at_review.photos] == ["roof.jpg"]


class TestNavigation:
    """Test validation during navigation."""

    def test_empty_first_step(self, wizard):
        assert wizard.can_advance() is False
        assert wizard.advance() is False
        assert "description" in wizard.errors()

    def test_contact_rule_on_step_three(self, wizard, valid_report_fields):
        for names in (STEP_ONE, STEP_TWO):
            fill_step(wizard, valid_report_fields, names)
            wizard.advance()
        fill_step(wizard, valid_report_fields, STEP_THREE[:-1])
        wizard.set_field("contactEmail", "")

        assert wizard.advance() is False
        assert CONTACT_ERROR_KEY in wizard.errors(STEP_ASSISTANCE_CONTACT)

    def test_edit_on_review_is_caught_at_submit(self, wizard_at_review):
        """Writes are never validated, so the gate re-checks every step."""
        wizard_at_review.set_field("description", "short")
        transport = Mock()

        assert wizard_at_review.try_submit(True, transport) == SubmitOutcome.INVALID
        transport.assert_not_called()
        assert wizard_at_review.current_step == STEP_REVIEW
        assert "description" in wizard_at_review.errors(STEP_DISASTER_INFO)

    def test_back_and_forth_keeps_data(self, wizard_at_review):
        for _ in range(3):
            assert wizard_at_review.retreat() is True
        assert wizard_at_review.current_step == STEP_DISASTER_INFO
        assert wizard_at_review.retreat() is False

        for _ in range(3):
            assert wizard_at_review.advance() is True
        assert wizard_at_review.current_step == STEP_REVIEW

    def test_visible_fields(self, wizard):
        assert "customDisasterDetail" not in wizard.visible_fields(STEP_DISASTER_INFO)
        wizard.set_field("disasterDetail", "Other Non-Natural")
        assert "customDisasterDetail" in wizard.visible_fields(STEP_DISASTER_INFO)
        assert wizard.visible_fields(STEP_REVIEW) == []

    def test_unknown_field(self, wizard):
        with pytest.raises(KeyError):
            wizard.set_field("magnitude", 7)


class TestReviewAndDrafts:
    """Test summary, drafts and reset."""

    def test_summary(self, wizard_at_review, make_photo):
        wizard_at_review.add_photos([make_photo("roof.jpg")])
        sections = wizard_at_review.summary()

        assert [s["step"] for s in sections] == [1, 2, 3, 4]
        assert sections[0]["title"] == "Disaster Information"
        assert sections[0]["fields"]["severity"] == "High"
        assert sections[0]["fields"]["disasterCategory"] == "Natural Disasters"
        assert "customDisasterDetail" not in sections[0]["fields"]
        assert sections[1]["fields"]["location"] == "Main Street, Lower Town"
        assert sections[3]["fields"]["photos"] == ["roof.jpg"]

    def test_draft_round_trip(self, wizard_at_review, make_photo):
        wizard_at_review.add_photos([make_photo("roof.jpg")])
        draft = wizard_at_review.export_draft()

        restored = DisasterReportWizard.restore_draft(draft)

        assert restored.reference_number == wizard_at_review.reference_number
        assert restored.current_step == STEP_REVIEW
        assert restored.field_store.snapshot() == wizard_at_review.field_store.snapshot()
        assert [p.file_name for p in restored.photos] == ["roof.jpg"]

        transport = Mock(return_value={"id": "r-5", "status": "pending"})
        assert restored.try_submit(True, transport) == SubmitOutcome.SUBMITTED

    def test_reset(self, wizard_at_review, make_photo):
        wizard_at_review.add_photos([make_photo()])
        old_id = wizard_at_review.state.wizard_id

        assert wizard_at_review.reset() is True
        assert wizard_at_review.current_step == STEP_DISASTER_INFO
        assert wizard_at_review.photos == ()
        assert wizard_at_review.get_field("description") == ""
        assert wizard_at_review.get_field("contactName") == "Sara Haddad"
        assert wizard_at_review.reference_number.startswith("RPT-")
        assert wizard_at_review.status == WizardStatus.IN_PROGRESS
        assert wizard_at_review.state.wizard_id != old_id

    def test_photo_removal(self, wizard, make_photo):
        wizard.add_photos([make_photo("a.jpg"), make_photo("b.jpg")])
        wizard.remove_photo(0)
        assert [p.file_name for p in wizard.photos] == ["b.jpg"]
        with pytest.raises(IndexError):
            wizard.remove_photo(5)
