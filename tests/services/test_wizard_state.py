# -*- coding: utf-8 -*-
"""
Tests for wizard session state.
"""

import re

from models.submission import SubmissionReceipt
from services.wizard.wizard_state import WizardState, WizardStatus


class TestWizardState:
    """Test state bookkeeping."""

    def test_reference_number(self):
        state = WizardState(reference_prefix="RPT")
        assert re.fullmatch(r"RPT-\d{14}-[0-9A-F]{4}", state.reference_number)

    def test_validation_results_are_copies(self):
        state = WizardState()
        state.set_validation_result(1, {"name": "required"})
        state.errors_for(1)["other"] = "x"
        assert state.errors_for(1) == {"name": "required"}

    def test_round_trip_drops_in_flight_flags(self):
        state = WizardState()
        state.current_step_index = 3
        state.completed_steps.update({1, 2})
        state.set_validation_result(3, {"contact": "missing"})
        state.is_submitting = True
        state.receipt = SubmissionReceipt("r-1", "pending")

        restored = WizardState.from_dict(state.to_dict())

        assert restored.reference_number == state.reference_number
        assert restored.current_step_index == 3
        assert restored.completed_steps == {1, 2}
        assert restored.validation_results == {}
        assert restored.is_submitting is False
        assert restored.receipt == state.receipt

    def test_restart(self):
        state = WizardState()
        state.status = WizardStatus.SUBMITTED
        state.submit_error = "boom"
        old_id = state.wizard_id

        state.restart()

        assert state.wizard_id != old_id
        assert state.status == WizardStatus.IN_PROGRESS
        assert state.submit_error is None
        assert state.current_step_index == 1
