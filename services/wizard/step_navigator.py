# -*- coding: utf-8 -*-
"""
Step Navigator - Progress controller over wizard step indices.

States: Step(1) -> Step(2) -> ... -> Step(N) -> Confirm (index N + 1).

Handles:
- Non-mutating "can advance" checks (cheap, for enabling controls)
- Authoritative advance with stored validation results
- Retreat without validation (refused while submitting or once submitted)
- Progress tracking
"""

from typing import Any, Dict, Mapping

from PyQt5.QtCore import QObject, pyqtSignal

from services.wizard.step_validator import StepValidator
from services.wizard.wizard_state import WizardState
from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Manages navigation between wizard steps.

    Responsibilities:
    - Track the current step in WizardState
    - Validate before moving forward
    - Emit signals for UI updates
    """

    # Signals
    step_changed = pyqtSignal(int, int)  # old_index, new_index
    validation_failed = pyqtSignal(int, dict)  # step_index, errors
    can_go_previous_changed = pyqtSignal(bool)

    def __init__(self, state: WizardState, validator: StepValidator):
        """
        Initialize the navigator.

        Args:
            state: Wizard state (owned by this navigator)
            validator: Validation rule engine for the wizard's steps
        """
        super().__init__()
        self.state = state
        self.validator = validator

    @property
    def current_index(self) -> int:
        return self.state.current_step_index

    @property
    def step_count(self) -> int:
        """Number of data-entry steps (Confirm excluded)."""
        return self.validator.step_count

    @property
    def confirm_index(self) -> int:
        return self.step_count + 1

    @property
    def is_at_confirm(self) -> bool:
        return self.state.current_step_index == self.confirm_index

    def can_go_previous(self) -> bool:
        return (self.state.current_step_index > 1
                and not self.state.is_submitting and not self.state.is_submitted)

    def can_advance(self, step_index: int, snapshot: Mapping[str, Any]) -> bool:
        """
        Check whether the step would pass validation, without storing errors.

        Uses the same rules as ``advance`` so the two never disagree on the
        same snapshot.
        """
        if self.state.is_submitting or self.state.is_submitted:
            return False
        if step_index < 1 or step_index >= self.confirm_index:
            return False
        return not self.validator.validate_step(step_index, snapshot)

    def advance(self, step_index: int, snapshot: Mapping[str, Any]) -> bool:
        """
        Validate the current step and move forward when it is valid.

        Args:
            step_index: Step the caller believes is current; a stale value is refused
            snapshot: Immutable copy of the field store

        Returns:
            True if navigation happened
        """
        current = self.state.current_step_index
        if self.state.is_submitting:
            logger.warning(f"Cannot advance from step {current}: submission in progress")
            return False
        if self.state.is_submitted:
            logger.debug("Cannot advance: report already submitted")
            return False
        if step_index != current:
            logger.warning(f"Refusing advance for stale step {step_index} (current: {current})")
            return False
        if current >= self.confirm_index:
            logger.debug(f"Cannot go next: already at confirm step ({current})")
            return False

        logger.debug(f"Validating step {current}...")
        errors = self.validator.validate_step(current, snapshot)
        self.state.set_validation_result(current, errors)

        if errors:
            logger.warning(f"Step {current} validation failed: {sorted(errors)}")
            self.validation_failed.emit(current, dict(errors))
            return False

        # Errors for a step are discarded once it is left
        self.state.clear_validation_result(current)
        self.state.mark_step_completed(current)
        self._navigate_to(current + 1)
        return True

    def retreat(self) -> bool:
        """
        Go back one step. Never validates.

        The vacated step's stored errors are cleared so they do not reappear
        when the user returns to it.
        """
        current = self.state.current_step_index
        if self.state.is_submitting:
            logger.warning(f"Cannot go back from step {current}: submission in progress")
            return False
        if self.state.is_submitted:
            logger.debug("Cannot go back: report already submitted")
            return False

        self.state.clear_validation_result(current)
        if current <= 1:
            logger.debug("Cannot go previous: already at first step")
            return False

        logger.info(f"Navigating back: Step {current} → {current - 1}")
        self._navigate_to(current - 1)
        return True

    def reset(self):
        """Return to the first step with no stored errors."""
        self.state.validation_results.clear()
        self.state.completed_steps.clear()
        self._navigate_to(1)

    def validate_all(self, snapshot: Mapping[str, Any]) -> Dict[int, Dict[str, str]]:
        """Validate every step and store the failing results."""
        results = self.validator.validate_all(snapshot)
        for step_index, errors in results.items():
            self.state.set_validation_result(step_index, errors)
        return results

    def get_progress_percentage(self) -> float:
        """
        Get current progress as percentage.

        Returns:
            0.0 on the first step, 100.0 at Confirm
        """
        if self.confirm_index <= 1:
            return 100.0
        return ((self.state.current_step_index - 1) / (self.confirm_index - 1)) * 100.0

    def _navigate_to(self, new_index: int):
        old_index = self.state.current_step_index
        self.state.current_step_index = new_index
        self.state.touch()

        self.step_changed.emit(old_index, new_index)
        self.can_go_previous_changed.emit(self.can_go_previous())
        logger.info(f"Navigation complete: Step {new_index} is now active")
