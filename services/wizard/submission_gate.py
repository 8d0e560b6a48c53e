# -*- coding: utf-8 -*-
"""
Submission Gate - checks preconditions right before dispatch.

An unmet precondition (no authenticated session) suspends the submission
instead of failing it: all collected data stays in place so the user can
log in and retry. Transport failures are caught here and turned into
wizard state; they never escape to the caller.
"""

from enum import Enum
from typing import Any, Callable, Dict, Mapping, Union

from PyQt5.QtCore import QObject, pyqtSignal

from models.submission import SubmissionReceipt, SubmissionRecord
from services.translation_manager import tr
from services.wizard.attachment_manager import AttachmentManager
from services.wizard.field_store import FieldStore
from services.wizard.step_navigator import StepNavigator
from services.wizard.submission_assembler import SubmissionAssembler
from services.wizard.wizard_state import WizardStatus
from utils.logger import get_logger

logger = get_logger(__name__)

SubmitFn = Callable[[SubmissionRecord], Union[Dict[str, Any], SubmissionReceipt]]


class SubmitOutcome(Enum):
    SUBMITTED = "submitted"
    AUTH_REQUIRED = "auth_required"
    INVALID = "invalid"
    FAILED = "failed"
    REJECTED = "rejected"


class SubmissionGate(QObject):
    """Final step of the wizard: gate, assemble, dispatch."""

    # Signals
    auth_required = pyqtSignal()
    submission_started = pyqtSignal(str)  # reference number
    submission_succeeded = pyqtSignal(object)  # SubmissionReceipt
    submission_failed = pyqtSignal(str)  # error message

    def __init__(self, navigator: StepNavigator, field_store: FieldStore,
                 attachments: AttachmentManager, assembler: SubmissionAssembler):
        super().__init__()
        self.navigator = navigator
        self.state = navigator.state
        self.field_store = field_store
        self.attachments = attachments
        self.assembler = assembler

    def try_submit(self, is_authenticated: bool, submit_fn: SubmitFn) -> SubmitOutcome:
        """
        Submit the report if every precondition holds.

        Args:
            is_authenticated: Current session state from the auth source
            submit_fn: Transport; receives the SubmissionRecord, returns ``{id, status}``

        Returns:
            SubmitOutcome describing what happened
        """
        state = self.state

        if state.is_submitting:
            logger.warning("Submit ignored: a submission is already in flight")
            return SubmitOutcome.REJECTED
        if state.is_submitted:
            logger.warning(f"Submit ignored: {state.reference_number} was already submitted")
            return SubmitOutcome.REJECTED
        if not self.navigator.is_at_confirm:
            logger.warning(
                f"Submit refused at step {state.current_step_index}; "
                f"only allowed from confirm ({self.navigator.confirm_index})"
            )
            return SubmitOutcome.REJECTED

        if not is_authenticated:
            state.pending_auth_gate = True
            state.touch()
            logger.info(f"Submission of {state.reference_number} waiting for login")
            self.auth_required.emit()
            return SubmitOutcome.AUTH_REQUIRED

        state.pending_auth_gate = False
        snapshot = self.field_store.snapshot()

        invalid_steps = self.navigator.validate_all(snapshot)
        if invalid_steps:
            logger.warning(f"Submit blocked: steps {sorted(invalid_steps)} no longer valid")
            return SubmitOutcome.INVALID

        state.submit_error = None
        state.submit_exception = None
        state.is_submitting = True
        try:
            record = self.assembler.assemble(
                snapshot, self.attachments.attachments, state.reference_number
            )
            state.last_record = record
            self.submission_started.emit(state.reference_number)
            logger.info(f"Dispatching report {state.reference_number}")
            response = submit_fn(record)
        except Exception as e:
            logger.error(f"Submission of {state.reference_number} failed: {e}", exc_info=True)
            state.submit_error = str(e) or tr("submit.failed")
            state.submit_exception = e
            state.touch()
            self.submission_failed.emit(state.submit_error)
            return SubmitOutcome.FAILED
        finally:
            state.is_submitting = False

        receipt = self._to_receipt(response)
        state.receipt = receipt
        state.status = WizardStatus.SUBMITTED
        state.touch()
        logger.info(f"Report {state.reference_number} submitted (id={receipt.id}, status={receipt.status})")
        self.submission_succeeded.emit(receipt)
        return SubmitOutcome.SUBMITTED

    def _to_receipt(self, response: Any) -> SubmissionReceipt:
        """Receipt from the transport's answer; the dispatch already succeeded."""
        if isinstance(response, SubmissionReceipt):
            return response
        if isinstance(response, Mapping):
            return SubmissionReceipt.from_dict(response)
        logger.warning(
            f"Unexpected transport response for {self.state.reference_number}: "
            f"{type(response).__name__}; storing an empty receipt"
        )
        return SubmissionReceipt.from_dict(None)
