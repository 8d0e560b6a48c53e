# -*- coding: utf-8 -*-
"""
Wizard State - navigation and submission state of one wizard session.

Holds:
- Current step position (explicit, never derived from UI location)
- Latest validation result per step
- Submission flags (in-flight guard, pending authentication gate)
- Reference number and timestamps
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional
import uuid

from models.submission import SubmissionReceipt, SubmissionRecord


class WizardStatus(Enum):
    """Lifecycle of a wizard session."""
    IN_PROGRESS = "in_progress"
    SUBMITTED = "submitted"


class WizardState:
    """State owned by the step navigator and the submission gate."""

    def __init__(self, reference_prefix: str = "WIZ"):
        self.wizard_id: str = str(uuid.uuid4())
        self.reference_prefix = reference_prefix
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = self.created_at
        self.reference_number: str = self._generate_reference_number()

        self.status: WizardStatus = WizardStatus.IN_PROGRESS
        self.current_step_index: int = 1
        self.completed_steps: set = set()
        self.validation_results: Dict[int, Dict[str, str]] = {}

        self.is_submitting: bool = False
        self.pending_auth_gate: bool = False
        self.submit_error: Optional[str] = None
        self.submit_exception: Optional[Exception] = None  # never serialized
        self.receipt: Optional[SubmissionReceipt] = None
        self.last_record: Optional[SubmissionRecord] = None

    def _generate_reference_number(self) -> str:
        """
        Generate a unique reference number for the session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: RPT-20260118153045-A3F2
        """
        timestamp = self.created_at.strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        return f"{self.reference_prefix}-{timestamp}-{short_id}"

    def restart(self):
        """Start a new session in place: new id and reference, idle flags."""
        self.wizard_id = str(uuid.uuid4())
        self.created_at = datetime.now()
        self.updated_at = self.created_at
        self.reference_number = self._generate_reference_number()
        self.status = WizardStatus.IN_PROGRESS
        self.current_step_index = 1
        self.completed_steps.clear()
        self.validation_results.clear()
        self.is_submitting = False
        self.pending_auth_gate = False
        self.submit_error = None
        self.submit_exception = None
        self.receipt = None
        self.last_record = None

    @property
    def is_submitted(self) -> bool:
        return self.status == WizardStatus.SUBMITTED

    def touch(self):
        self.updated_at = datetime.now()

    def errors_for(self, step_index: int) -> Dict[str, str]:
        """Stored errors for a step (copy)."""
        return dict(self.validation_results.get(step_index, {}))

    def set_validation_result(self, step_index: int, result: Dict[str, str]):
        """Replace the stored result for a step."""
        self.validation_results[step_index] = dict(result)
        self.touch()

    def clear_validation_result(self, step_index: int):
        self.validation_results.pop(step_index, None)
        self.touch()

    def mark_step_completed(self, step_index: int):
        self.completed_steps.add(step_index)
        self.touch()

    def is_step_completed(self, step_index: int) -> bool:
        return step_index in self.completed_steps

    def to_dict(self) -> Dict[str, Any]:
        """Serialize navigation state (drafts and logging)."""
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "current_step_index": self.current_step_index,
            "completed_steps": sorted(self.completed_steps),
            "pending_auth_gate": self.pending_auth_gate,
            "submit_error": self.submit_error,
            "receipt": self.receipt.to_dict() if self.receipt else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], reference_prefix: str = "WIZ") -> "WizardState":
        """
        Restore state from ``to_dict`` output.

        Validation results and in-flight flags are never restored: a restored
        session always starts idle and re-validates on the next action.
        """
        state = cls(reference_prefix=reference_prefix)
        state.wizard_id = data.get("wizard_id", state.wizard_id)
        state.reference_number = data.get("reference_number", state.reference_number)
        state.status = WizardStatus(data.get("status", WizardStatus.IN_PROGRESS.value))
        state.current_step_index = int(data.get("current_step_index", 1))
        state.completed_steps = set(data.get("completed_steps", []))
        state.pending_auth_gate = bool(data.get("pending_auth_gate", False))
        if data.get("receipt"):
            state.receipt = SubmissionReceipt(**data["receipt"])

        if "created_at" in data:
            state.created_at = datetime.fromisoformat(data["created_at"])
        if "updated_at" in data:
            state.updated_at = datetime.fromisoformat(data["updated_at"])
        return state
