# -*- coding: utf-8 -*-
"""
Disaster Report Wizard - wires the wizard engine for disaster impact reports.

Provides:
- Field editing (including tag toggles and map selection)
- Photo admission
- Step navigation with validation
- Gated submission through the reports API
- Review summary and draft persistence
"""

import os
from typing import Any, Dict, Iterable, List, Optional, Union

from app.config import Config
from models.attachment import Attachment
from models.location import ReportLocation
from services.disaster_report.schema import (
    STEP_REVIEW, build_report_schema, build_report_steps
)
from services.display_mappings import (
    get_disaster_category_display, get_severity_display, get_urgency_display,
    report_field_mappings
)
from services.error_mapper import map_exception
from services.translation_manager import tr
from services.wizard.attachment_manager import AdmissionResult, AttachmentManager
from services.wizard.field_store import FieldStore, is_empty
from services.wizard.step_navigator import StepNavigator
from services.wizard.step_validator import StepValidator
from services.wizard.submission_assembler import SubmissionAssembler
from services.wizard.submission_gate import SubmissionGate, SubmitFn, SubmitOutcome
from services.wizard.wizard_state import WizardState, WizardStatus
from utils.logger import get_logger

logger = get_logger(__name__)

_DISPLAY_FORMATTERS = {
    "disasterCategory": get_disaster_category_display,
    "severity": get_severity_display,
    "urgencyLevel": get_urgency_display,
}


class DisasterReportWizard:
    """
    One disaster report session.

    Usage:
        wizard = DisasterReportWizard(identity={"name": "Sara", "email": "sara@example.org"},
                                      api_client=client)
        wizard.set_field("disasterCategory", "Natural")
        ...
        wizard.advance()
        outcome = wizard.try_submit()

    UI layers connect to ``wizard.navigator`` and ``wizard.gate`` signals.
    """

    def __init__(self, identity: Optional[Dict[str, str]] = None, api_client=None,
                 state: Optional[WizardState] = None):
        """
        Args:
            identity: Logged-in user ``{name, email}`` used to pre-fill contact fields
            api_client: Transport with ``is_authenticated`` and ``submit_report(record)``
            state: Restored session state (drafts)
        """
        self.identity = dict(identity or {})
        self.api_client = api_client

        self.schema = build_report_schema()
        self.field_store = FieldStore(self.schema)
        self.validator = StepValidator(build_report_steps(), self.schema)
        self.state = state or WizardState(reference_prefix=Config.REFERENCE_PREFIX)
        self.navigator = StepNavigator(self.state, self.validator)
        self.attachments = AttachmentManager(
            max_attachments=Config.MAX_ATTACHMENTS,
            max_attachment_size=Config.MAX_ATTACHMENT_SIZE,
            allowed_types=Config.ALLOWED_ATTACHMENT_TYPES,
            state=self.state,
        )
        self.assembler = SubmissionAssembler(report_field_mappings())
        self.gate = SubmissionGate(
            self.navigator, self.field_store, self.attachments, self.assembler
        )

        if state is None:
            self._prefill_identity()
        logger.info(f"Report wizard ready: {self.state.reference_number}")

    # ==================== Properties ====================

    @property
    def current_step(self) -> int:
        return self.state.current_step_index

    @property
    def reference_number(self) -> str:
        return self.state.reference_number

    @property
    def status(self) -> WizardStatus:
        return self.state.status

    @property
    def is_submitting(self) -> bool:
        return self.state.is_submitting

    @property
    def submit_error(self) -> Optional[str]:
        return self.state.submit_error

    @property
    def status_message(self) -> Optional[str]:
        """
        User-facing message for the last submit attempt.

        ``submit_error`` keeps the transport text verbatim; this is the
        translated form shown in the Review step.
        """
        if self.state.pending_auth_gate:
            return tr("submit.login_required")
        if self.state.submit_exception is not None:
            return map_exception(self.state.submit_exception, context="submit_report")
        if self.state.is_submitted:
            return tr("success.report.submitted")
        return None

    @property
    def photos(self):
        return self.attachments.attachments

    # ==================== Field editing ====================

    def set_field(self, field_name: str, value: Any):
        """Store a field value (never validated on write)."""
        self.field_store.set(field_name, value)

    def get_field(self, field_name: str) -> Any:
        return self.field_store.get(field_name)

    def toggle_impact_type(self, impact_type: str):
        return self.field_store.toggle_tag("impactType", impact_type)

    def toggle_assistance_type(self, assistance_type: str):
        return self.field_store.toggle_tag("assistanceNeeded", assistance_type)

    def on_location_select(self, lat: float, lng: float, address: str = ""):
        """Store the point picked on the map."""
        self.field_store.set("location", ReportLocation(address=address, lat=lat, lng=lng))
        logger.debug(f"Location selected: {lat:.6f}, {lng:.6f}")

    # ==================== Photos ====================

    def add_photos(self, files: Iterable[Union[Attachment, str, os.PathLike]]) -> AdmissionResult:
        """
        Admit photos. Paths are turned into attachments from file metadata.

        Returns:
            AdmissionResult with accepted items and per-file rejection messages
        """
        items = [
            f if isinstance(f, Attachment) else Attachment.from_path(os.fspath(f))
            for f in files
        ]
        return self.attachments.add(items)

    def remove_photo(self, index: int) -> Optional[Attachment]:
        return self.attachments.remove(index)

    # ==================== Navigation ====================

    def can_advance(self) -> bool:
        return self.navigator.can_advance(self.current_step, self.field_store.snapshot())

    def advance(self) -> bool:
        return self.navigator.advance(self.current_step, self.field_store.snapshot())

    def retreat(self) -> bool:
        return self.navigator.retreat()

    def errors(self, step_index: Optional[int] = None) -> Dict[str, str]:
        """Stored validation errors of a step (current step by default)."""
        return self.state.errors_for(step_index or self.current_step)

    def visible_fields(self, step_index: Optional[int] = None) -> List[str]:
        step = self.validator.get_step(step_index or self.current_step)
        if step is None:
            return []
        return step.visible_fields(self.field_store.snapshot())

    def step_title(self, step_index: Optional[int] = None) -> str:
        step_index = step_index or self.current_step
        if step_index == STEP_REVIEW:
            return tr("wizard.step.review")
        return self.validator.step_title(step_index)

    def get_progress_percentage(self) -> float:
        return self.navigator.get_progress_percentage()

    # ==================== Submission ====================

    def try_submit(self, is_authenticated: Optional[bool] = None,
                   submit_fn: Optional[SubmitFn] = None) -> SubmitOutcome:
        """
        Submit from the Review step.

        Args:
            is_authenticated: Session state; read from the API client when omitted
            submit_fn: Transport; defaults to the API client's ``submit_report``
        """
        if submit_fn is None:
            if self.api_client is None:
                raise ValueError("No transport: pass submit_fn or an api_client")
            submit_fn = self.api_client.submit_report
        if is_authenticated is None:
            is_authenticated = bool(self.api_client and self.api_client.is_authenticated)
        return self.gate.try_submit(is_authenticated, submit_fn)

    # ==================== Review ====================

    def summary(self) -> List[Dict[str, Any]]:
        """
        Review data grouped by step: visible, non-empty fields with display values.

        Returns:
            ``[{"step": 1, "title": ..., "fields": {name: display_value}}, ...]``
        """
        snapshot = self.field_store.snapshot()
        sections = []
        for step in self.validator.steps:
            fields = {}
            for field_name in step.visible_fields(snapshot):
                value = snapshot.get(field_name)
                if is_empty(value):
                    continue
                fields[field_name] = self._display_value(field_name, value)
            sections.append({
                "step": step.index,
                "title": tr(step.title_key),
                "fields": fields,
            })
        sections.append({
            "step": STEP_REVIEW,
            "title": tr("wizard.step.review"),
            "fields": {"photos": [a.display_name for a in self.attachments.attachments]},
        })
        return sections

    @staticmethod
    def _display_value(field_name: str, value: Any) -> Any:
        formatter = _DISPLAY_FORMATTERS.get(field_name)
        if formatter:
            return formatter(value)
        if isinstance(value, ReportLocation):
            return value.address or f"{value.lat:.6f}, {value.lng:.6f}"
        if isinstance(value, tuple):
            return ", ".join(value)
        return value

    # ==================== Drafts ====================

    def export_draft(self) -> Dict[str, Any]:
        """
        Serialize the session. Only path-based photos can be carried over.
        """
        photos = []
        for attachment in self.attachments.attachments:
            if isinstance(attachment.handle, (str, os.PathLike)):
                photos.append({
                    "path": os.fspath(attachment.handle),
                    "mime_type": attachment.mime_type,
                    "size_bytes": attachment.size_bytes,
                    "file_name": attachment.file_name,
                })
            else:
                logger.warning(f"Photo {attachment.display_name} is a stream and is left out of the draft")
        return {
            "state": self.state.to_dict(),
            "fields": self.field_store.to_dict(),
            "photos": photos,
            "identity": dict(self.identity),
        }

    @classmethod
    def restore_draft(cls, draft: Dict[str, Any], api_client=None) -> "DisasterReportWizard":
        """Rebuild a wizard from ``export_draft`` output."""
        state = WizardState.from_dict(draft.get("state", {}), reference_prefix=Config.REFERENCE_PREFIX)
        wizard = cls(identity=draft.get("identity"), api_client=api_client, state=state)

        state.current_step_index = min(max(state.current_step_index, 1), wizard.navigator.confirm_index)
        wizard.field_store.load(draft.get("fields", {}))
        result = wizard.attachments.add(
            Attachment(handle=p["path"], mime_type=p["mime_type"],
                       size_bytes=p["size_bytes"], file_name=p.get("file_name"))
            for p in draft.get("photos", [])
        )
        if result.rejected:
            logger.warning(f"Draft photos dropped on restore: {result.messages}")

        logger.info(f"Restored draft {state.reference_number} at step {state.current_step_index}")
        return wizard

    def reset(self) -> bool:
        """Discard everything and start a new report. Refused while submitting."""
        if self.state.is_submitting:
            logger.warning("Cannot reset: submission in progress")
            return False
        self.field_store.reset()
        self.attachments.clear()
        self.state.restart()
        self.navigator.reset()
        self._prefill_identity()
        logger.info(f"Report wizard reset: {self.state.reference_number}")
        return True

    def _prefill_identity(self):
        if self.identity.get("name"):
            self.field_store.set("contactName", self.identity["name"])
        if self.identity.get("email"):
            self.field_store.set("contactEmail", self.identity["email"])
