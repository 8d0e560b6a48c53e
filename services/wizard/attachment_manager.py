# -*- coding: utf-8 -*-
"""
Attachment Manager - client-side admission control for report attachments.

Checks each new file against a MIME allow-list, a per-item size ceiling and
the total count limit. Nothing is resized or re-encoded here.
"""

from dataclasses import dataclass, field
from enum import Enum
from fnmatch import fnmatch
from typing import Iterable, List, Optional, Sequence, Tuple

from models.attachment import Attachment
from services.translation_manager import tr
from services.wizard.wizard_state import WizardState
from utils.logger import get_logger

logger = get_logger(__name__)


class RejectionReason(Enum):
    UNSUPPORTED_TYPE = "unsupported_type"
    TOO_LARGE = "too_large"
    LIMIT_REACHED = "limit_reached"
    BUSY = "busy"


@dataclass(frozen=True)
class RejectedAttachment:
    attachment: Attachment
    reason: RejectionReason
    message: str


@dataclass
class AdmissionResult:
    """Outcome of one ``add`` call."""
    accepted: List[Attachment] = field(default_factory=list)
    rejected: List[RejectedAttachment] = field(default_factory=list)

    @property
    def messages(self) -> List[str]:
        return [r.message for r in self.rejected]


class AttachmentManager:
    """Owns the attachments of one wizard session."""

    def __init__(self, max_attachments: int, max_attachment_size: int,
                 allowed_types: Sequence[str] = ("image/*",),
                 state: Optional[WizardState] = None):
        """
        Args:
            max_attachments: Maximum number of accepted attachments
            max_attachment_size: Per-item ceiling in bytes
            allowed_types: MIME patterns, e.g. ``image/*`` or ``application/pdf``
            state: Wizard state; while it is submitting, changes are refused
        """
        self.max_attachments = max_attachments
        self.max_attachment_size = max_attachment_size
        self.allowed_types = tuple(t.lower() for t in allowed_types)
        self.state = state
        self._attachments: List[Attachment] = []

    @property
    def attachments(self) -> Tuple[Attachment, ...]:
        return tuple(self._attachments)

    @property
    def count(self) -> int:
        return len(self._attachments)

    @property
    def remaining_slots(self) -> int:
        return max(self.max_attachments - len(self._attachments), 0)

    @property
    def total_size(self) -> int:
        return sum(a.size_bytes for a in self._attachments)

    def is_allowed_type(self, mime_type: str) -> bool:
        mime_type = (mime_type or "").lower()
        return any(fnmatch(mime_type, pattern) for pattern in self.allowed_types)

    def add(self, files: Iterable[Attachment]) -> AdmissionResult:
        """
        Admit new attachments.

        Existing attachments are never evicted; once the limit is reached the
        rest of the new batch is rejected.
        """
        result = AdmissionResult()
        busy = self._is_busy()

        for attachment in files:
            reason = None
            if busy:
                reason = RejectionReason.BUSY
            elif not self.is_allowed_type(attachment.mime_type):
                reason = RejectionReason.UNSUPPORTED_TYPE
            elif attachment.size_bytes > self.max_attachment_size:
                reason = RejectionReason.TOO_LARGE
            elif len(self._attachments) >= self.max_attachments:
                reason = RejectionReason.LIMIT_REACHED

            if reason is None:
                self._attachments.append(attachment)
                result.accepted.append(attachment)
            else:
                result.rejected.append(
                    RejectedAttachment(attachment, reason, self._message(attachment, reason))
                )

        if result.rejected:
            logger.warning(
                f"Attachments: {len(result.accepted)} accepted, {len(result.rejected)} rejected "
                f"({', '.join(sorted({r.reason.value for r in result.rejected}))})"
            )
        else:
            logger.debug(f"Attachments: {len(result.accepted)} accepted")
        return result

    def remove(self, index: int) -> Optional[Attachment]:
        """
        Remove exactly one attachment.

        Indices shift after a removal; callers must not cache them.

        Returns:
            The removed attachment, or None while a submission is in flight
        """
        if self._is_busy():
            logger.warning("Cannot remove attachment: report is being or has been submitted")
            return None
        if index < 0 or index >= len(self._attachments):
            raise IndexError(f"Attachment index out of range: {index}")
        removed = self._attachments.pop(index)
        logger.debug(f"Removed attachment {removed.display_name}")
        return removed

    def clear(self):
        self._attachments.clear()

    def _is_busy(self) -> bool:
        """Attachments are frozen from dispatch onwards."""
        return bool(self.state and (self.state.is_submitting or self.state.is_submitted))

    def _message(self, attachment: Attachment, reason: RejectionReason) -> str:
        name = attachment.display_name
        if reason == RejectionReason.UNSUPPORTED_TYPE:
            return tr("attachment.rejected.unsupported_type", name=name, mime=attachment.mime_type)
        if reason == RejectionReason.TOO_LARGE:
            return tr("attachment.rejected.too_large", name=name,
                      max_mb=self.max_attachment_size // (1024 * 1024))
        if reason == RejectionReason.LIMIT_REACHED:
            return tr("attachment.rejected.limit_reached", name=name, max=self.max_attachments)
        if self.state and self.state.is_submitted:
            return tr("attachment.rejected.submitted", name=name)
        return tr("attachment.rejected.busy", name=name)
