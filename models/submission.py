# -*- coding: utf-8 -*-
"""
Submission record and receipt models.
"""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from .attachment import Attachment
from .location import ReportLocation


@dataclass(frozen=True)
class SubmissionRecord:
    """
    Normalized, immutable payload produced once from the wizard data.

    ``fields`` uses wire (backend) vocabulary. A failed dispatch never
    mutates the record; it can be sent again as-is.
    """

    reference_number: str
    fields: Mapping[str, Any]
    attachments: Tuple[Attachment, ...] = ()
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        object.__setattr__(self, "attachments", tuple(self.attachments))

    def get(self, key: str, default: Any = None) -> Any:
        return self.fields.get(key, default)

    def to_payload(self) -> Dict[str, Any]:
        """Plain JSON-ready dict of the fields (tags as lists, location as dict)."""
        payload = {}
        for key, value in self.fields.items():
            if isinstance(value, ReportLocation):
                payload[key] = value.to_dict()
            elif isinstance(value, (tuple, list, frozenset, set)):
                payload[key] = list(value)
            else:
                payload[key] = value
        return payload

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reference_number": self.reference_number,
            "fields": self.to_payload(),
            "attachments": [a.to_dict() for a in self.attachments],
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class SubmissionReceipt:
    """Transport acknowledgement: ``{id, status}`` plus optional extras."""

    id: str
    status: str
    submitted_at: Optional[str] = None
    estimated_response_time: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "SubmissionReceipt":
        data = data or {}
        return cls(
            id=str(data.get("id", "")),
            status=str(data.get("status", "pending")),
            submitted_at=data.get("submittedAt") or data.get("submitted_at"),
            estimated_response_time=(
                data.get("estimatedResponseTime") or data.get("estimated_response_time")
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "status": self.status,
            "submitted_at": self.submitted_at,
            "estimated_response_time": self.estimated_response_time,
        }
