# -*- coding: utf-8 -*-
"""
Submission Assembler - turns a field snapshot plus attachments into one
normalized SubmissionRecord.

Categorical UI labels are rewritten to backend vocabulary through static
mapping tables. Values without a table entry are kept verbatim.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence

from models.attachment import Attachment
from models.submission import SubmissionRecord
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class FieldMapping:
    """
    Label -> backend value table for one categorical field.

    With ``target`` set, the mapped value is written to that wire field and
    the source field is kept as entered.
    """

    source: str
    table: Mapping[Any, Any]
    target: Optional[str] = None

    @property
    def wire_field(self) -> str:
        return self.target or self.source

    def map_value(self, value: Any) -> Any:
        if isinstance(value, (tuple, list)):
            return tuple(self._lookup(v) for v in value)
        return self._lookup(value)

    def _lookup(self, value: Any) -> Any:
        if isinstance(value, Hashable) and value in self.table:
            return self.table[value]
        return value


class SubmissionAssembler:
    """Builds SubmissionRecords. Performs no validation."""

    def __init__(self, mappings: Sequence[FieldMapping] = ()):
        self.mappings = tuple(mappings)

    def assemble(self, snapshot: Mapping[str, Any], attachments: Iterable[Attachment],
                 reference_number: str = "") -> SubmissionRecord:
        """
        Args:
            snapshot: Immutable copy of the field store (already validated)
            attachments: Accepted attachments, in order
            reference_number: Session reference carried on the record

        Returns:
            Frozen SubmissionRecord
        """
        fields = dict(snapshot)
        unmapped = []
        for mapping in self.mappings:
            if mapping.source not in snapshot:
                continue
            value = snapshot[mapping.source]
            mapped = mapping.map_value(value)
            fields[mapping.wire_field] = mapped
            if mapped == value and value not in ("", None, ()):
                unmapped.append(mapping.source)

        if unmapped:
            logger.debug(f"No backend mapping for values of: {', '.join(unmapped)} (kept verbatim)")

        record = SubmissionRecord(
            reference_number=reference_number,
            fields=fields,
            attachments=tuple(attachments),
        )
        logger.info(
            f"Assembled submission {reference_number or '(no ref)'}: "
            f"{len(fields)} fields, {len(record.attachments)} attachments"
        )
        return record
