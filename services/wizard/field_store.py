# -*- coding: utf-8 -*-
"""
Field Store - holds the current value of every field of a multi-step form.

Writes are never validated (the UI stays responsive while typing);
validation and payload assembly read immutable snapshots instead.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from models.location import ReportLocation
from utils.logger import get_logger

logger = get_logger(__name__)


class FieldKind(Enum):
    """Kinds of values a form field can hold."""
    TEXT = "text"
    NUMBER = "number"
    CHOICE = "choice"
    LOCATION = "location"
    TAGS = "tags"
    FLAG = "flag"


EMPTY_SENTINELS = {
    FieldKind.TEXT: "",
    FieldKind.NUMBER: None,
    FieldKind.CHOICE: "",
    FieldKind.LOCATION: None,
    FieldKind.TAGS: (),
    FieldKind.FLAG: False,
}


def is_empty(value: Any) -> bool:
    """
    Check whether a field value counts as "not provided".

    Strings are trimmed first, so whitespace-only input is empty.
    Zero is a real number, not an empty one.
    """
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (tuple, list, set, frozenset)):
        return len(value) == 0
    return False


@dataclass(frozen=True)
class FieldSpec:
    """Static description of one form field."""

    name: str
    kind: FieldKind = FieldKind.TEXT
    label_key: Optional[str] = None
    required_message: Optional[str] = None  # translation key
    min_length: Optional[int] = None
    min_length_message: Optional[str] = None  # translation key, receives {min}
    options: Tuple[str, ...] = ()

    @property
    def empty_value(self) -> Any:
        return EMPTY_SENTINELS[self.kind]


class FieldSchema:
    """Ordered set of field specs; the source of truth for which keys exist."""

    def __init__(self, fields: Iterable[FieldSpec]):
        self._fields: Dict[str, FieldSpec] = {}
        for spec in fields:
            if spec.name in self._fields:
                raise ValueError(f"Duplicate field in schema: {spec.name}")
            self._fields[spec.name] = spec

    def __contains__(self, field_name: str) -> bool:
        return field_name in self._fields

    def __iter__(self):
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def names(self) -> List[str]:
        return list(self._fields.keys())

    def get(self, field_name: str) -> FieldSpec:
        """Get a field spec. Unknown names raise KeyError."""
        try:
            return self._fields[field_name]
        except KeyError:
            raise KeyError(f"Unknown field: {field_name}") from None

    def defaults(self) -> Dict[str, Any]:
        """Fresh mapping with every field set to its empty sentinel."""
        return {name: spec.empty_value for name, spec in self._fields.items()}


class FieldStore:
    """
    Mutable store of form values keyed by field name.

    Every schema key always holds a value (possibly its empty sentinel).
    """

    def __init__(self, schema: FieldSchema, initial: Optional[Dict[str, Any]] = None):
        self.schema = schema
        self._values: Dict[str, Any] = schema.defaults()
        self.updated_at: datetime = datetime.now()
        if initial:
            for field_name, value in initial.items():
                self.set(field_name, value)

    def set(self, field_name: str, value: Any):
        """Store a value. No validation happens here."""
        spec = self.schema.get(field_name)
        self._values[field_name] = self._normalize(spec, value)
        self.updated_at = datetime.now()

    def get(self, field_name: str) -> Any:
        spec = self.schema.get(field_name)
        return self._values.get(field_name, spec.empty_value)

    def snapshot(self) -> Mapping[str, Any]:
        """Read-only point-in-time copy for validation and assembly."""
        return MappingProxyType(dict(self._values))

    def toggle_tag(self, field_name: str, tag: str) -> Tuple[str, ...]:
        """Add the tag if absent, remove it if present. Returns the new tags."""
        current = self.get(field_name) or ()
        if tag in current:
            updated = tuple(t for t in current if t != tag)
        else:
            updated = tuple(current) + (tag,)
        self.set(field_name, updated)
        return updated

    def reset(self):
        """Return every field to its empty sentinel."""
        self._values = self.schema.defaults()
        self.updated_at = datetime.now()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize values (draft persistence)."""
        data = {}
        for field_name, value in self._values.items():
            if isinstance(value, ReportLocation):
                data[field_name] = value.to_dict()
            elif isinstance(value, tuple):
                data[field_name] = list(value)
            else:
                data[field_name] = value
        return data

    def load(self, data: Dict[str, Any]):
        """Restore values from ``to_dict`` output. Unknown keys are skipped."""
        for field_name, value in data.items():
            if field_name not in self.schema:
                logger.warning(f"Skipping unknown field in draft: {field_name}")
                continue
            self.set(field_name, value)

    @staticmethod
    def _normalize(spec: FieldSpec, value: Any) -> Any:
        if spec.kind == FieldKind.TAGS:
            if value is None:
                return ()
            if isinstance(value, str):
                return (value,)
            # Keep selection order, drop duplicates
            return tuple(dict.fromkeys(value))
        if spec.kind == FieldKind.LOCATION and isinstance(value, dict):
            return ReportLocation.from_dict(value)
        return value
