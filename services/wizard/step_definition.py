# -*- coding: utf-8 -*-
"""
Step definitions - declarative rule tables for each wizard step.

The same tables drive validation and the UI (which fields are shown),
so the two cannot drift apart.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from services.exceptions import WizardDefinitionError
from services.wizard.field_store import FieldSchema, is_empty


@dataclass(frozen=True)
class ConditionalRequirement:
    """When ``trigger_field`` equals ``trigger_value``, ``then_required_field`` is required."""

    trigger_field: str
    trigger_value: Any
    then_required_field: str

    def is_triggered(self, snapshot: Mapping[str, Any]) -> bool:
        current = snapshot.get(self.trigger_field)
        # Tag fields trigger on membership
        if isinstance(current, (tuple, list, set, frozenset)):
            return self.trigger_value in current
        return current == self.trigger_value


@dataclass(frozen=True)
class CrossFieldRule:
    """
    Predicate over several fields at once.

    Failures are reported under ``key`` (a synthetic, non-field key) so the
    UI can show a single combined message.
    """

    key: str
    fields: Tuple[str, ...]
    predicate: Callable[[Mapping[str, Any]], bool]
    message: str  # translation key

    def holds(self, snapshot: Mapping[str, Any]) -> bool:
        return bool(self.predicate(snapshot))


def at_least_one_of(key: str, fields: Sequence[str], message: str) -> CrossFieldRule:
    """Rule that passes when any of ``fields`` is non-empty."""
    fields = tuple(fields)
    return CrossFieldRule(
        key=key,
        fields=fields,
        predicate=lambda snapshot: any(not is_empty(snapshot.get(f)) for f in fields),
        message=message,
    )


@dataclass(frozen=True)
class StepDefinition:
    """Immutable definition of one wizard step."""

    index: int
    title_key: str
    required_fields: Tuple[str, ...] = ()
    conditional_requirements: Tuple[ConditionalRequirement, ...] = ()
    cross_field_rules: Tuple[CrossFieldRule, ...] = ()
    optional_fields: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "required_fields", tuple(dict.fromkeys(self.required_fields)))
        object.__setattr__(self, "conditional_requirements", tuple(self.conditional_requirements))
        object.__setattr__(self, "cross_field_rules", tuple(self.cross_field_rules))
        object.__setattr__(self, "optional_fields", tuple(dict.fromkeys(self.optional_fields)))

    @property
    def conditional_fields(self) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(r.then_required_field for r in self.conditional_requirements))

    @property
    def fields(self) -> Tuple[str, ...]:
        """Every field this step owns, in display order."""
        ordered = list(self.required_fields)
        for rule in self.cross_field_rules:
            ordered.extend(rule.fields)
        ordered.extend(self.conditional_fields)
        ordered.extend(self.optional_fields)
        return tuple(dict.fromkeys(ordered))

    def triggered_fields(self, snapshot: Mapping[str, Any]) -> List[str]:
        """Conditionally required fields whose trigger currently matches."""
        triggered = []
        for rule in self.conditional_requirements:
            if rule.is_triggered(snapshot) and rule.then_required_field not in triggered:
                triggered.append(rule.then_required_field)
        return triggered

    def visible_fields(self, snapshot: Mapping[str, Any]) -> List[str]:
        """Fields to render: conditional ones only while their trigger matches."""
        hidden = set(self.conditional_fields) - set(self.triggered_fields(snapshot))
        return [f for f in self.fields if f not in hidden or f in self.required_fields]


def check_step_sequence(steps: Iterable[StepDefinition],
                        schema: Optional[FieldSchema] = None) -> List[StepDefinition]:
    """
    Verify steps are numbered 1..N without gaps and only name schema fields.

    Returns the steps sorted by index.
    """
    ordered = sorted(steps, key=lambda s: s.index)
    if not ordered:
        raise WizardDefinitionError("A wizard needs at least one step")

    expected = list(range(1, len(ordered) + 1))
    actual = [s.index for s in ordered]
    if actual != expected:
        raise WizardDefinitionError(f"Step indices must be contiguous from 1, got {actual}")

    if schema is not None:
        for step in ordered:
            referenced = list(step.fields)
            referenced.extend(r.trigger_field for r in step.conditional_requirements)
            unknown = [f for f in referenced if f not in schema]
            if unknown:
                raise WizardDefinitionError(
                    f"Step {step.index} references unknown fields: {', '.join(unknown)}"
                )
    return ordered
