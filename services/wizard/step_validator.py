# -*- coding: utf-8 -*-
"""
Step validation service for multi-step wizards.

Validates snapshot data for each step without UI coupling. Validation is a
pure function of the snapshot: errors are returned as data, never raised.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from services.translation_manager import tr
from services.wizard.field_store import FieldSchema, is_empty
from services.wizard.step_definition import StepDefinition, check_step_sequence


class StepValidator:
    """Validates wizard step data against declarative step definitions."""

    def __init__(self, steps: Sequence[StepDefinition], schema: FieldSchema):
        self.schema = schema
        self.steps: List[StepDefinition] = check_step_sequence(steps, schema)
        self._steps_by_index = {step.index: step for step in self.steps}

    @property
    def step_count(self) -> int:
        return len(self.steps)

    def get_step(self, step_index: int) -> Optional[StepDefinition]:
        return self._steps_by_index.get(step_index)

    def validate_step(self, step_index: int, snapshot: Mapping[str, Any]) -> Dict[str, str]:
        """
        Validate one step.

        Args:
            step_index: 1-based step index
            snapshot: Immutable copy of the field store

        Returns:
            Mapping of field name (or cross-field key) to error message.
            Empty when the step is valid or has no rules (e.g. Confirm).
        """
        step = self._steps_by_index.get(step_index)
        if step is None:
            return {}

        errors: Dict[str, str] = {}

        required = list(step.required_fields)
        for field_name in step.triggered_fields(snapshot):
            if field_name not in required:
                required.append(field_name)

        for field_name in required:
            self._check_field(field_name, snapshot, errors, required=True)

        for field_name in step.optional_fields:
            if field_name not in required:
                self._check_field(field_name, snapshot, errors, required=False)

        for rule in step.cross_field_rules:
            if not rule.holds(snapshot):
                errors[rule.key] = tr(rule.message)

        return errors

    def is_step_valid(self, step_index: int, snapshot: Mapping[str, Any]) -> bool:
        return not self.validate_step(step_index, snapshot)

    def validate_all(self, snapshot: Mapping[str, Any]) -> Dict[int, Dict[str, str]]:
        """Validate every step; only failing steps appear in the result."""
        results = {}
        for step in self.steps:
            errors = self.validate_step(step.index, snapshot)
            if errors:
                results[step.index] = errors
        return results

    def step_title(self, step_index: int) -> str:
        step = self._steps_by_index.get(step_index)
        return tr(step.title_key) if step else ""

    def _check_field(self, field_name: str, snapshot: Mapping[str, Any],
                     errors: Dict[str, str], required: bool):
        spec = self.schema.get(field_name)
        value = snapshot.get(field_name, spec.empty_value)

        if is_empty(value):
            if required:
                errors[field_name] = self._required_message(spec)
            return

        # Length is only checked once the value is present
        if spec.min_length and isinstance(value, str) and len(value.strip()) < spec.min_length:
            if spec.min_length_message:
                errors[field_name] = tr(spec.min_length_message, min=spec.min_length)
            else:
                errors[field_name] = tr(
                    "validation.min_length", field=self._label(spec), min=spec.min_length
                )

    def _required_message(self, spec) -> str:
        if spec.required_message:
            return tr(spec.required_message)
        return tr("validation.field_required", field=self._label(spec))

    @staticmethod
    def _label(spec) -> str:
        return tr(spec.label_key) if spec.label_key else spec.name
