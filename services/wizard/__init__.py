# -*- coding: utf-8 -*-
"""
Wizard engine - step/validation/submission core for multi-step forms.

Provides field storage, declarative step rules, progress control,
attachment admission, payload assembly and the submission gate.
"""

from .field_store import FieldKind, FieldSpec, FieldSchema, FieldStore, is_empty
from .step_definition import (
    StepDefinition, ConditionalRequirement, CrossFieldRule, at_least_one_of
)
from .step_validator import StepValidator
from .wizard_state import WizardState, WizardStatus
from .step_navigator import StepNavigator
from .attachment_manager import AttachmentManager, AdmissionResult, RejectionReason
from .submission_assembler import SubmissionAssembler, FieldMapping
from .submission_gate import SubmissionGate, SubmitOutcome

__all__ = [
    'FieldKind',
    'FieldSpec',
    'FieldSchema',
    'FieldStore',
    'is_empty',
    'StepDefinition',
    'ConditionalRequirement',
    'CrossFieldRule',
    'at_least_one_of',
    'StepValidator',
    'WizardState',
    'WizardStatus',
    'StepNavigator',
    'AttachmentManager',
    'AdmissionResult',
    'RejectionReason',
    'SubmissionAssembler',
    'FieldMapping',
    'SubmissionGate',
    'SubmitOutcome',
]
