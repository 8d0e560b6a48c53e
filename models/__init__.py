# -*- coding: utf-8 -*-
"""
Disaster Report Data Models
"""

from .location import ReportLocation
from .attachment import Attachment
from .submission import SubmissionRecord, SubmissionReceipt

__all__ = [
    "ReportLocation",
    "Attachment",
    "SubmissionRecord",
    "SubmissionReceipt",
]
