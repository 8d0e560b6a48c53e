# -*- coding: utf-8 -*-
"""
Disaster Report Wizard Application Core Module
"""

from .config import Config, Vocabularies

__all__ = ["Config", "Vocabularies"]
