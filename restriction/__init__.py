#!/usr/bin/env python3
"""
Restriction Module

Character restriction for text fields: disallowed code point sets, the edit
filter that strips them, and ready-made presets.
"""

from .code_point_set import CodePointSet, MAX_CODE_POINT
from .filter import (RestrictionFilter, ViolationReport, FilterResult, EMPTY_REPORT,
                     process, find_violations, contains_violation)
from .presets import Preset, PRESETS, get_preset

__version__ = "1.0.0"

__all__ = [
    "CodePointSet",
    "MAX_CODE_POINT",
    "RestrictionFilter",
    "ViolationReport",
    "FilterResult",
    "EMPTY_REPORT",
    "process",
    "find_violations",
    "contains_violation",
    "Preset",
    "PRESETS",
    "get_preset",
]
