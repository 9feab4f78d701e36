"""Converter set: five case converters and their ordered table."""

from __future__ import annotations

from .case_converters import (
    to_lower_case,
    to_sentence_case,
    to_title_case,
    to_toggle_case,
    to_upper_case,
)
from .registry import CASE_CONVERSIONS, CaseConversion, get_case_converters, get_conversion

__all__ = [
    "CASE_CONVERSIONS",
    "CaseConversion",
    "get_case_converters",
    "get_conversion",
    "to_lower_case",
    "to_sentence_case",
    "to_title_case",
    "to_toggle_case",
    "to_upper_case",
]
