"""Ordered table of case conversions and lookup helpers."""

from __future__ import annotations

from dataclasses import dataclass

from case_converter.converters.case_converters import (
    to_lower_case,
    to_sentence_case,
    to_title_case,
    to_toggle_case,
    to_upper_case,
)
from case_converter.types import CaseConverter, CaseConverterMap, CaseType


@dataclass(frozen=True)
class CaseConversion:
    """One entry of the conversion table."""

    case_type: CaseType
    label: str
    convert: CaseConverter


# Output order is user-visible; keep it aligned with CaseType.
CASE_CONVERSIONS: tuple[CaseConversion, ...] = (
    CaseConversion(CaseType.SENTENCE, "Sentence case", to_sentence_case),
    CaseConversion(CaseType.LOWERCASE, "lowercase", to_lower_case),
    CaseConversion(CaseType.UPPERCASE, "UPPERCASE", to_upper_case),
    CaseConversion(CaseType.TITLE, "Title Case", to_title_case),
    CaseConversion(CaseType.TOGGLE, "tOGGLE cASE", to_toggle_case),
)


def get_case_converters() -> CaseConverterMap:
    """Return converters keyed by case type.

    Returns
    -------
    Mapping[CaseType, CaseConverter]
        Converter functions in output order.
    """
    return {entry.case_type: entry.convert for entry in CASE_CONVERSIONS}


def get_conversion(case_type: CaseType) -> CaseConversion:
    """Look up the table entry for a case type.

    Parameters
    ----------
    case_type : CaseType
        Case type to look up.

    Returns
    -------
    CaseConversion
        Matching table entry.

    Raises
    ------
    KeyError
        If ``case_type`` has no entry.
    """
    for entry in CASE_CONVERSIONS:
        if entry.case_type == case_type:
            return entry
    raise KeyError(f"Unknown case type '{case_type}'.")
