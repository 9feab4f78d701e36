"""Shared enumerations and type aliases for case conversion."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum


class CaseType(StrEnum):
    """Supported case conversion types, in output order."""

    SENTENCE = "sentence"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"
    TITLE = "title"
    TOGGLE = "toggle"


type CaseConverter = Callable[[str], str]
type CaseConverterMap = Mapping[CaseType, CaseConverter]
