"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass

from case_converter.errors import ErrorKind
from case_converter.types import CaseType


@dataclass(frozen=True)
class ConversionResult:
    """One labelled conversion of the input text."""

    case_type: CaseType
    label: str
    result: str


@dataclass(frozen=True)
class ConversionOutput:
    """All conversions produced for a single input, in output order."""

    input: str
    conversions: tuple[ConversionResult, ...]


@dataclass(frozen=True)
class ConversionSuccess:
    """Successful outcome of a conversion request."""

    output: ConversionOutput


@dataclass(frozen=True)
class ConversionFailure:
    """Failed outcome of a conversion request."""

    kind: ErrorKind
    message: str
    exit_code: int = 1

    def __post_init__(self) -> None:
        if self.exit_code < 0:
            raise ValueError("exit_code must be a non-negative integer.")


type ConversionOutcome = ConversionSuccess | ConversionFailure
