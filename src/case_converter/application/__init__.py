"""Application-layer use-cases, options and result objects."""

from __future__ import annotations

from case_converter.application.options import ProcessingOptions
from case_converter.application.ports import InputSource
from case_converter.application.results import (
    ConversionFailure,
    ConversionOutcome,
    ConversionOutput,
    ConversionResult,
    ConversionSuccess,
)


def validate_and_convert(
    raw: object,
    options: ProcessingOptions | None = None,
) -> ConversionOutcome:
    """Validate and convert raw text via lazy use-case import."""
    from case_converter.application.use_cases import validate_and_convert as _impl

    return _impl(raw, options)


def convert_from_source(
    source: InputSource,
    options: ProcessingOptions | None = None,
) -> ConversionOutcome:
    """Read and convert text from an input source via lazy use-case import."""
    from case_converter.application.use_cases import convert_from_source as _impl

    return _impl(source, options)


def format_output(text: str) -> ConversionOutput:
    """Assemble all conversions of ``text`` via lazy use-case import."""
    from case_converter.application.use_cases import format_output as _impl

    return _impl(text)


__all__ = [
    "ConversionFailure",
    "ConversionOutcome",
    "ConversionOutput",
    "ConversionResult",
    "ConversionSuccess",
    "InputSource",
    "ProcessingOptions",
    "convert_from_source",
    "format_output",
    "validate_and_convert",
]
