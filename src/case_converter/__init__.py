"""Top-level API for text case conversion."""

from __future__ import annotations

from case_converter.application.options import ProcessingOptions
from case_converter.application.results import ConversionOutput
from case_converter.converters import (
    get_case_converters,
    to_lower_case,
    to_sentence_case,
    to_title_case,
    to_toggle_case,
    to_upper_case,
)
from case_converter.types import CaseType

__version__ = "1.0.0"


def convert_text(
    text: object,
    options: ProcessingOptions | None = None,
) -> ConversionOutput:
    """Convert text into all five case formats.

    Parameters
    ----------
    text : object
        Text to convert. Must be a non-blank string.
    options : ProcessingOptions | None, default=None
        Pipeline configuration.

    Returns
    -------
    ConversionOutput
        The input and its labelled conversions, in output order.

    Raises
    ------
    CaseConverterError
        ``NoInputError`` for blank text, ``InvalidInputError`` for non-string
        values, ``ProcessingError`` for unexpected failures.
    """
    from .api import convert_text as _impl

    return _impl(text, options)


__all__ = [
    "CaseType",
    "ConversionOutput",
    "ProcessingOptions",
    "convert_text",
    "get_case_converters",
    "to_lower_case",
    "to_sentence_case",
    "to_title_case",
    "to_toggle_case",
    "to_upper_case",
]
