"""Public text conversion API (delegates to application use-cases)."""

from __future__ import annotations

from typing import Optional

from case_converter.application.options import ProcessingOptions
from case_converter.application.results import ConversionFailure, ConversionOutput
from case_converter.application.use_cases import validate_and_convert
from case_converter.errors import error_for_kind


def convert_text(
    text: object,
    options: Optional[ProcessingOptions] = None,
) -> ConversionOutput:
    """Convert text into every supported case, raising on invalid input."""
    outcome = validate_and_convert(text, options)
    if isinstance(outcome, ConversionFailure):
        raise error_for_kind(outcome.kind)(outcome.message, exit_code=outcome.exit_code)
    return outcome.output
