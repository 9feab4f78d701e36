"""Application use-cases orchestrating case conversion."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from case_converter.application.options import ProcessingOptions
from case_converter.application.ports import InputSource
from case_converter.application.results import (
    ConversionFailure,
    ConversionOutcome,
    ConversionOutput,
    ConversionResult,
    ConversionSuccess,
)
from case_converter.converters.registry import CASE_CONVERSIONS
from case_converter.errors import NO_INPUT_MESSAGE, ErrorKind
from case_converter.schemas import NO_INPUT_ERROR_TYPE, ConversionRequest

logger = logging.getLogger(__name__)


def format_output(text: str) -> ConversionOutput:
    """Run every case conversion on ``text`` without validation.

    Parameters
    ----------
    text : str
        Text to convert.

    Returns
    -------
    ConversionOutput
        The input and its five labelled conversions, in output order.
    """
    conversions = tuple(
        ConversionResult(
            case_type=entry.case_type,
            label=entry.label,
            result=entry.convert(text),
        )
        for entry in CASE_CONVERSIONS
    )
    return ConversionOutput(input=text, conversions=conversions)


def _failure_from_validation(exc: ValidationError) -> ConversionFailure:
    if any(error["type"] == NO_INPUT_ERROR_TYPE for error in exc.errors()):
        return ConversionFailure(kind=ErrorKind.NO_INPUT, message=NO_INPUT_MESSAGE)
    return ConversionFailure(
        kind=ErrorKind.INVALID_INPUT,
        message=f"Invalid input: {exc.errors()[0]['msg']}",
    )


def validate_and_convert(
    raw: object,
    options: ProcessingOptions | None = None,
) -> ConversionOutcome:
    """Use-case: validate raw text and produce all case conversions.

    Parameters
    ----------
    raw : object
        Raw request text. ``None``, empty and whitespace-only text are
        rejected; the original untrimmed value is what gets converted.
    options : ProcessingOptions | None, default=None
        Pipeline configuration.

    Returns
    -------
    ConversionSuccess | ConversionFailure
        Tagged outcome. Failures carry an error kind, message and exit code.
    """
    options = options or ProcessingOptions()
    try:
        request = ConversionRequest(text=raw)
    except ValidationError as exc:
        return _failure_from_validation(exc)

    text = request.text
    if len(text) > options.long_input_threshold:
        logger.warning(
            "Processing very long input (%d characters) may take some time.",
            len(text),
        )

    try:
        output = format_output(text)
    except Exception as exc:
        logger.exception("unexpected error during case conversion")
        return ConversionFailure(
            kind=ErrorKind.UNKNOWN,
            message=f"Failed to process input: {exc}",
        )
    return ConversionSuccess(output=output)


def convert_from_source(
    source: InputSource,
    options: ProcessingOptions | None = None,
) -> ConversionOutcome:
    """Use-case: read text from an input source and convert it."""
    return validate_and_convert(source.read(), options)
