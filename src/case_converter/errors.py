"""Error kinds and exceptions raised by the case converter."""

from __future__ import annotations

from enum import StrEnum

NO_INPUT_MESSAGE = "No input provided. Please provide text to convert."


class ErrorKind(StrEnum):
    """Category of a failed conversion request."""

    NO_INPUT = "NO_INPUT"
    INVALID_INPUT = "INVALID_INPUT"
    UNKNOWN = "UNKNOWN_ERROR"


class CaseConverterError(Exception):
    """Base error carrying an error kind and a process exit code.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    exit_code : int, default=1
        Exit status the CLI should terminate with.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        if exit_code < 0:
            raise ValueError("exit_code must be a non-negative integer.")
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class NoInputError(CaseConverterError):
    """Raised when the request carries no text to convert."""

    kind = ErrorKind.NO_INPUT


class InvalidInputError(CaseConverterError):
    """Raised when the request text has an unsupported shape."""

    kind = ErrorKind.INVALID_INPUT


class ProcessingError(CaseConverterError):
    """Raised when conversion fails unexpectedly."""

    kind = ErrorKind.UNKNOWN


class InputReadError(CaseConverterError):
    """Raised when an input source cannot be read."""

    kind = ErrorKind.UNKNOWN


_ERRORS_BY_KIND: dict[ErrorKind, type[CaseConverterError]] = {
    ErrorKind.NO_INPUT: NoInputError,
    ErrorKind.INVALID_INPUT: InvalidInputError,
    ErrorKind.UNKNOWN: ProcessingError,
}


def error_for_kind(kind: ErrorKind) -> type[CaseConverterError]:
    """Return the exception class matching an error kind."""
    return _ERRORS_BY_KIND[kind]
