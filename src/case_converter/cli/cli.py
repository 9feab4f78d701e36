#!/usr/bin/env python3
"""
case_converter.cli.cli

Typer-based CLI printing the five case conversions of a piece of text.

Examples
--------
Convert text passed as arguments:

    case-converter "hello WORLD"

Convert text piped through standard input:

    echo "hello WORLD" | case-converter
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Sequence

import typer
from typer.core import TyperCommand

from case_converter import __version__
from case_converter.adapters.input_sources import ArgumentInputSource, StdinInputSource
from case_converter.application.results import (
    ConversionFailure,
    ConversionOutput,
    ConversionSuccess,
)
from case_converter.application.use_cases import convert_from_source
from case_converter.errors import CaseConverterError

HELP_FLAGS = frozenset({"-h", "--help"})
VERSION_FLAGS = frozenset({"-v", "--version"})
DEBUG_FLAG = "--debug"
NO_TERMINAL_INPUT_MESSAGE = "No input provided. Use --help for usage information."
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

OUTPUT_FORMATS_HELP = """\
Output formats:

- Sentence case - First letter capitalised, rest lowercase
- lowercase - All letters in lowercase
- UPPERCASE - All letters in uppercase
- Title Case - First letter of each word capitalised
- tOGGLE cASE - Invert the case of each letter

Examples:

- case-converter "hello WORLD"
- echo "hello WORLD" | case-converter
"""


class ExactFlagCommand(TyperCommand):
    """Command that only recognises its flags as exact, whole tokens.

    Help and version win over everything else, in the order they appear.
    Every other token, including ``--`` and option-like words such as
    ``-verbose``, is passed through as text.
    """

    def parse_args(self, ctx: typer.Context, args: list[str]) -> list[str]:
        for arg in args:
            if arg in HELP_FLAGS:
                return super().parse_args(ctx, ["--help"])
            if arg in VERSION_FLAGS:
                return super().parse_args(ctx, ["--version"])

        options = [arg for arg in args if arg == DEBUG_FLAG]
        words = [arg for arg in args if arg != DEBUG_FLAG]
        if words:
            options.append("--")
        return super().parse_args(ctx, options + words)


app = typer.Typer(
    name="case-converter",
    help="Convert text to various case formats.",
    add_completion=False,
    rich_markup_mode="markdown",
)


def _configure_logging(debug: bool) -> None:
    """Send log records to stderr, verbosely when debugging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def _version_callback(value: bool) -> None:
    """Print the version string and stop processing."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


def _print_error(message: str, exit_code: int) -> int:
    """Print a user-facing error and return the exit code to use."""
    typer.echo(f"Error: {message}", err=True)
    return exit_code if exit_code >= 0 else 1


def _print_unexpected_error(exc: Exception, debug: bool) -> int:
    """Print an unexpected failure.

    Parameters
    ----------
    exc : Exception
        Exception raised while processing the request.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"Unexpected error: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    return 1


def format_lines(output: ConversionOutput) -> list[str]:
    """Render a conversion output as display lines.

    Parameters
    ----------
    output : ConversionOutput
        Conversions to render.

    Returns
    -------
    list[str]
        ``Input:`` line, a blank separator, then one ``label: result`` line per
        conversion.
    """
    lines = [f"Input: {output.input}", ""]
    lines.extend(f"{item.label}: {item.result}" for item in output.conversions)
    return lines


@app.command(
    cls=ExactFlagCommand,
    epilog=OUTPUT_FORMATS_HELP,
    context_settings={"help_option_names": ["-h", "--help"]},
)
def convert(
    text: list[str] | None = typer.Argument(
        None,
        help="Text to convert (if not provided, reads from stdin).",
        show_default=False,
    ),
    version: bool = typer.Option(
        False,
        "-v",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert text to various case formats."""
    del version
    _configure_logging(debug)

    args: Sequence[str] = text or ()
    if args:
        source: ArgumentInputSource | StdinInputSource = ArgumentInputSource(args)
    else:
        source = StdinInputSource()
        if not source.is_available():
            raise typer.Exit(code=_print_error(NO_TERMINAL_INPUT_MESSAGE, 1))

    try:
        outcome = convert_from_source(source)
    except CaseConverterError as exc:
        raise typer.Exit(code=_print_error(exc.message, exc.exit_code))
    except Exception as exc:
        raise typer.Exit(code=_print_unexpected_error(exc, debug))

    if isinstance(outcome, ConversionFailure):
        raise typer.Exit(code=_print_error(outcome.message, outcome.exit_code))
    if not isinstance(outcome, ConversionSuccess):
        unexpected = TypeError(f"Unrecognised conversion outcome: {outcome!r}")
        raise typer.Exit(code=_print_unexpected_error(unexpected, debug))

    for line in format_lines(outcome.output):
        typer.echo(line)


if __name__ == "__main__":
    app()
