#!/usr/bin/env python3
"""Examples for using the case converter as a library."""

from __future__ import annotations

from case_converter import CaseType, convert_text, get_case_converters
from case_converter.application import ConversionFailure, validate_and_convert
from case_converter.converters import get_conversion


def example_single_converter() -> None:
    converters = get_case_converters()
    print(converters[CaseType.TITLE]("release notes for v1.2.3-beta"))


def example_single_entry() -> None:
    entry = get_conversion(CaseType.TOGGLE)
    print(f"{entry.label}: {entry.convert('Hello World')}")


def example_all_conversions() -> None:
    output = convert_text("hello WORLD")
    for item in output.conversions:
        print(f"{item.case_type.value:>9}  {item.label}: {item.result}")


def example_tagged_outcome() -> None:
    outcome = validate_and_convert("   ")
    if isinstance(outcome, ConversionFailure):
        print(f"{outcome.kind} (exit {outcome.exit_code}): {outcome.message}")


def main() -> None:
    """Run all examples."""
    example_single_converter()
    example_single_entry()
    example_all_conversions()
    example_tagged_outcome()


if __name__ == "__main__":
    main()
