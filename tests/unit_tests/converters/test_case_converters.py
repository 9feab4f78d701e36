"""Unit tests for the individual case converters."""

from __future__ import annotations

import pytest

from case_converter.converters import (
    to_lower_case,
    to_sentence_case,
    to_title_case,
    to_toggle_case,
    to_upper_case,
)

ALL_CONVERTERS = [
    to_sentence_case,
    to_lower_case,
    to_upper_case,
    to_title_case,
    to_toggle_case,
]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("hello WORLD", "Hello world"),
        ("HELLO WORLD", "Hello world"),
        ("hELLO wORLD", "Hello world"),
        ("a", "A"),
        ("A", "A"),
        ("hello123 WORLD!", "Hello123 world!"),
        ("123abc", "123Abc"),
        ("123a456", "123A456"),
        ("  hello WORLD  ", "  Hello world  "),
        ("\thello\nWORLD\r", "\tHello\nworld\r"),
        ("!hello@WORLD#", "!Hello@world#"),
        ("v1.2.3-BETA", "V1.2.3-beta"),
    ],
)
def test_sentence_case(text: str, expected: str) -> None:
    """Capitalise the first ASCII letter and lower-case the rest."""
    assert to_sentence_case(text) == expected


def test_sentence_case_skips_non_ascii_letters() -> None:
    """Only an ASCII letter counts as the first letter."""
    assert to_sentence_case("ÉCOLE PARIS") == "éCole paris"
    assert to_sentence_case("CAFÉ NAÏVE") == "Café naïve"


def test_sentence_case_without_letters_lowercases_only() -> None:
    """Text without ASCII letters comes back lower-cased."""
    assert to_sentence_case("!@#$%") == "!@#$%"
    assert to_sentence_case("ПРИВЕТ") == "привет"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("HELLO WORLD", "hello world"),
        ("hELLO wORLD", "hello world"),
        ("HELLO123 WORLD!", "hello123 world!"),
        ("CAFÉ NAÏVE", "café naïve"),
        ("ПРИВЕТ МИР", "привет мир"),
    ],
)
def test_lower_case(text: str, expected: str) -> None:
    """Lower-case with full Unicode mappings."""
    assert to_lower_case(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("hello world", "HELLO WORLD"),
        ("hELLO wORLD", "HELLO WORLD"),
        ("123abc", "123ABC"),
        ("café naïve", "CAFÉ NAÏVE"),
        ("привет мир", "ПРИВЕТ МИР"),
    ],
)
def test_upper_case(text: str, expected: str) -> None:
    """Upper-case with full Unicode mappings."""
    assert to_upper_case(text) == expected


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("hello world", "Hello World"),
        ("HELLO WORLD", "Hello World"),
        ("hello", "Hello"),
        ("hello  world", "Hello  World"),
        ("hello   world   test", "Hello   World   Test"),
        ("hello123 world!", "Hello123 World!"),
        ("123abc def", "123abc Def"),
        ("123a456", "123a456"),
        ("hello-world", "Hello-World"),
        ("hello_world", "Hello_World"),
        ("hello.world", "Hello.World"),
        ("hello--world", "Hello--World"),
        ("v1.2.3-beta", "V1.2.3-Beta"),
        ("!hello@WORLD#", "!Hello@World#"),
        ("   hello WORLD   ", "   Hello World   "),
        ("hello\t\n\r WORLD", "Hello\t\n\r World"),
    ],
)
def test_title_case(text: str, expected: str) -> None:
    """Capitalise word starts and characters after separators."""
    assert to_title_case(text) == expected


def test_title_case_uses_ascii_word_boundaries() -> None:
    """Non-ASCII letters act as word separators."""
    assert to_title_case("café naïve") == "Café NaïVe"
    assert to_title_case("Hello 世界 WORLD") == "Hello 世界 World"


def test_title_case_keeps_symbol_only_text() -> None:
    """Punctuation-only text is unchanged."""
    special = "!@#$%^&*()_+-=[]{}|;:,.<>?"
    assert to_title_case(special) == special


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Hello World", "hELLO wORLD"),
        ("HELLO WORLD", "hello world"),
        ("hello world", "HELLO WORLD"),
        ("HeLLo WoRLd", "hEllO wOrlD"),
        ("Hello123 World!", "hELLO123 wORLD!"),
        ("123ABC def", "123abc DEF"),
        ("!@#$%", "!@#$%"),
    ],
)
def test_toggle_case(text: str, expected: str) -> None:
    """Swap the case of each ASCII letter."""
    assert to_toggle_case(text) == expected


@pytest.mark.parametrize("converter", ALL_CONVERTERS)
def test_empty_input_returns_empty(converter) -> None:
    """Every converter maps the empty string to itself."""
    assert converter("") == ""


@pytest.mark.parametrize("converter", ALL_CONVERTERS)
def test_digits_only_unchanged(converter) -> None:
    """Text without letters passes through every converter."""
    assert converter("1234567890") == "1234567890"


def test_emoji_pass_through() -> None:
    """Astral-plane symbols survive every converter intact."""
    text = "hello 🌍 WORLD!"
    assert to_sentence_case(text) == "Hello 🌍 world!"
    assert to_lower_case(text) == "hello 🌍 world!"
    assert to_upper_case(text) == "HELLO 🌍 WORLD!"
    assert to_title_case(text) == "Hello 🌍 World!"
    assert to_toggle_case(text) == "HELLO 🌍 world!"
