"""Pure string-to-string case converters.

Every converter is total: it accepts any ``str`` and never raises. Letter
classification for sentence and toggle case, and word boundaries for title
case, follow ASCII rules; lower and upper casing use full Unicode mappings.
"""

from __future__ import annotations

import re
import string

_WORD_START = re.compile(r"\b\w", re.ASCII)
_AFTER_SEPARATOR = re.compile(r"[-_.]\w", re.ASCII)
_ASCII_LETTERS = frozenset(string.ascii_letters)
_TOGGLE_TABLE = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)


def to_sentence_case(text: str) -> str:
    """Lower-case ``text`` and capitalise its first ASCII letter.

    Parameters
    ----------
    text : str
        Input text.

    Returns
    -------
    str
        Sentence-cased text. Characters before the first letter are kept
        verbatim; text without any ASCII letter is returned lower-cased.

    Examples
    --------
    >>> to_sentence_case("hello WORLD")
    'Hello world'
    >>> to_sentence_case("123abc")
    '123Abc'
    """
    lowered = text.lower()
    for index, char in enumerate(lowered):
        if char in _ASCII_LETTERS:
            return lowered[:index] + char.upper() + lowered[index + 1 :]
    return lowered


def to_lower_case(text: str) -> str:
    """Lower-case every character using Unicode case mappings."""
    return text.lower()


def to_upper_case(text: str) -> str:
    """Upper-case every character using Unicode case mappings."""
    return text.upper()


def to_title_case(text: str) -> str:
    """Capitalise the first character of every word.

    A word starts at the beginning of the text or after an ASCII non-word
    character. A word character directly after ``-``, ``_`` or ``.`` is
    capitalised as well, so ``hello_world`` becomes ``Hello_World``.

    Parameters
    ----------
    text : str
        Input text.

    Returns
    -------
    str
        Title-cased text with separators preserved as-is.
    """
    titled = _WORD_START.sub(lambda match: match.group(0).upper(), text.lower())
    return _AFTER_SEPARATOR.sub(
        lambda match: match.group(0)[0] + match.group(0)[1].upper(), titled
    )


def to_toggle_case(text: str) -> str:
    """Invert the case of each ASCII letter, leaving other characters alone."""
    return text.translate(_TOGGLE_TABLE)
