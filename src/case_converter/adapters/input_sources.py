"""Input sources feeding raw text into the conversion pipeline."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import BinaryIO, TextIO

from case_converter.errors import InputReadError


class ArgumentInputSource:
    """Text supplied as free-form command-line arguments."""

    def __init__(self, args: Sequence[str]) -> None:
        self._args = tuple(args)

    def read(self) -> str | None:
        """Join the arguments with single spaces.

        Returns
        -------
        str | None
            Joined text, or ``None`` when no arguments were given.
        """
        if not self._args:
            return None
        return " ".join(self._args)


class StdinInputSource:
    """Text piped through standard input.

    Bytes are decoded as UTF-8; invalid sequences become U+FFFD instead of
    failing the read.
    """

    def __init__(self, stream: TextIO | BinaryIO | None = None) -> None:
        self._stream = stream

    def is_available(self) -> bool:
        """Return ``True`` when the stream is not an interactive terminal."""
        stream = self._resolve_stream()
        try:
            return not stream.isatty()
        except (AttributeError, ValueError):
            return False

    def read(self) -> str | None:
        """Read the stream to completion, decode it and strip surrounding whitespace.

        Returns
        -------
        str | None
            Stripped text, or ``None`` when standard input is a terminal.

        Raises
        ------
        InputReadError
            If reading from the stream fails.
        """
        if not self.is_available():
            return None
        try:
            stream = self._resolve_stream()
            data = getattr(stream, "buffer", stream).read()
        except OSError as exc:
            raise InputReadError(f"Failed to read from stdin: {exc}") from exc
        if isinstance(data, bytes):
            data = data.decode("utf-8", errors="replace")
        return data.strip()

    def _resolve_stream(self) -> TextIO | BinaryIO:
        return self._stream if self._stream is not None else sys.stdin
