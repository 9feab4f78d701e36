"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol


class InputSource(Protocol):
    """Provide the raw text of a conversion request."""

    def read(self) -> str | None:
        """Return the raw text, or ``None`` when no input is available."""
