"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

LONG_INPUT_THRESHOLD = 100_000


@dataclass(frozen=True)
class ProcessingOptions:
    """Request pipeline configuration."""

    long_input_threshold: int = LONG_INPUT_THRESHOLD
