"""Input source adapters."""

from .input_sources import ArgumentInputSource, StdinInputSource

__all__ = ["ArgumentInputSource", "StdinInputSource"]
