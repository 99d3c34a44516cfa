"""Exceptions raised by the windowing helpers."""

from __future__ import annotations


class InvalidWindowSize(ValueError):
    """Raised when a window size smaller than one is requested."""

    def __init__(self, size: int) -> None:
        super().__init__(f"window size must be a positive integer (got {size})")
        self.size = size
