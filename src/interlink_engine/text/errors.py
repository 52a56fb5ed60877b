"""Errors raised when callers hand the text model invalid positions."""

from __future__ import annotations

from typing import Any


class TextValidationError(RuntimeError):
    """Raised when a position or editor location does not fit its text."""

    def __init__(self, message: str, *, position: Any = None) -> None:
        super().__init__(message)
        self.position = position


class PositionOutOfRangeError(TextValidationError):
    """Raised for offsets outside ``[0, len(text)]``."""


class ForeignPositionError(TextValidationError):
    """Raised when a position created for one text is used with another."""


__all__ = [
    "TextValidationError",
    "PositionOutOfRangeError",
    "ForeignPositionError",
]
