"""Detect in-progress ``[keyword`` interlinks at an editor cursor."""

from .interlinks import KeywordMatch, MarkerPair, interlink_keyword
from .text import (
    ForeignPositionError,
    Position,
    PositionOutOfRangeError,
    Span,
    Text,
    TextValidationError,
)

__all__ = [
    "interlink_keyword",
    "KeywordMatch",
    "MarkerPair",
    "Text",
    "Position",
    "Span",
    "TextValidationError",
    "PositionOutOfRangeError",
    "ForeignPositionError",
]

__version__ = "0.1.0"
