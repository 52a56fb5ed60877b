"""Grapheme-aware text, positions, lines and the position mapper."""

from .errors import ForeignPositionError, PositionOutOfRangeError, TextValidationError
from .lines import LINE_TERMINATORS, Line, line_at
from .mapper import character_count, to_absolute, to_relative
from .positions import Position, Span
from .text import Text
from .validation import PositionLike, ensure_position

__all__ = [
    "Text",
    "Position",
    "PositionLike",
    "Span",
    "Line",
    "LINE_TERMINATORS",
    "line_at",
    "character_count",
    "to_relative",
    "to_absolute",
    "ensure_position",
    "TextValidationError",
    "PositionOutOfRangeError",
    "ForeignPositionError",
]
