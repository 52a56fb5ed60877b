"""Convert positions between the full text and one of its lines."""

from __future__ import annotations

from typing import Optional

from .lines import Line
from .positions import Position
from .text import Text
from .validation import PositionLike


def character_count(text: Text, start: PositionLike, end: PositionLike) -> int:
    """Return the number of grapheme clusters between two positions."""

    return text.position(end).offset - text.position(start).offset


def to_relative(absolute: PositionLike, line: Line) -> Optional[Position]:
    """Re-express an absolute position as a position inside ``line.text``.

    Returns ``None`` when the position lies outside the line (its boundaries
    are included).
    """

    resolved = line.source.position(absolute)
    if not line.span.contains(resolved):
        return None
    distance = character_count(line.source, line.start, resolved)
    return line.text.position(distance)


def to_absolute(relative: PositionLike, line: Line) -> Position:
    """Re-express a position of ``line.text`` in the full text."""

    resolved = line.text.position(relative)
    return line.start.advanced(resolved.offset)


__all__ = ["character_count", "to_absolute", "to_relative"]
