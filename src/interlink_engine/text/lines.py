"""Locate the line around a position without scanning the whole text."""

from __future__ import annotations

from dataclasses import dataclass

from .positions import Position, Span
from .text import Text
from .validation import PositionLike

# "\r\n" segments as a single grapheme cluster, so it is one terminator.
LINE_TERMINATORS = frozenset({"\n", "\r", "\r\n", "\x85", "\u2028", "\u2029"})


@dataclass(frozen=True, slots=True)
class Line:
    """A terminator-delimited run of the source text and its content."""

    span: Span
    text: Text

    @property
    def source(self) -> Text:
        return self.span.owner

    @property
    def start(self) -> Position:
        return self.span.start

    @property
    def end(self) -> Position:
        return self.span.end

    @property
    def is_empty(self) -> bool:
        return len(self.text) == 0


def line_at(text: Text, position: PositionLike) -> Line:
    """Return the line containing ``position``.

    The line excludes its terminators. A position right before a terminator
    belongs to the line that terminator ends; a position right after one
    starts the next line.
    """

    offset = text.position(position).offset
    clusters = text.clusters

    start = offset
    while start > 0 and clusters[start - 1] not in LINE_TERMINATORS:
        start -= 1

    end = offset
    while end < len(clusters) and clusters[end] not in LINE_TERMINATORS:
        end += 1

    span = Span(Position(start, text), Position(end, text))
    return Line(span=span, text=text.slice(start, end))


__all__ = ["LINE_TERMINATORS", "Line", "line_at"]
