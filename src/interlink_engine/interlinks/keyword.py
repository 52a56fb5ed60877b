"""Detect the interlink keyword being typed at a cursor position."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from interlink_engine.runtime import telemetry
from interlink_engine.text import (
    PositionLike,
    Span,
    Text,
    line_at,
    to_absolute,
    to_relative,
)

from .balance import has_unbalanced_closing
from .markers import MarkerPair
from .scanner import trailing_keyword

LOGGER_NAME = "interlink_engine.interlinks"


@dataclass(frozen=True, slots=True)
class KeywordMatch:
    """Keyword typed after an unmatched opening marker.

    ``span`` is expressed in the coordinates of the queried text and always
    covers exactly ``keyword``.
    """

    span: Span
    keyword: Text

    @property
    def start(self) -> int:
        return self.span.start.offset

    @property
    def end(self) -> int:
        return self.span.end.offset


def interlink_keyword(
    text: Union[Text, str],
    position: PositionLike,
    opening: str = "[",
    closing: str = "]",
) -> Optional[KeywordMatch]:
    """Return the ``[keyword`` being typed at ``position``, if any.

    Only the line holding ``position`` is examined. Returns ``None`` when a
    closing marker to the right of the cursor is left unmatched, when no
    opening marker precedes the cursor on its line, or when the text after
    that marker is empty or already closed.

    Raises
    ------
    PositionOutOfRangeError
        ``position`` is negative or past the end of ``text``.
    ForeignPositionError
        ``position`` was created for a different text.
    """

    markers = MarkerPair(opening, closing)
    source = Text.coerce(text)
    cursor = source.position(position)

    with telemetry.span(
        "interlinks::keyword",
        logger_name=LOGGER_NAME,
        component="interlinks",
        metadata={"position": cursor.offset},
    ) as handle:
        line = line_at(source, cursor)
        handle.add_metadata("line_length", len(line.text))
        if line.is_empty:
            return None

        relative = to_relative(cursor, line)
        if relative is None:
            return None

        lhs, rhs = line.text.split_at(relative)
        if has_unbalanced_closing(rhs, markers):
            return None

        found = trailing_keyword(lhs, markers)
        if found is None:
            return None

        # lhs is a prefix of the line, so its offsets are line offsets too.
        start = to_absolute(line.text.position(found.start.offset), line)
        match = KeywordMatch(
            span=source.span(start, len(found.keyword)),
            keyword=found.keyword,
        )

    telemetry.record_event(
        "interlinks::match",
        level="debug",
        data={"keyword": match.keyword.value, "start": match.start, "end": match.end},
        logger_name=LOGGER_NAME,
    )
    return match


__all__ = ["KeywordMatch", "interlink_keyword"]
