"""Find the keyword trailing the last opening marker of a fragment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from interlink_engine.text import Position, Text

from .markers import DEFAULT_MARKERS, MarkerPair


@dataclass(frozen=True, slots=True)
class TrailingKeyword:
    """Keyword found at the tail of a fragment.

    ``start`` is a position of the scanned fragment, right after the marker.
    """

    start: Position
    keyword: Text


def trailing_keyword(
    fragment: Union[Text, str], markers: MarkerPair = DEFAULT_MARKERS
) -> Optional[TrailingKeyword]:
    """Return the text following the rightmost opening marker, if any.

    Example: ``"Text [keyword"`` yields ``keyword``. An empty tail, or one that
    already holds a closing marker, is not an in-progress keyword.
    """

    source = Text.coerce(fragment)
    marker_index = source.last_index_of(markers.opening)
    if marker_index is None:
        return None

    start = source.position(marker_index + 1)
    keyword = source.slice(start, source.end)
    if not keyword or keyword.contains(markers.closing):
        return None

    return TrailingKeyword(start=start, keyword=keyword)


__all__ = ["TrailingKeyword", "trailing_keyword"]
