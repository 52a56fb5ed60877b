"""Immutable text measured in user-perceived characters."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence, Tuple, Union

import grapheme

from .positions import Position, Span
from .validation import PositionLike, ensure_position


class Text:
    """A string segmented into extended grapheme clusters.

    Every length, offset and span in the engine is expressed in clusters, so
    a flag emoji or a letter with combining accents counts as one character
    and one cursor stop. Slices reuse the already segmented clusters instead
    of re-segmenting their joined value.
    """

    __slots__ = ("_value", "_clusters")

    def __init__(self, value: str = "") -> None:
        if not isinstance(value, str):
            raise TypeError(f"Text expects a str, not {type(value).__name__}")
        self._value = value
        self._clusters: Tuple[str, ...] = tuple(grapheme.graphemes(value))

    @classmethod
    def coerce(cls, value: Union["Text", str]) -> "Text":
        if isinstance(value, Text):
            return value
        return cls(value)

    @classmethod
    def _from_clusters(cls, clusters: Sequence[str]) -> "Text":
        text = cls.__new__(cls)
        text._clusters = tuple(clusters)
        text._value = "".join(text._clusters)
        return text

    @property
    def value(self) -> str:
        return self._value

    @property
    def clusters(self) -> Tuple[str, ...]:
        return self._clusters

    def __len__(self) -> int:
        return len(self._clusters)

    def __iter__(self) -> Iterator[str]:
        return iter(self._clusters)

    def __reversed__(self) -> Iterator[str]:
        return reversed(self._clusters)

    def __getitem__(self, index: int) -> str:
        return self._clusters[index]

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Text({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Text):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __contains__(self, cluster: object) -> bool:
        return cluster in self._clusters

    # -- positions -----------------------------------------------------------

    def position(self, offset: PositionLike) -> Position:
        """Return a validated position of this text."""

        return ensure_position(self, offset)

    @property
    def start(self) -> Position:
        return Position(0, self)

    @property
    def end(self) -> Position:
        return Position(len(self._clusters), self)

    def span(self, start: PositionLike, length: int) -> Span:
        """Return the span of ``length`` characters starting at ``start``."""

        begin = self.position(start)
        return Span(begin, self.position(begin.offset + length))

    # -- slicing -------------------------------------------------------------

    def slice(self, start: PositionLike, end: PositionLike) -> "Text":
        lower = self.position(start).offset
        upper = self.position(end).offset
        if lower > upper:
            raise ValueError(f"slice start {lower} is after end {upper}")
        return Text._from_clusters(self._clusters[lower:upper])

    def split_at(self, position: PositionLike) -> Tuple["Text", "Text"]:
        """Cut the text into the characters before and at/after ``position``."""

        offset = self.position(position).offset
        return (
            Text._from_clusters(self._clusters[:offset]),
            Text._from_clusters(self._clusters[offset:]),
        )

    # -- lookup --------------------------------------------------------------

    def last_index_of(self, cluster: str) -> Optional[int]:
        for index in range(len(self._clusters) - 1, -1, -1):
            if self._clusters[index] == cluster:
                return index
        return None

    def contains(self, cluster: str) -> bool:
        return cluster in self._clusters


__all__ = ["Text"]
