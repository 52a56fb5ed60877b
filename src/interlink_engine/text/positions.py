"""Cursor positions and spans bound to a specific ``Text`` value."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .text import Text


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Cursor stop inside ``owner``, counted in grapheme clusters.

    ``offset`` ranges over ``[0, len(owner)]``; the end offset sits after the
    last character. Positions compare by offset only, so mixing positions from
    different texts is caught by the text model rather than by ``==``.
    """

    offset: int
    owner: "Text" = field(compare=False, repr=False)

    def advanced(self, by: int) -> "Position":
        return self.owner.position(self.offset + by)


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open ``[start, end)`` range within a single text."""

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.start.owner is not self.end.owner:
            raise ValueError("span endpoints belong to different texts")
        if self.start.offset > self.end.offset:
            raise ValueError(
                f"span start {self.start.offset} is after end {self.end.offset}"
            )

    @property
    def owner(self) -> "Text":
        return self.start.owner

    @property
    def length(self) -> int:
        return self.end.offset - self.start.offset

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    @property
    def text(self) -> "Text":
        """Return the characters covered by the span."""

        return self.owner.slice(self.start, self.end)

    def contains(self, position: Position) -> bool:
        """Boundary-inclusive membership test, so the end stop counts."""

        return self.start.offset <= position.offset <= self.end.offset

    def as_offsets(self) -> tuple[int, int]:
        return (self.start.offset, self.end.offset)


__all__ = ["Position", "Span"]
