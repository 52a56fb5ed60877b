"""Validation helpers shared across the text model."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from .errors import ForeignPositionError, PositionOutOfRangeError
from .positions import Position

if TYPE_CHECKING:  # pragma: no cover
    from .text import Text

PositionLike = Union[Position, int]


def ensure_position(text: "Text", position: PositionLike) -> Position:
    """Return ``position`` as a ``Position`` of ``text`` or raise.

    Integers are treated as grapheme offsets. Out-of-range offsets are never
    clamped.
    """

    if isinstance(position, Position):
        if position.owner is not text and position.owner != text:
            raise ForeignPositionError(
                "Position belongs to a different text", position=position
            )
        offset = position.offset
    elif isinstance(position, int) and not isinstance(position, bool):
        offset = position
    else:
        raise TypeError(
            f"position must be a Position or int, not {type(position).__name__}"
        )

    if offset < 0 or offset > len(text):
        raise PositionOutOfRangeError(
            f"Position {offset} out of range [0, {len(text)}]", position=position
        )
    if isinstance(position, Position) and position.owner is text:
        return position
    return Position(offset, text)


__all__ = ["PositionLike", "ensure_position"]
