"""Opening/closing marker configuration."""

from __future__ import annotations

from dataclasses import dataclass

import grapheme

from interlink_engine.text import LINE_TERMINATORS


def _check_marker(role: str, value: str) -> None:
    if not isinstance(value, str) or grapheme.length(value) != 1:
        raise ValueError(f"{role} marker must be a single character, got {value!r}")
    if value in LINE_TERMINATORS:
        raise ValueError(f"{role} marker cannot be a line terminator")


@dataclass(frozen=True, slots=True)
class MarkerPair:
    """The two characters delimiting an interlink keyword."""

    opening: str = "["
    closing: str = "]"

    def __post_init__(self) -> None:
        _check_marker("opening", self.opening)
        _check_marker("closing", self.closing)
        if self.opening == self.closing:
            raise ValueError("opening and closing markers must differ")


DEFAULT_MARKERS = MarkerPair()

__all__ = ["DEFAULT_MARKERS", "MarkerPair"]
