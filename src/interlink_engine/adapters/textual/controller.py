"""Adapter that runs keyword detection on editor edits and drives UI hooks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from interlink_engine.interlinks import (
    DEFAULT_MARKERS,
    KeywordMatch,
    MarkerPair,
    interlink_keyword,
)
from interlink_engine.text import Text

from .locations import (
    Location,
    column_to_position,
    position_to_column,
    row_text,
    split_rows,
)


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(frozen=True, slots=True)
class EditorKeyword:
    """Keyword found on one editor row.

    ``match`` is expressed against the row's own text; ``start`` and ``end``
    are editor locations ready for selection or replacement.
    """

    row: int
    match: KeywordMatch

    @property
    def keyword(self) -> Text:
        return self.match.keyword

    @property
    def start(self) -> Location:
        return (self.row, position_to_column(self.match.span.start))

    @property
    def end(self) -> Location:
        return (self.row, position_to_column(self.match.span.end))


@dataclass(slots=True)
class InterlinkUIHooks:
    """Callbacks the adapter invokes to update the host's suggestion UI."""

    show_keyword: Callable[[EditorKeyword], None]
    clear_keyword: Callable[[], None] = _noop
    # Optional realtime log callback for surfacing debug lines
    log: Callable[[str], None] = _noop


class TextualInterlinkAdapter:
    """Feeds the cursor row of an editor into ``interlink_keyword``."""

    def __init__(
        self, hooks: InterlinkUIHooks, *, markers: MarkerPair = DEFAULT_MARKERS
    ) -> None:
        self.hooks = hooks
        self.markers = markers
        self._active: Optional[EditorKeyword] = None
        self._document: Optional[str] = None
        self._rows: List[str] = []

    @property
    def active(self) -> Optional[EditorKeyword]:
        return self._active

    def handle_edit(self, text: str, location: Location) -> Optional[EditorKeyword]:
        """Re-run detection after an edit or cursor move.

        Only the cursor row is segmented into graphemes. ``show_keyword`` fires
        for every match; ``clear_keyword`` fires once when a previously shown
        keyword goes away.
        """

        if text is not self._document:
            self._rows = split_rows(text)
            self._document = text

        row, column = location
        line = Text(row_text(self._rows, location))
        position = column_to_position(line, column)
        self._log("edit ->", location=location, position=position.offset)

        match = interlink_keyword(
            line,
            position,
            opening=self.markers.opening,
            closing=self.markers.closing,
        )
        found = EditorKeyword(row=row, match=match) if match is not None else None
        if found is not None:
            self.hooks.show_keyword(found)
            self._log(
                "keyword <-",
                keyword=found.keyword.value,
                start=found.start,
                end=found.end,
            )
        elif self._active is not None:
            self.hooks.clear_keyword()
            self._log("keyword <-", cleared=True)

        self._active = found
        return found

    def keyword_selection(self) -> Optional[Tuple[Location, Location]]:
        """Return editor locations bounding the active keyword, if any."""

        if self._active is None:
            return None
        return (self._active.start, self._active.end)

    def reset(self) -> None:
        if self._active is not None:
            self.hooks.clear_keyword()
        self._active = None

    def _log(self, prefix: str, **fields: object) -> None:
        snapshot: Dict[str, object] = {
            "opening": self.markers.opening,
            "closing": self.markers.closing,
        }
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))


__all__ = ["EditorKeyword", "InterlinkUIHooks", "TextualInterlinkAdapter"]
