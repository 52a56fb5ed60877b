"""Translate editor ``(row, column)`` locations to grapheme positions.

Rows follow ``str.splitlines`` the way Textual's ``Document`` splits its
text, and columns count code points within the row. The engine counts
grapheme clusters, so column conversions walk the clusters of a single row.
"""

from __future__ import annotations

from typing import List, Tuple

from interlink_engine.text import Position, Text, TextValidationError

Location = Tuple[int, int]  # (row, column)


def split_rows(document: str) -> List[str]:
    """Split ``document`` into editor rows.

    A trailing line break opens an empty final row, and an empty document
    still has one row.
    """

    rows = document.splitlines()
    if not rows or document.splitlines(keepends=True)[-1] != rows[-1]:
        rows.append("")
    return rows


def row_text(rows: List[str], location: Location) -> str:
    row = location[0]
    if row < 0 or row >= len(rows):
        raise TextValidationError("Row out of range", position=location)
    return rows[row]


def column_to_position(line: Text, column: int) -> Position:
    """Return the position of ``line`` at a code-point ``column``.

    A column that falls inside a multi-codepoint cluster snaps to the start of
    that cluster.
    """

    if column < 0:
        raise TextValidationError("Column out of range", position=column)

    index = 0
    consumed = 0
    while consumed < column:
        if index >= len(line):
            raise TextValidationError("Column out of range", position=column)
        width = len(line[index])
        if consumed + width > column:
            break
        consumed += width
        index += 1

    return line.position(index)


def position_to_column(position: Position) -> int:
    return sum(len(cluster) for cluster in position.owner.clusters[: position.offset])


__all__ = [
    "Location",
    "column_to_position",
    "position_to_column",
    "row_text",
    "split_rows",
]
