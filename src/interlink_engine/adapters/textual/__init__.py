"""Textual host adapter for interlink keyword detection."""

from .controller import EditorKeyword, InterlinkUIHooks, TextualInterlinkAdapter
from .locations import (
    Location,
    column_to_position,
    position_to_column,
    row_text,
    split_rows,
)

__all__ = [
    "EditorKeyword",
    "InterlinkUIHooks",
    "Location",
    "TextualInterlinkAdapter",
    "column_to_position",
    "position_to_column",
    "row_text",
    "split_rows",
]
