"""Interlink keyword detection."""

from .balance import has_unbalanced_closing
from .keyword import KeywordMatch, interlink_keyword
from .markers import DEFAULT_MARKERS, MarkerPair
from .scanner import TrailingKeyword, trailing_keyword

__all__ = [
    "DEFAULT_MARKERS",
    "KeywordMatch",
    "MarkerPair",
    "TrailingKeyword",
    "has_unbalanced_closing",
    "interlink_keyword",
    "trailing_keyword",
]
