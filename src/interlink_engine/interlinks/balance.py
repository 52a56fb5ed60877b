"""Detect closing markers that nothing before them opens."""

from __future__ import annotations

from typing import Union

from interlink_engine.text import Text

from .markers import DEFAULT_MARKERS, MarkerPair


def has_unbalanced_closing(
    fragment: Union[Text, str], markers: MarkerPair = DEFAULT_MARKERS
) -> bool:
    """Return ``True`` when ``fragment`` holds a closing marker with no opening
    marker earlier in the fragment to pair with.

    The scan runs right to left: a closing marker becomes pending, an opening
    marker settles one pending closing. Openings with nothing pending are
    ignored, so unmatched openings never make the result ``True``.
    """

    pending = 0
    for cluster in reversed(Text.coerce(fragment)):
        if cluster == markers.closing:
            pending += 1
        elif cluster == markers.opening and pending:
            pending -= 1
    return pending > 0


__all__ = ["has_unbalanced_closing"]
