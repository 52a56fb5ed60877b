from __future__ import annotations

import pytest

from interlink_engine.interlinks import MarkerPair, has_unbalanced_closing


@pytest.mark.parametrize("sample", ["][", "]]", "][]", "[]]", "abc] def"])
def test_unbalanced_closing_is_detected(sample: str) -> None:
    assert has_unbalanced_closing(sample) is True


@pytest.mark.parametrize(
    "sample", ["", "[]", "[[]]", "[[[]]]", "[][][]", "text [link](url) more"]
)
def test_balanced_pairs_are_not_flagged(sample: str) -> None:
    assert has_unbalanced_closing(sample) is False


@pytest.mark.parametrize("sample", ["[", "[][", "[[]][", "[[[]]]["])
def test_unbalanced_openings_never_count(sample: str) -> None:
    assert has_unbalanced_closing(sample) is False


def test_custom_markers_are_respected() -> None:
    markers = MarkerPair("{", "}")

    assert has_unbalanced_closing("a} b", markers) is True
    assert has_unbalanced_closing("{a} ]", markers) is False
