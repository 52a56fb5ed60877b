from __future__ import annotations

import pytest

from interlink_engine.interlinks import trailing_keyword
from interlink_engine.text import Text


def test_no_opening_marker_has_no_keyword() -> None:
    assert trailing_keyword("qwertyuiop") is None


@pytest.mark.parametrize("sample", ["[", "[]", "text ["])
def test_empty_keyword_is_ignored(sample: str) -> None:
    assert trailing_keyword(sample) is None


def test_closed_keywords_are_ignored() -> None:
    text = "[keyword 1] lalalala [keyword 2] lalalalaa [keyword 3]"

    assert trailing_keyword(text) is None


def test_keyword_after_opening_marker_is_returned() -> None:
    keyword = "some keyword here"
    fragment = Text("qwertyuiop [" + keyword)

    found = trailing_keyword(fragment)

    assert found is not None
    assert found.keyword == keyword
    assert found.start.offset == 12
    assert found.start.owner is fragment


def test_last_keyword_wins_when_there_are_many() -> None:
    found = trailing_keyword("qwertyuiop [some keyword here] asdfghjkl [the real keyword")

    assert found is not None
    assert found.keyword == "the real keyword"
    assert found.start.offset == 42


def test_fragment_starting_with_opening_marker() -> None:
    found = trailing_keyword("[a] mid [b")

    assert found is not None
    assert found.keyword == "b"
    assert found.start.offset == 9

    leading = trailing_keyword("[some keyword here")
    assert leading is not None
    assert leading.start.offset == 1


def test_keyword_offsets_count_graphemes() -> None:
    found = trailing_keyword("\U0001F1EE\U0001F1F3 [cafe\u0301")

    assert found is not None
    assert found.start.offset == 3
    assert len(found.keyword) == 4
