from __future__ import annotations

import pytest

from interlink_engine.text import (
    ForeignPositionError,
    Position,
    PositionOutOfRangeError,
    Span,
    Text,
)


def test_text_counts_grapheme_clusters() -> None:
    text = Text("cafe\u0301 \U0001F1EE\U0001F1F3 \U0001F30D")

    assert len(text) == 8
    assert text[3] == "e\u0301"
    assert text[5] == "\U0001F1EE\U0001F1F3"


def test_text_compares_with_text_and_str() -> None:
    assert Text("abc") == Text("abc")
    assert Text("abc") == "abc"
    assert Text("abc") != "abd"
    assert hash(Text("abc")) == hash("abc")


def test_split_at_returns_both_sides_with_multicodepoint_characters() -> None:
    lhs = "some random \U0001F1EE\U0001F1F3 text on the left hand side"
    rhs = "and some more \U0001F30E random text on the right hand side"
    text = Text(lhs + rhs)

    left, right = text.split_at(len(Text(lhs)))

    assert left == lhs
    assert right == rhs


def test_split_at_handles_empty_text() -> None:
    left, right = Text("").split_at(0)

    assert not left
    assert not right


def test_split_at_end_leaves_empty_right_side() -> None:
    text = Text("this is supposed to be a single but relatively long line of text")

    left, right = text.split_at(text.end)

    assert left == text
    assert right == ""


def test_span_of_substring_covers_requested_length() -> None:
    text = Text("na\u0308ive \U0001F1EE\U0001F1F3 flag")

    span = text.span(6, 1)

    assert span.as_offsets() == (6, 7)
    assert span.text == "\U0001F1EE\U0001F1F3"
    assert span.length == 1


def test_position_rejects_out_of_range_offsets() -> None:
    text = Text("abc")

    assert text.position(3) == text.end
    with pytest.raises(PositionOutOfRangeError):
        text.position(4)
    with pytest.raises(PositionOutOfRangeError):
        text.position(-1)
    with pytest.raises(TypeError):
        text.position("1")  # type: ignore[arg-type]


def test_position_from_other_text_is_rejected() -> None:
    first = Text("abc")
    second = Text("xyz")

    with pytest.raises(ForeignPositionError) as info:
        second.position(first.position(1))

    assert info.value.position == first.position(1)


def test_position_from_equal_text_is_rebound() -> None:
    first = Text("abc")
    second = Text("abc")

    rebound = second.position(first.position(2))

    assert rebound.offset == 2
    assert rebound.owner is second


def test_position_advanced_stays_in_owner() -> None:
    text = Text("abcdef")

    moved = text.position(2).advanced(3)

    assert moved.offset == 5
    assert moved.owner is text
    with pytest.raises(PositionOutOfRangeError):
        moved.advanced(2)


def test_span_rejects_reversed_or_mixed_endpoints() -> None:
    text = Text("abcdef")
    other = Text("abcdef")

    with pytest.raises(ValueError):
        Span(text.position(4), text.position(2))
    with pytest.raises(ValueError):
        Span(text.position(1), Position(2, other))


def test_span_contains_includes_boundaries() -> None:
    text = Text("abcdef")
    span = Span(text.position(2), text.position(4))

    assert span.contains(text.position(2))
    assert span.contains(text.position(4))
    assert not span.contains(text.position(5))


def test_last_index_of_finds_rightmost_cluster() -> None:
    text = Text("[a] [b")

    assert text.last_index_of("[") == 4
    assert text.last_index_of("{") is None
    assert text.contains("]")
