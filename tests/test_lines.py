from __future__ import annotations

from interlink_engine.text import Text, character_count, line_at, to_absolute, to_relative

LINES = [
    "alala lala long long le long long long!\n",
    "this is supposed to be the second line\n",
    "and this would be the third line in the document\n",
    "only to be followed by a trailing and final line!",
]


def test_line_at_returns_the_line_for_every_position() -> None:
    text = Text("".join(LINES))
    padding = 0

    for line in LINES:
        expected = line.rstrip("\n")
        for location in range(len(line)):
            found = line_at(text, padding + location)

            assert found.text == expected
            assert found.span.text == expected
        padding += len(line)


def test_line_at_end_of_text_extends_to_the_end() -> None:
    text = Text("".join(LINES))

    found = line_at(text, text.end)

    assert found.text == LINES[-1]
    assert found.end == text.end


def test_line_at_empty_text_is_empty() -> None:
    text = Text("")

    found = line_at(text, 0)

    assert found.is_empty
    assert found.span.as_offsets() == (0, 0)


def test_line_after_trailing_terminator_is_empty() -> None:
    text = Text("only line\n")

    found = line_at(text, text.end)

    assert found.is_empty
    assert found.span.as_offsets() == (10, 10)


def test_crlf_counts_as_single_terminator() -> None:
    text = Text("ab\r\ncd\u2028ef")

    assert len(text) == 8
    assert line_at(text, 2).text == "ab"
    assert line_at(text, 3).text == "cd"
    assert line_at(text, 6).text == "ef"


def test_to_relative_and_back_is_identity_within_line() -> None:
    text = Text("first \U0001F1EE\U0001F1F3\nse\u0301cond line")
    line = line_at(text, 12)

    for offset in range(line.start.offset, line.end.offset + 1):
        relative = to_relative(offset, line)

        assert relative is not None
        assert relative.owner is line.text
        assert relative.offset == offset - line.start.offset
        absolute = to_absolute(relative, line)
        assert absolute == text.position(offset)
        assert absolute.owner is text


def test_to_relative_outside_line_has_no_result() -> None:
    text = Text("ab\ncd")
    line = line_at(text, 0)

    assert to_relative(4, line) is None


def test_character_count_measures_clusters() -> None:
    text = Text("e\u0301e\u0301e\u0301")

    assert character_count(text, 0, text.end) == 3
