import pytest

from timelineplot.wrapping import ELLIPSIS, truncate_text, wrap_text


def test_empty_text_has_no_lines() -> None:
    assert wrap_text("", 10, 2, len).lines == []
    assert wrap_text("   \n\t ", 10, 2, len).lines == []


def test_text_that_fits_is_one_line() -> None:
    result = wrap_text("a  b   c", 10, 3, len)
    assert result.lines == ["a b c"]
    assert not result.truncated


def test_greedy_breaks_between_words() -> None:
    result = wrap_text("one two three four", 9, 3, len)
    assert result.lines == ["one two", "three", "four"]
    assert not result.truncated


def test_remaining_words_are_cut_with_ellipsis() -> None:
    result = wrap_text("one two three four five six", 9, 2, len)
    assert result.lines == ["one two", "three" + ELLIPSIS]
    assert result.truncated


def test_single_character_truncation() -> None:
    result = wrap_text("abcdefgh", 5, 1, len)
    assert len(result.lines) == 1
    assert result.lines[0].endswith(ELLIPSIS)
    assert len(result.lines[0]) <= 5
    assert result.truncated


def test_wide_word_is_not_broken() -> None:
    result = wrap_text("supercalifragilistic is long", 10, 3, len)
    assert result.lines == ["supercalifragilistic", "is long"]


@pytest.mark.parametrize("max_lines", [1, 2, 3])
@pytest.mark.parametrize("max_width", [4, 8, 15, 40])
def test_never_more_than_max_lines(max_lines: int, max_width: int) -> None:
    text = "the quick brown fox jumps over the lazy dog again and again"
    lines = wrap_text(text, max_width, max_lines, len).lines
    assert 1 <= len(lines) <= max_lines
    assert all(lines)


def test_zero_max_lines_yields_nothing() -> None:
    assert wrap_text("something", 10, 0, len).lines == []


def test_truncate_text() -> None:
    assert truncate_text("short", 10, len) == "short"
    assert truncate_text("much too long", 6, len) == "much" + ELLIPSIS
