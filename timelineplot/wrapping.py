"""Greedy, measurement-driven line wrapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

ELLIPSIS = "…"


@dataclass
class WrapResult:
    """Wrapped lines and whether the text had to be cut short."""

    lines: list[str] = field(default_factory=list)
    truncated: bool = False


def truncate_text(text: str, max_width: float, measure: Callable[[str], float]) -> str:
    """Shorten text with an ellipsis until it fits max_width."""
    if measure(text) <= max_width:
        return text
    return _ellipsize(text, max_width, measure)


def _ellipsize(line: str, max_width: float, measure: Callable[[str], float]) -> str:
    s = line
    while s and measure(s + ELLIPSIS) > max_width:
        s = s[:-1]
    return s.rstrip() + ELLIPSIS


def wrap_text(
    text: str,
    max_width: float,
    max_lines: int,
    measure: Callable[[str], float],
) -> WrapResult:
    """Wrap text into at most max_lines lines no wider than max_width.

    Words are never broken: a word wider than max_width gets a line of its
    own. Whatever does not fit on the last allowed line is dropped and the
    last line ends with an ellipsis.

    Args:
        text: Free text; runs of whitespace separate words.
        max_width: Maximum measured width of a line.
        max_lines: Maximum number of lines to produce.
        measure: Returns the rendered width of a string.

    Returns:
        WrapResult with the lines and a truncated flag
    """
    words = text.split()
    if not words or max_lines < 1:
        return WrapResult()

    lines: list[str] = []
    line: list[str] = []
    pos = 0

    while pos < len(words):
        candidate = line + [words[pos]]
        if line and measure(" ".join(candidate)) > max_width:
            if len(lines) == max_lines - 1:
                # Last allowed line is full; the rest is cut off.
                break
            lines.append(" ".join(line))
            line = [words[pos]]
        else:
            line = candidate
        pos += 1

    last = " ".join(line)
    truncated = pos < len(words) or measure(last) > max_width
    if truncated:
        last = _ellipsize(last, max_width, measure)
    lines.append(last)

    return WrapResult(lines=lines, truncated=truncated)
