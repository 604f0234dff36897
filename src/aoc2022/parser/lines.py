from __future__ import annotations

from collections.abc import Sequence


def strip_trailing_blank_lines(lines: Sequence[str]) -> list[str]:
    end = len(lines)
    while end and not lines[end - 1].strip():
        end -= 1
    return list(lines[:end])


def input_lines(text: str) -> list[str]:
    """Split puzzle input into lines, ignoring blank lines at the end of the file."""
    return strip_trailing_blank_lines(text.splitlines())
