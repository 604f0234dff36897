from __future__ import annotations

import numpy as np
import pytest

from aoc2022.parser import (
    ParseError,
    ParseErrorCode,
    SectionPair,
    SectionRange,
    parse_datastream,
    parse_height_grid,
    parse_section_pair,
    parse_section_pairs,
)

pytestmark = pytest.mark.unit


def test_parse_section_pair_valid() -> None:
    assert parse_section_pair("2-4,6-8") == SectionPair(SectionRange(2, 4), SectionRange(6, 8))
    assert parse_section_pair("6-6,4-6") == SectionPair(SectionRange(6, 6), SectionRange(4, 6))


@pytest.mark.parametrize(
    "line",
    ["", "2-4", "2-4,6-", "2-4;6-8", "2-4,6-8,", "a-b,c-d", " 2-4,6-8", "5-4,1-2", "1-2,9-3"],
)
def test_parse_section_pair_invalid(line: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_section_pair(line)

    assert exc_info.value.detail.code == ParseErrorCode.E_PARSE_ASSIGNMENT_INVALID.value


def test_parse_section_pairs_reports_line_number() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_section_pairs(["1-2,3-4", "1-2,3-4", "broken"])

    assert exc_info.value.detail.line_number == 3


def test_section_range_rejects_reversed_bounds() -> None:
    with pytest.raises(ValueError, match="exceeds end"):
        SectionRange(5, 4)


def test_parse_height_grid_shape_and_values() -> None:
    grid = parse_height_grid(["303", "255", "650"])

    assert grid.shape == (3, 3)
    assert grid.dtype == np.int8
    np.testing.assert_array_equal(grid, np.array([[3, 0, 3], [2, 5, 5], [6, 5, 0]]))


@pytest.mark.parametrize(
    ("lines", "line_number"),
    [
        ([], None),
        (["123", "12"], 2),
        (["123", ""], 2),
        (["12a"], 1),
        (["1 2"], 1),
        (["١٢"], 1),
    ],
)
def test_parse_height_grid_invalid(lines: list[str], line_number: int | None) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_height_grid(lines)

    assert exc_info.value.detail.code == ParseErrorCode.E_PARSE_HEIGHT_GRID_INVALID.value
    assert exc_info.value.detail.line_number == line_number


def test_parse_datastream_strips_surrounding_whitespace() -> None:
    assert parse_datastream("  abcd\n") == "abcd"


@pytest.mark.parametrize("text", ["", "\n", "   ", "ab cd", "ab\ncd"])
def test_parse_datastream_invalid(text: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_datastream(text)

    assert exc_info.value.detail.code == ParseErrorCode.E_PARSE_DATASTREAM_INVALID.value
    assert exc_info.value.detail.input_text == text
