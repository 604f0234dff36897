from __future__ import annotations

from aoc2022.answers import PuzzleAnswer
from aoc2022.parser.assignments import parse_section_pairs
from aoc2022.parser.lines import input_lines

from .overlap import count_fully_contained, count_overlapping

TITLE = "Camp Cleanup"


def solve(input_text: str) -> PuzzleAnswer:
    pairs = parse_section_pairs(input_lines(input_text))
    return PuzzleAnswer(
        part_1=count_fully_contained(pairs),
        part_2=count_overlapping(pairs),
    )
