from __future__ import annotations

from aoc2022.answers import PuzzleAnswer
from aoc2022.parser.heights import parse_height_grid
from aoc2022.parser.lines import input_lines

from .visibility import best_scenic_score, count_visible

TITLE = "Treetop Tree House"


def solve(input_text: str) -> PuzzleAnswer:
    heights = parse_height_grid(input_lines(input_text))
    return PuzzleAnswer(
        part_1=count_visible(heights),
        part_2=best_scenic_score(heights),
    )
