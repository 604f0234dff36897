from __future__ import annotations

from aoc2022.answers import PuzzleAnswer
from aoc2022.parser.lines import input_lines
from aoc2022.parser.transcript import parse_transcript

from .queries import DiskSpaceConfig, smallest_directory_to_free, sum_small_directories
from .tree import build_tree

TITLE = "No Space Left On Device"


def solve(input_text: str, config: DiskSpaceConfig | None = None) -> PuzzleAnswer:
    tree = build_tree(parse_transcript(input_lines(input_text)))
    return PuzzleAnswer(
        part_1=sum_small_directories(tree, config),
        part_2=smallest_directory_to_free(tree, config),
    )
