from __future__ import annotations

from aoc2022.answers import PuzzleAnswer
from aoc2022.parser.datastream import parse_datastream

from .markers import MarkerConfig, find_marker

TITLE = "Tuning Trouble"


def solve(input_text: str, config: MarkerConfig | None = None) -> PuzzleAnswer:
    resolved = MarkerConfig() if config is None else config
    stream = parse_datastream(input_text)
    return PuzzleAnswer(
        part_1=find_marker(stream, resolved.packet_marker_size),
        part_2=find_marker(stream, resolved.message_marker_size),
    )
