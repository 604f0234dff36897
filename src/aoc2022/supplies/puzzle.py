from __future__ import annotations

from aoc2022.answers import PuzzleAnswer
from aoc2022.parser.crates import parse_crate_plan

from .replay import MoveSemantics, replay
from .stacks import build_stacks, top_labels

TITLE = "Supply Stacks"


def solve(input_text: str) -> PuzzleAnswer:
    plan = parse_crate_plan(input_text.splitlines())
    stacks = build_stacks(plan.rows, min_stacks=plan.label_count)
    return PuzzleAnswer(
        part_1=top_labels(replay(stacks, plan.instructions, MoveSemantics.SINGLE)),
        part_2=top_labels(replay(stacks, plan.instructions, MoveSemantics.BULK)),
    )
