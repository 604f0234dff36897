from __future__ import annotations

from dataclasses import dataclass

type AnswerValue = int | str


@dataclass(frozen=True, slots=True)
class PuzzleAnswer:
    part_1: AnswerValue
    part_2: AnswerValue

    def lines(self) -> tuple[str, str]:
        return (
            f"Part 1 result: {self.part_1}",
            f"Part 2 result: {self.part_2}",
        )
