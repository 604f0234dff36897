from __future__ import annotations

from collections.abc import Sequence

from aoc2022.parser.crates import Crate, CrateRow

type Stack = tuple[Crate, ...]


class EmptyStackError(ValueError):
    code = "E_REPLAY_STACK_EMPTY"

    def __init__(self, stack_index: int) -> None:
        super().__init__(f"{self.code}: stack {stack_index + 1} has no top crate")
        self.stack_index = stack_index


def build_stacks(rows: Sequence[CrateRow], min_stacks: int = 0) -> tuple[Stack, ...]:
    """Transpose diagram rows (top row first) into bottom-to-top stacks per column.

    Short rows are treated as trailing holes.
    """
    width = max([min_stacks, *(len(row) for row in rows)])
    return tuple(
        tuple(
            crate
            for row in reversed(rows)
            if column < len(row) and (crate := row[column]) is not None
        )
        for column in range(width)
    )


def top_labels(stacks: Sequence[Sequence[Crate]]) -> str:
    labels: list[str] = []
    for stack_index, stack in enumerate(stacks):
        if not stack:
            raise EmptyStackError(stack_index)
        labels.append(stack[-1].label)
    return "".join(labels)
