from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum

from aoc2022.parser.crates import Crate, Instruction

from .stacks import Stack


class MoveSemantics(StrEnum):
    SINGLE = "single"
    BULK = "bulk"


class UnknownStackError(IndexError):
    code = "E_REPLAY_STACK_UNKNOWN"

    def __init__(self, stack_index: int, stack_count: int) -> None:
        super().__init__(
            f"{self.code}: stack {stack_index + 1} does not exist ({stack_count} stacks)"
        )
        self.stack_index = stack_index
        self.stack_count = stack_count


class InsufficientCratesError(ValueError):
    code = "E_REPLAY_INSUFFICIENT_CRATES"

    def __init__(self, instruction: Instruction, available: int) -> None:
        super().__init__(
            f"{self.code}: cannot move {instruction.quantity} crates from stack "
            f"{instruction.source + 1} holding {available}"
        )
        self.instruction = instruction
        self.available = available


def _check_instruction(stacks: Sequence[list[Crate]], instruction: Instruction) -> None:
    for stack_index in (instruction.source, instruction.destination):
        if stack_index >= len(stacks):
            raise UnknownStackError(stack_index, len(stacks))
    available = len(stacks[instruction.source])
    if available < instruction.quantity:
        raise InsufficientCratesError(instruction, available)


def _move_single(stacks: list[list[Crate]], instruction: Instruction) -> None:
    source = stacks[instruction.source]
    destination = stacks[instruction.destination]
    for _ in range(instruction.quantity):
        destination.append(source.pop())


def _move_bulk(stacks: list[list[Crate]], instruction: Instruction) -> None:
    source = stacks[instruction.source]
    cut = len(source) - instruction.quantity
    block = source[cut:]
    del source[cut:]
    stacks[instruction.destination].extend(block)


_MOVES = {
    MoveSemantics.SINGLE: _move_single,
    MoveSemantics.BULK: _move_bulk,
}


def replay(
    stacks: Sequence[Stack],
    instructions: Sequence[Instruction],
    semantics: MoveSemantics,
) -> list[list[Crate]]:
    """Apply ``instructions`` to a private copy of ``stacks`` and return the result."""
    move = _MOVES[MoveSemantics(semantics)]
    working = [list(stack) for stack in stacks]
    for instruction in instructions:
        _check_instruction(working, instruction)
        move(working, instruction)
    return working
