from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from aoc2022 import cleanup, filesystem, forest, signals, supplies
from aoc2022.answers import PuzzleAnswer
from aoc2022.filesystem import CapacityError, InvalidTraversalError, NoCandidateError
from aoc2022.parser import ParseError
from aoc2022.signals import NoMarkerError
from aoc2022.supplies import EmptyStackError, InsufficientCratesError, UnknownStackError


class UnknownPuzzleError(LookupError):
    code = "E_PUZZLE_UNKNOWN"

    def __init__(self, day: int) -> None:
        super().__init__(f"{self.code}: no solver registered for day {day}")
        self.day = day


@dataclass(frozen=True, slots=True)
class Puzzle:
    day: int
    title: str
    solve: Callable[[str], PuzzleAnswer]


PUZZLE_ERRORS: tuple[type[Exception], ...] = (
    ParseError,
    InvalidTraversalError,
    CapacityError,
    NoCandidateError,
    UnknownStackError,
    InsufficientCratesError,
    EmptyStackError,
    NoMarkerError,
    UnknownPuzzleError,
)


def _build_registry(puzzles: tuple[Puzzle, ...]) -> Mapping[int, Puzzle]:
    registry: dict[int, Puzzle] = {}
    for puzzle in puzzles:
        if puzzle.day in registry:
            raise ValueError(f"duplicate puzzle day: {puzzle.day}")
        registry[puzzle.day] = puzzle
    return MappingProxyType(dict(sorted(registry.items())))


PUZZLES: Mapping[int, Puzzle] = _build_registry(
    (
        Puzzle(day=4, title=cleanup.TITLE, solve=cleanup.solve),
        Puzzle(day=5, title=supplies.TITLE, solve=supplies.solve),
        Puzzle(day=6, title=signals.TITLE, solve=signals.solve),
        Puzzle(day=7, title=filesystem.TITLE, solve=filesystem.solve),
        Puzzle(day=8, title=forest.TITLE, solve=forest.solve),
    )
)


def get_puzzle(day: int) -> Puzzle:
    puzzle = PUZZLES.get(day)
    if puzzle is None:
        raise UnknownPuzzleError(day)
    return puzzle


def solve_puzzle(day: int, input_text: str) -> PuzzleAnswer:
    return get_puzzle(day).solve(input_text)
