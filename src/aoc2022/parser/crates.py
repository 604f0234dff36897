from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from string import ascii_uppercase
from typing import cast

from .combinators import (
    Parser,
    all_consuming,
    alt,
    constant,
    delimited,
    map_value,
    one_of,
    preceded,
    separated_list1,
    sequence,
    tag,
    unsigned,
)
from .errors import ParseErrorCode, build_parse_error
from .lines import strip_trailing_blank_lines

_LABEL_ROW_PATTERN = re.compile(r"[ \t]*\d+(?:[ \t]+\d+)*[ \t]*", flags=re.ASCII)


@dataclass(frozen=True, slots=True)
class Crate:
    label: str

    def __post_init__(self) -> None:
        if len(self.label) != 1 or self.label not in ascii_uppercase:
            raise ValueError(f"crate label must be a single uppercase letter, got {self.label!r}")


@dataclass(frozen=True, slots=True)
class Instruction:
    quantity: int
    source: int
    destination: int

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("instruction quantity must be >= 0")
        if self.source < 0 or self.destination < 0:
            raise ValueError("instruction stack indices must be >= 0")


type CrateRow = tuple[Crate | None, ...]


@dataclass(frozen=True, slots=True)
class CratePlan:
    rows: tuple[CrateRow, ...]
    instructions: tuple[Instruction, ...]
    label_count: int = 0


_crate: Parser[Crate | None] = map_value(
    delimited(tag("["), one_of(ascii_uppercase), tag("]")), Crate
)
_hole: Parser[Crate | None] = constant(tag("   "), None)
_row = all_consuming(separated_list1(tag(" "), alt(_crate, _hole)))

_instruction = all_consuming(
    sequence(
        preceded(tag("move "), unsigned()),
        preceded(tag(" from "), unsigned()),
        preceded(tag(" to "), unsigned()),
    )
)


def parse_crate_row(line: str, line_number: int | None = None) -> CrateRow:
    row = _row(line)
    if row is None:
        raise build_parse_error(
            ParseErrorCode.E_PARSE_CRATE_ROW_INVALID,
            "crate row cells must be '[X]' or three spaces, separated by one space",
            line,
            line_number,
        )
    return row


def parse_instruction(line: str, line_number: int | None = None) -> Instruction:
    fields = _instruction(line)
    if fields is None:
        raise build_parse_error(
            ParseErrorCode.E_PARSE_INSTRUCTION_INVALID,
            "instruction must read 'move N from S to D'",
            line,
            line_number,
        )
    quantity, source, destination = cast(tuple[int, int, int], fields)
    if source == 0 or destination == 0:
        raise build_parse_error(
            ParseErrorCode.E_PARSE_INSTRUCTION_INVALID,
            "stack numbers start at 1",
            line,
            line_number,
        )
    return Instruction(quantity=quantity, source=source - 1, destination=destination - 1)


def _label_count(line: str) -> int | None:
    if _LABEL_ROW_PATTERN.fullmatch(line) is None:
        return None
    return len(line.split())


def parse_crate_plan(lines: Sequence[str]) -> CratePlan:
    """Split a crate diagram and its move list.

    Rows are read until the first line that is not a crate row. That line must be
    blank, or a stack label row followed by a blank line. Blank lines after the
    last move are ignored.
    """
    rows: list[CrateRow] = []
    index = 0
    while index < len(lines):
        row = _row(lines[index])
        if row is None:
            break
        rows.append(row)
        index += 1

    if index == len(lines):
        raise build_parse_error(
            ParseErrorCode.E_PARSE_CRATE_PLAN_MALFORMED,
            "crate diagram is not followed by a blank separator line",
            "",
            index + 1,
        )

    separator = lines[index]
    label_count = 0
    if separator.lstrip().startswith("["):
        parse_crate_row(separator, index + 1)
    if separator.strip():
        counted = _label_count(separator)
        if counted is None:
            raise build_parse_error(
                ParseErrorCode.E_PARSE_CRATE_PLAN_MALFORMED,
                "expected a blank line or stack labels after the crate diagram",
                separator,
                index + 1,
            )
        label_count = counted
        index += 1
        if index == len(lines) or lines[index].strip():
            raise build_parse_error(
                ParseErrorCode.E_PARSE_CRATE_PLAN_MALFORMED,
                "stack labels must be followed by a blank line",
                lines[index] if index < len(lines) else "",
                index + 1,
            )

    instructions = tuple(
        parse_instruction(line, line_number)
        for line_number, line in enumerate(
            strip_trailing_blank_lines(lines[index + 1 :]), start=index + 2
        )
    )
    return CratePlan(rows=tuple(rows), instructions=instructions, label_count=label_count)
