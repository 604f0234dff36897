from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .combinators import all_consuming, separated_pair, tag, unsigned
from .errors import ParseErrorCode, build_parse_error


@dataclass(frozen=True, slots=True)
class SectionRange:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"section range start {self.start} exceeds end {self.end}")

    def contains(self, section: int) -> bool:
        return self.start <= section <= self.end

    def contains_range(self, other: SectionRange) -> bool:
        return self.contains(other.start) and self.contains(other.end)

    def overlaps(self, other: SectionRange) -> bool:
        return self.start <= other.end and other.start <= self.end


@dataclass(frozen=True, slots=True)
class SectionPair:
    first: SectionRange
    second: SectionRange


_range = separated_pair(unsigned(), tag("-"), unsigned())
_pair = all_consuming(separated_pair(_range, tag(","), _range))


def parse_section_pair(line: str, line_number: int | None = None) -> SectionPair:
    bounds = _pair(line)
    if bounds is None:
        raise build_parse_error(
            ParseErrorCode.E_PARSE_ASSIGNMENT_INVALID,
            "assignment must read 'a-b,c-d'",
            line,
            line_number,
        )
    (first_start, first_end), (second_start, second_end) = bounds
    if first_start > first_end or second_start > second_end:
        raise build_parse_error(
            ParseErrorCode.E_PARSE_ASSIGNMENT_INVALID,
            "section range start must not exceed its end",
            line,
            line_number,
        )
    return SectionPair(
        first=SectionRange(first_start, first_end),
        second=SectionRange(second_start, second_end),
    )


def parse_section_pairs(lines: Iterable[str]) -> tuple[SectionPair, ...]:
    return tuple(
        parse_section_pair(line, line_number) for line_number, line in enumerate(lines, start=1)
    )
