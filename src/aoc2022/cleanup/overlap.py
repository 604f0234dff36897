from __future__ import annotations

from collections.abc import Iterable

from aoc2022.parser.assignments import SectionPair


def fully_contained(pair: SectionPair) -> bool:
    return pair.first.contains_range(pair.second) or pair.second.contains_range(pair.first)


def overlapping(pair: SectionPair) -> bool:
    return pair.first.overlaps(pair.second)


def count_fully_contained(pairs: Iterable[SectionPair]) -> int:
    return sum(1 for pair in pairs if fully_contained(pair))


def count_overlapping(pairs: Iterable[SectionPair]) -> int:
    return sum(1 for pair in pairs if overlapping(pair))
