from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .models import PuzzleStage, Severity


@dataclass(frozen=True, slots=True)
class DiagnosticCatalogEntry:
    code: str
    severity: Severity
    stage: PuzzleStage
    suggested_action: str

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("diagnostic catalog code must be non-empty")
        if not self.suggested_action:
            raise ValueError(
                f"diagnostic catalog entry '{self.code}' suggested_action must be non-empty"
            )


def _entry(code: str, stage: PuzzleStage, suggested_action: str) -> DiagnosticCatalogEntry:
    return DiagnosticCatalogEntry(
        code=code,
        severity=Severity.ERROR,
        stage=stage,
        suggested_action=suggested_action,
    )


def _build_catalog(
    entries: tuple[DiagnosticCatalogEntry, ...],
) -> Mapping[str, DiagnosticCatalogEntry]:
    catalog: dict[str, DiagnosticCatalogEntry] = {}
    for entry in entries:
        if entry.code in catalog:
            raise ValueError(f"duplicate diagnostic catalog code: {entry.code}")
        catalog[entry.code] = entry
    return MappingProxyType(catalog)


_CATALOG_ENTRIES: tuple[DiagnosticCatalogEntry, ...] = (
    _entry(
        "E_CLI_INPUT_UNREADABLE",
        PuzzleStage.INPUT,
        "pass a readable UTF-8 text file as the puzzle input",
    ),
    _entry(
        "E_PUZZLE_UNKNOWN",
        PuzzleStage.INPUT,
        "choose one of the days listed by the 'days' command",
    ),
    _entry(
        "E_PARSE_TRANSCRIPT_LINE_INVALID",
        PuzzleStage.PARSE,
        "use '$ ls', '$ cd PATH', 'dir NAME' or 'SIZE NAME' lines only",
    ),
    _entry(
        "E_PARSE_CRATE_ROW_INVALID",
        PuzzleStage.PARSE,
        "write crate cells as '[X]' or three spaces, separated by single spaces",
    ),
    _entry(
        "E_PARSE_CRATE_PLAN_MALFORMED",
        PuzzleStage.PARSE,
        "separate the crate diagram from the moves with a blank line",
    ),
    _entry(
        "E_PARSE_INSTRUCTION_INVALID",
        PuzzleStage.PARSE,
        "write moves as 'move N from S to D' with stack numbers starting at 1",
    ),
    _entry(
        "E_PARSE_ASSIGNMENT_INVALID",
        PuzzleStage.PARSE,
        "write assignments as 'a-b,c-d' with a <= b and c <= d",
    ),
    _entry(
        "E_PARSE_DATASTREAM_INVALID",
        PuzzleStage.PARSE,
        "provide the datastream as one non-empty line",
    ),
    _entry(
        "E_PARSE_HEIGHT_GRID_INVALID",
        PuzzleStage.PARSE,
        "provide equally long rows of digits",
    ),
    _entry(
        "E_TREE_TRAVERSAL_INVALID",
        PuzzleStage.BUILD,
        "remove the 'cd ..' issued while at the root directory",
    ),
    _entry(
        "E_QUERY_CAPACITY_INVALID",
        PuzzleStage.SOLVE,
        "check that used space fits the disk and that free space is short of the target",
    ),
    _entry(
        "E_QUERY_NO_CANDIDATE",
        PuzzleStage.SOLVE,
        "check the transcript lists every directory",
    ),
    _entry(
        "E_REPLAY_STACK_UNKNOWN",
        PuzzleStage.SOLVE,
        "reference only stacks present in the crate diagram",
    ),
    _entry(
        "E_REPLAY_INSUFFICIENT_CRATES",
        PuzzleStage.SOLVE,
        "move no more crates than the source stack holds",
    ),
    _entry(
        "E_REPLAY_STACK_EMPTY",
        PuzzleStage.SOLVE,
        "ensure every stack holds a crate after the last move",
    ),
    _entry(
        "E_SIGNAL_MARKER_MISSING",
        PuzzleStage.SOLVE,
        "check the datastream contains a run of distinct characters",
    ),
)

CANONICAL_DIAGNOSTIC_CATALOG: Mapping[str, DiagnosticCatalogEntry] = _build_catalog(
    _CATALOG_ENTRIES
)
