from __future__ import annotations

import pytest
from pydantic import ValidationError

from aoc2022.diagnostics import (
    CANONICAL_DIAGNOSTIC_CATALOG,
    DiagnosticEvent,
    PuzzleStage,
    Severity,
    UnknownDiagnosticCodeError,
    build_diagnostic_event,
    diagnostic_from_error,
)
from aoc2022.filesystem import CapacityError, InvalidTraversalError, NoCandidateError
from aoc2022.parser import ParseErrorCode, parse_crate_plan, parse_transcript
from aoc2022.parser.crates import Instruction
from aoc2022.puzzles import UnknownPuzzleError
from aoc2022.signals import NoMarkerError
from aoc2022.supplies import EmptyStackError, InsufficientCratesError, UnknownStackError

pytestmark = pytest.mark.unit

_CODED_ERRORS = (
    InvalidTraversalError(0),
    CapacityError("used space exceeds the disk capacity", used_space=2, total_capacity=1),
    NoCandidateError(5),
    UnknownStackError(3, 2),
    InsufficientCratesError(Instruction(quantity=2, source=0, destination=1), 1),
    EmptyStackError(0),
    NoMarkerError(4, 3),
    UnknownPuzzleError(25),
)


def test_catalog_covers_every_parse_error_code() -> None:
    for code in ParseErrorCode:
        assert code.value in CANONICAL_DIAGNOSTIC_CATALOG


@pytest.mark.parametrize("exc", _CODED_ERRORS, ids=lambda exc: type(exc).__name__)
def test_catalog_covers_every_coded_error(exc: Exception) -> None:
    event = diagnostic_from_error(exc, day=7)

    assert event.code == getattr(exc, "code")
    assert event.severity == Severity.ERROR
    assert event.day == 7
    assert not event.message.startswith("E_")
    assert event.witness == {"error_type": type(exc).__name__}


def test_parse_error_diagnostic_carries_line_and_input() -> None:
    with pytest.raises(ValueError) as exc_info:
        parse_transcript(["$ ls", "bogus line"])

    event = diagnostic_from_error(exc_info.value, day=7)

    assert event.code == ParseErrorCode.E_PARSE_TRANSCRIPT_LINE_INVALID.value
    assert event.stage == PuzzleStage.PARSE
    assert event.line_number == 2
    assert event.witness == {"error_type": "ParseError", "input_text": "bogus line"}


def test_grid_error_diagnostic_keeps_subclass_name() -> None:
    with pytest.raises(ValueError) as exc_info:
        parse_crate_plan(["[D]", "[d]", ""])

    event = diagnostic_from_error(exc_info.value)

    assert event.code == ParseErrorCode.E_PARSE_CRATE_ROW_INVALID.value
    assert event.witness == {"error_type": "GridParseError", "input_text": "[d]"}


def test_stage_comes_from_catalog() -> None:
    assert diagnostic_from_error(InvalidTraversalError(0)).stage == PuzzleStage.BUILD
    assert diagnostic_from_error(EmptyStackError(0)).stage == PuzzleStage.SOLVE
    assert diagnostic_from_error(UnknownPuzzleError(1)).stage == PuzzleStage.INPUT


def test_uncoded_exception_is_not_adapted() -> None:
    with pytest.raises(TypeError, match="diagnostic code"):
        diagnostic_from_error(RuntimeError("boom"))


def test_build_diagnostic_event_rejects_unknown_code() -> None:
    with pytest.raises(UnknownDiagnosticCodeError):
        build_diagnostic_event(code="E_NOT_A_CODE", message="x")


def test_build_diagnostic_event_rejects_empty_message() -> None:
    with pytest.raises(ValueError, match="message"):
        build_diagnostic_event(code="E_REPLAY_STACK_EMPTY", message="")


def test_witness_is_normalized_with_sorted_keys() -> None:
    event = build_diagnostic_event(
        code="E_REPLAY_STACK_EMPTY",
        message="m",
        witness={"b": (1, 2), "a": {"d": None, "c": "x"}},
    )

    assert event.witness == {"a": {"c": "x", "d": None}, "b": [1, 2]}
    assert list(event.witness) == ["a", "b"]  # type: ignore[arg-type]


def test_witness_rejects_non_json_values() -> None:
    with pytest.raises(ValidationError):
        build_diagnostic_event(code="E_REPLAY_STACK_EMPTY", message="m", witness={1: "x"})
    with pytest.raises(ValidationError):
        build_diagnostic_event(code="E_REPLAY_STACK_EMPTY", message="m", witness=object())


@pytest.mark.parametrize("day", [0, 26])
def test_event_day_is_bounded(day: int) -> None:
    with pytest.raises(ValidationError):
        DiagnosticEvent(
            code="E_X",
            severity=Severity.ERROR,
            message="m",
            suggested_action="a",
            stage=PuzzleStage.SOLVE,
            day=day,
        )


def test_event_is_frozen() -> None:
    event = build_diagnostic_event(code="E_REPLAY_STACK_EMPTY", message="m")

    with pytest.raises(ValidationError):
        event.message = "changed"  # type: ignore[misc]


def test_every_diagnostic_is_fatal() -> None:
    assert list(Severity) == [Severity.ERROR]
    assert {entry.severity for entry in CANONICAL_DIAGNOSTIC_CATALOG.values()} == {Severity.ERROR}

    with pytest.raises(ValidationError):
        DiagnosticEvent(
            code="E_X",
            severity="warning",  # type: ignore[arg-type]
            message="m",
            suggested_action="a",
            stage=PuzzleStage.SOLVE,
        )
