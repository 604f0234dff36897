from __future__ import annotations

from pathlib import Path
from typing import Final, NoReturn

import typer

from aoc2022.answers import PuzzleAnswer
from aoc2022.diagnostics import DiagnosticEvent, build_diagnostic_event, diagnostic_from_error
from aoc2022.puzzles import PUZZLE_ERRORS, PUZZLES, solve_puzzle

app = typer.Typer(help="Advent of Code 2022 puzzle solvers")

_EXIT_FAILURE: Final[int] = 2
_CLI_INPUT_UNREADABLE: Final[str] = "E_CLI_INPUT_UNREADABLE"
_DEFAULT_INPUT: Final[Path] = Path("input.txt")
_INPUT_ARGUMENT = typer.Argument(
    _DEFAULT_INPUT,
    help="Puzzle input file",
    show_default=True,
)


@app.command()
def solve(day: int, input_path: Path = _INPUT_ARGUMENT) -> None:
    """Solve both parts of one day's puzzle."""
    if day not in PUZZLES:
        available = ", ".join(str(known) for known in PUZZLES)
        raise typer.BadParameter(
            f"no solver for day {day}; available days: {available}",
            param_hint="DAY",
        )

    try:
        input_text = input_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        _fail(_input_failure_diagnostic(input_path=input_path, day=day, exc=exc), exc)

    try:
        answer = solve_puzzle(day, input_text)
    except PUZZLE_ERRORS as exc:
        _fail(diagnostic_from_error(exc, day=day), exc)

    _print_answer(answer)


@app.command()
def days() -> None:
    """List the available puzzles."""
    for day, puzzle in PUZZLES.items():
        typer.echo(f"day {day}: {puzzle.title}")


def _input_failure_diagnostic(*, input_path: Path, day: int, exc: Exception) -> DiagnosticEvent:
    detail = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
    return build_diagnostic_event(
        code=_CLI_INPUT_UNREADABLE,
        message=f"cannot read puzzle input '{input_path}': {detail}",
        day=day,
        witness={
            "error_type": type(exc).__name__,
            "input_path": str(input_path),
        },
    )


def _fail(event: DiagnosticEvent, exc: Exception) -> NoReturn:
    _print_diagnostic(event)
    raise typer.Exit(code=_EXIT_FAILURE) from exc


def _print_diagnostic(event: DiagnosticEvent) -> None:
    location = "" if event.line_number is None else f" line={event.line_number}"
    typer.echo(
        "DIAG"
        f" severity={event.severity}"
        f" stage={event.stage}"
        f" code={event.code}"
        f"{location}"
        f" message={event.message}"
    )


def _print_answer(answer: PuzzleAnswer) -> None:
    for line in answer.lines():
        typer.echo(line)


def main() -> None:
    app()
