from __future__ import annotations

from aoc2022.parser.errors import ParseError

from .catalog import CANONICAL_DIAGNOSTIC_CATALOG
from .models import DiagnosticEvent


class UnknownDiagnosticCodeError(KeyError):
    code = "E_DIAGNOSTIC_CODE_UNKNOWN"

    def __init__(self, diagnostic_code: str) -> None:
        super().__init__(f"{self.code}: no catalog entry for '{diagnostic_code}'")
        self.diagnostic_code = diagnostic_code


def build_diagnostic_event(
    *,
    code: str,
    message: str,
    day: int | None = None,
    line_number: int | None = None,
    witness: object | None = None,
) -> DiagnosticEvent:
    if not message:
        raise ValueError("diagnostic message must be non-empty")
    entry = CANONICAL_DIAGNOSTIC_CATALOG.get(code)
    if entry is None:
        raise UnknownDiagnosticCodeError(code)
    return DiagnosticEvent(
        code=code,
        severity=entry.severity,
        message=message,
        suggested_action=entry.suggested_action,
        stage=entry.stage,
        day=day,
        line_number=line_number,
        witness=witness,
    )


def exception_message(exc: Exception, code: str) -> str:
    message = str(exc).strip().removeprefix(f"{code}: ").strip()
    if message:
        return message
    return type(exc).__name__


def diagnostic_from_error(exc: Exception, *, day: int | None = None) -> DiagnosticEvent:
    """Convert a coded puzzle error into its catalog-backed diagnostic event."""
    if isinstance(exc, ParseError):
        detail = exc.detail
        return build_diagnostic_event(
            code=detail.code,
            message=detail.message,
            day=day,
            line_number=detail.line_number,
            witness={
                "error_type": type(exc).__name__,
                "input_text": detail.input_text,
            },
        )

    code = getattr(exc, "code", None)
    if not isinstance(code, str):
        raise TypeError(f"{type(exc).__name__} does not carry a diagnostic code")
    return build_diagnostic_event(
        code=code,
        message=exception_message(exc, code),
        day=day,
        witness={"error_type": type(exc).__name__},
    )
