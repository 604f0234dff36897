from .adapters import (
    UnknownDiagnosticCodeError,
    build_diagnostic_event,
    diagnostic_from_error,
    exception_message,
)
from .catalog import CANONICAL_DIAGNOSTIC_CATALOG, DiagnosticCatalogEntry
from .models import DiagnosticEvent, PuzzleStage, Severity

__all__ = [
    "CANONICAL_DIAGNOSTIC_CATALOG",
    "DiagnosticCatalogEntry",
    "DiagnosticEvent",
    "PuzzleStage",
    "Severity",
    "UnknownDiagnosticCodeError",
    "build_diagnostic_event",
    "diagnostic_from_error",
    "exception_message",
]
