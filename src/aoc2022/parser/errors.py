from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ParseErrorCode(StrEnum):
    E_PARSE_TRANSCRIPT_LINE_INVALID = "E_PARSE_TRANSCRIPT_LINE_INVALID"
    E_PARSE_CRATE_ROW_INVALID = "E_PARSE_CRATE_ROW_INVALID"
    E_PARSE_CRATE_PLAN_MALFORMED = "E_PARSE_CRATE_PLAN_MALFORMED"
    E_PARSE_INSTRUCTION_INVALID = "E_PARSE_INSTRUCTION_INVALID"
    E_PARSE_ASSIGNMENT_INVALID = "E_PARSE_ASSIGNMENT_INVALID"
    E_PARSE_DATASTREAM_INVALID = "E_PARSE_DATASTREAM_INVALID"
    E_PARSE_HEIGHT_GRID_INVALID = "E_PARSE_HEIGHT_GRID_INVALID"


@dataclass(frozen=True, slots=True)
class ParseErrorDetail:
    code: str
    message: str
    input_text: str
    line_number: int | None = None


class ParseError(ValueError):
    def __init__(self, detail: ParseErrorDetail) -> None:
        location = "" if detail.line_number is None else f" (line {detail.line_number})"
        super().__init__(f"{detail.code}: {detail.message}{location}")
        self.detail = detail

    @property
    def code(self) -> str:
        return self.detail.code


class GridParseError(ParseError):
    """A crate diagram row with malformed cell syntax."""


class MalformedInputError(ParseError):
    """The crate diagram is not followed by a valid separator."""


_ERROR_TYPES: dict[ParseErrorCode, type[ParseError]] = {
    ParseErrorCode.E_PARSE_CRATE_ROW_INVALID: GridParseError,
    ParseErrorCode.E_PARSE_CRATE_PLAN_MALFORMED: MalformedInputError,
}


def build_parse_error(
    code: ParseErrorCode,
    message: str,
    input_text: str,
    line_number: int | None = None,
) -> ParseError:
    error_type = _ERROR_TYPES.get(code, ParseError)
    return error_type(
        ParseErrorDetail(
            code=code.value,
            message=message,
            input_text=input_text,
            line_number=line_number,
        )
    )
