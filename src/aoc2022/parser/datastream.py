from __future__ import annotations

from .errors import ParseErrorCode, build_parse_error

_ASCII_WS = " \t\n\r\f\v"


def parse_datastream(input_text: str) -> str:
    stream = input_text.strip(_ASCII_WS)
    if not stream:
        raise build_parse_error(
            ParseErrorCode.E_PARSE_DATASTREAM_INVALID,
            "datastream must be non-empty",
            input_text,
        )
    if any(character in _ASCII_WS for character in stream):
        raise build_parse_error(
            ParseErrorCode.E_PARSE_DATASTREAM_INVALID,
            "datastream must be a single line without whitespace",
            input_text,
        )
    return stream
