from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from .errors import ParseErrorCode, build_parse_error


def parse_height_grid(lines: Sequence[str]) -> NDArray[np.int8]:
    """Parse rows of single-digit tree heights into a ``(rows, columns)`` array."""
    if not lines:
        raise build_parse_error(
            ParseErrorCode.E_PARSE_HEIGHT_GRID_INVALID,
            "height grid must contain at least one row",
            "",
        )

    columns = len(lines[0])
    for line_number, line in enumerate(lines, start=1):
        if not line or not line.isascii() or not line.isdigit():
            raise build_parse_error(
                ParseErrorCode.E_PARSE_HEIGHT_GRID_INVALID,
                "height grid rows must be non-empty runs of digits",
                line,
                line_number,
            )
        if len(line) != columns:
            raise build_parse_error(
                ParseErrorCode.E_PARSE_HEIGHT_GRID_INVALID,
                f"height grid rows must all have {columns} columns",
                line,
                line_number,
            )

    encoded = np.frombuffer("".join(lines).encode("ascii"), dtype=np.uint8)
    heights = (encoded - ord("0")).astype(np.int8)
    return np.ascontiguousarray(heights.reshape(len(lines), columns))
