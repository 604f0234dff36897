from __future__ import annotations

from enum import StrEnum
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_PUZZLE_DAY = 25


class Severity(StrEnum):
    ERROR = "error"


class PuzzleStage(StrEnum):
    INPUT = "input"
    PARSE = "parse"
    BUILD = "build"
    SOLVE = "solve"


def _normalize_json(value: object) -> object:
    if value is None or isinstance(value, bool | int | float | str):
        return value
    if isinstance(value, list | tuple):
        return [_normalize_json(item) for item in value]
    if isinstance(value, dict):
        raw_dict = cast(dict[object, object], value)
        string_keys: list[str] = []
        for key in raw_dict:
            if not isinstance(key, str):
                raise ValueError("witness object keys must be strings")
            string_keys.append(key)
        return {key: _normalize_json(raw_dict[key]) for key in sorted(string_keys)}
    raise ValueError("witness must be JSON-serializable")


class DiagnosticEvent(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str = Field(min_length=1)
    severity: Severity
    message: str = Field(min_length=1)
    suggested_action: str = Field(min_length=1)
    stage: PuzzleStage

    day: int | None = Field(default=None, ge=1, le=MAX_PUZZLE_DAY)
    line_number: int | None = Field(default=None, ge=1)

    witness: object | None = None

    @field_validator("witness", mode="before")
    @classmethod
    def _validate_and_normalize_witness(cls, witness: object) -> object:
        if witness is None:
            return None
        return _normalize_json(witness)
