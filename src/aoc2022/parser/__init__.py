from .assignments import SectionPair, SectionRange, parse_section_pair, parse_section_pairs
from .crates import (
    Crate,
    CratePlan,
    CrateRow,
    Instruction,
    parse_crate_plan,
    parse_crate_row,
    parse_instruction,
)
from .datastream import parse_datastream
from .errors import (
    GridParseError,
    MalformedInputError,
    ParseError,
    ParseErrorCode,
    ParseErrorDetail,
)
from .heights import parse_height_grid
from .lines import input_lines
from .transcript import (
    ChangeDirectory,
    Command,
    DirectoryEntry,
    Entry,
    FileEntry,
    ListCommand,
    TranscriptRecord,
    parse_transcript,
    parse_transcript_line,
)

__all__ = [
    "ChangeDirectory",
    "Command",
    "Crate",
    "CratePlan",
    "CrateRow",
    "DirectoryEntry",
    "Entry",
    "FileEntry",
    "GridParseError",
    "Instruction",
    "ListCommand",
    "MalformedInputError",
    "ParseError",
    "ParseErrorCode",
    "ParseErrorDetail",
    "SectionPair",
    "SectionRange",
    "TranscriptRecord",
    "input_lines",
    "parse_crate_plan",
    "parse_crate_row",
    "parse_datastream",
    "parse_height_grid",
    "parse_instruction",
    "parse_section_pair",
    "parse_section_pairs",
    "parse_transcript",
    "parse_transcript_line",
]
