from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .combinators import (
    Parser,
    all_consuming,
    alt,
    constant,
    map_value,
    preceded,
    separated_pair,
    tag,
    take_while1,
    unsigned,
)
from .errors import ParseErrorCode, build_parse_error

_PATH_CHARACTERS = frozenset("abcdefghijklmnopqrstuvwxyz./")


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class ChangeDirectory:
    path: str


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    name: str


@dataclass(frozen=True, slots=True)
class FileEntry:
    size: int
    name: str


type Command = ListCommand | ChangeDirectory
type Entry = DirectoryEntry | FileEntry
type TranscriptRecord = Command | Entry

_path: Parser[str] = take_while1(lambda character: character in _PATH_CHARACTERS)

_list_command: Parser[Command] = constant(tag("ls"), ListCommand())
_change_directory: Parser[Command] = map_value(preceded(tag("cd "), _path), ChangeDirectory)
_command: Parser[TranscriptRecord] = preceded(tag("$ "), alt(_list_command, _change_directory))

_file_entry: Parser[Entry] = map_value(
    separated_pair(unsigned(), tag(" "), _path),
    lambda pair: FileEntry(size=pair[0], name=pair[1]),
)
_directory_entry: Parser[Entry] = map_value(preceded(tag("dir "), _path), DirectoryEntry)
_entry: Parser[TranscriptRecord] = alt(_file_entry, _directory_entry)

_line = all_consuming(alt(_command, _entry))


def parse_transcript_line(line: str, line_number: int | None = None) -> TranscriptRecord:
    record = _line(line)
    if record is None:
        raise build_parse_error(
            ParseErrorCode.E_PARSE_TRANSCRIPT_LINE_INVALID,
            "line is neither a command nor a directory entry",
            line,
            line_number,
        )
    return record


def parse_transcript(lines: Iterable[str]) -> tuple[TranscriptRecord, ...]:
    return tuple(
        parse_transcript_line(line, line_number)
        for line_number, line in enumerate(lines, start=1)
    )
