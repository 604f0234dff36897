"""Minimal parser combinators over single lines of text.

A parser takes the remaining input and returns ``(value, rest)`` on success or
``None`` when it does not match. Parsers never raise; callers turn a failed
:func:`all_consuming` match into a :class:`~aoc2022.parser.errors.ParseError`.
"""

from __future__ import annotations

from collections.abc import Callable

type ParseResult[T] = tuple[T, str] | None
type Parser[T] = Callable[[str], ParseResult[T]]

UINT64_MAX = 2**64 - 1


def tag(literal: str) -> Parser[str]:
    def parse(text: str) -> ParseResult[str]:
        if text.startswith(literal):
            return literal, text[len(literal) :]
        return None

    return parse


def take_while1(predicate: Callable[[str], bool]) -> Parser[str]:
    def parse(text: str) -> ParseResult[str]:
        end = 0
        while end < len(text) and predicate(text[end]):
            end += 1
        if end == 0:
            return None
        return text[:end], text[end:]

    return parse


def one_of(characters: str) -> Parser[str]:
    def parse(text: str) -> ParseResult[str]:
        if text and text[0] in characters:
            return text[0], text[1:]
        return None

    return parse


def unsigned(maximum: int = UINT64_MAX) -> Parser[int]:
    digits = take_while1(lambda character: "0" <= character <= "9")

    def parse(text: str) -> ParseResult[int]:
        result = digits(text)
        if result is None:
            return None
        literal, rest = result
        value = int(literal)
        if value > maximum:
            return None
        return value, rest

    return parse


def map_value[T, U](parser: Parser[T], transform: Callable[[T], U]) -> Parser[U]:
    def parse(text: str) -> ParseResult[U]:
        result = parser(text)
        if result is None:
            return None
        value, rest = result
        return transform(value), rest

    return parse


def constant[T, U](parser: Parser[T], value: U) -> Parser[U]:
    return map_value(parser, lambda _: value)


def preceded[T](prefix: Parser[object], parser: Parser[T]) -> Parser[T]:
    def parse(text: str) -> ParseResult[T]:
        head = prefix(text)
        if head is None:
            return None
        return parser(head[1])

    return parse


def delimited[T](open_: Parser[object], parser: Parser[T], close: Parser[object]) -> Parser[T]:
    def parse(text: str) -> ParseResult[T]:
        inner = preceded(open_, parser)(text)
        if inner is None:
            return None
        value, rest = inner
        tail = close(rest)
        if tail is None:
            return None
        return value, tail[1]

    return parse


def separated_pair[T, U](
    first: Parser[T], separator: Parser[object], second: Parser[U]
) -> Parser[tuple[T, U]]:
    def parse(text: str) -> ParseResult[tuple[T, U]]:
        head = first(text)
        if head is None:
            return None
        left, rest = head
        tail = preceded(separator, second)(rest)
        if tail is None:
            return None
        right, rest = tail
        return (left, right), rest

    return parse


def sequence(*parsers: Parser[object]) -> Parser[tuple[object, ...]]:
    def parse(text: str) -> ParseResult[tuple[object, ...]]:
        values: list[object] = []
        rest = text
        for parser in parsers:
            result = parser(rest)
            if result is None:
                return None
            value, rest = result
            values.append(value)
        return tuple(values), rest

    return parse


def separated_list1[T](separator: Parser[object], item: Parser[T]) -> Parser[tuple[T, ...]]:
    following = preceded(separator, item)

    def parse(text: str) -> ParseResult[tuple[T, ...]]:
        head = item(text)
        if head is None:
            return None
        value, rest = head
        values = [value]
        while True:
            step = following(rest)
            if step is None:
                break
            value, rest = step
            values.append(value)
        return tuple(values), rest

    return parse


def alt[T](*parsers: Parser[T]) -> Parser[T]:
    if not parsers:
        raise ValueError("alt requires at least one parser")

    def parse(text: str) -> ParseResult[T]:
        for parser in parsers:
            result = parser(text)
            if result is not None:
                return result
        return None

    return parse


def all_consuming[T](parser: Parser[T]) -> Callable[[str], T | None]:
    """Run ``parser`` and accept the match only when no input remains."""

    def parse(text: str) -> T | None:
        result = parser(text)
        if result is None:
            return None
        value, rest = result
        if rest:
            return None
        return value

    return parse
