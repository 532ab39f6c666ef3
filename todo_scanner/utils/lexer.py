"""Tolerant lexer extracting C-family comments from source text.

Only as much of the language is understood as is needed to tell comments apart
from code: ``//`` line comments, ``/* ... */`` block comments and the literals
which may contain comment markers without starting a comment (regular, verbatim,
interpolated and raw strings as well as character literals).

The lexer never fails on text input. Unterminated literals run to the end of the
line (regular strings, characters) or to the end of the text (verbatim and raw
strings); an unterminated block comment is dropped.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

NEWLINE_CHARS = "\r\n\u0085\u2028\u2029"
STRING_PREFIX_CHARS = "@$"


@dataclass(frozen=True)
class Comment:
    """Span of a comment as character offsets into the source text."""

    start: int
    end: int


class LineIndex:
    """Map character offsets to zero-based line and column pairs."""

    def __init__(self, text: str) -> None:
        starts = [0]
        index = 0
        length = len(text)
        while index < length:
            char = text[index]
            if char == "\r" and index + 1 < length and text[index + 1] == "\n":
                index += 1
                starts.append(index + 1)
            elif char in NEWLINE_CHARS:
                starts.append(index + 1)
            index += 1
        self._starts: Tuple[int, ...] = tuple(starts)
        self._length = length

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def position(self, offset: int) -> Tuple[int, int]:
        if offset < 0 or offset > self._length:
            raise ValueError(f"Offset {offset} out of range [0, {self._length}]")
        line = bisect_right(self._starts, offset) - 1
        return line, offset - self._starts[line]


@dataclass(frozen=True)
class ParsedSource:
    """Comments of a source text in document order, with position lookup."""

    text: str
    comments: Tuple[Comment, ...]
    lines: LineIndex

    def comment_text(self, comment: Comment) -> str:
        return self.text[comment.start:comment.end]

    def position(self, comment: Comment) -> Tuple[int, int]:
        """Return the zero-based (line, column) where ``comment`` starts."""

        return self.lines.position(comment.start)


def parse_source(text: str) -> ParsedSource:
    return ParsedSource(text=text, comments=tuple(iter_comments(text)), lines=LineIndex(text))


def iter_comments(text: str) -> Iterator[Comment]:
    """Yield the comments of ``text`` in document order."""

    index = 0
    length = len(text)
    while index < length:
        if text.startswith("//", index):
            end = _line_end(text, index)
            yield Comment(index, end)
            index = end
            continue
        if text.startswith("/*", index):
            close = text.find("*/", index + 2)
            if close == -1:
                logger.debug("Dropping unterminated block comment at offset %d", index)
                return
            yield Comment(index, close + 2)
            index = close + 2
            continue
        literal_end = _skip_literal(text, index)
        index = literal_end if literal_end is not None else index + 1


def _line_end(text: str, index: int) -> int:
    length = len(text)
    while index < length and text[index] not in NEWLINE_CHARS:
        index += 1
    return index


def _skip_literal(text: str, index: int) -> Optional[int]:
    """Return the offset just past the literal starting at ``index``, if any."""

    char = text[index]
    if char == "'":
        return _skip_quoted(text, index + 1, "'")

    quote = index
    while quote < len(text) and text[quote] in STRING_PREFIX_CHARS:
        quote += 1
    if quote >= len(text) or text[quote] != '"':
        return None

    modifiers = text[index:quote]
    if "@" in modifiers:
        return _skip_verbatim(text, quote + 1, interpolated="$" in modifiers)
    quotes = _count_run(text, quote, '"')
    if quotes >= 3:
        # Raw string literal, closed by the same number of quotes.
        close = text.find('"' * quotes, quote + quotes)
        return len(text) if close == -1 else close + quotes
    return _skip_quoted(text, quote + 1, '"', interpolated="$" in modifiers)


def _count_run(text: str, index: int, char: str) -> int:
    end = index
    while end < len(text) and text[end] == char:
        end += 1
    return end - index


def _skip_quoted(text: str, index: int, quote: str, interpolated: bool = False) -> int:
    length = len(text)
    while index < length:
        char = text[index]
        if char == "\\":
            index += 2
        elif char == quote:
            return index + 1
        elif char in NEWLINE_CHARS:
            return index
        elif interpolated and char == "{":
            index = _skip_interpolation(text, index)
        else:
            index += 1
    return length


def _skip_verbatim(text: str, index: int, interpolated: bool = False) -> int:
    length = len(text)
    while index < length:
        char = text[index]
        if char == '"':
            if text.startswith('""', index):
                index += 2
                continue
            return index + 1
        if interpolated and char == "{":
            index = _skip_interpolation(text, index)
        else:
            index += 1
    return length


def _skip_interpolation(text: str, index: int) -> int:
    """Skip an interpolation hole starting at the ``{`` at ``index``."""

    if text.startswith("{{", index):
        return index + 2
    depth = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index + 1
        elif char in NEWLINE_CHARS:
            return index
        else:
            literal_end = _skip_literal(text, index)
            if literal_end is not None:
                index = literal_end
                continue
        index += 1
    return length
