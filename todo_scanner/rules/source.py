"""Inspect all the comments of a parsed source file."""

from __future__ import annotations

from typing import Iterator

from todo_scanner.result import Record
from todo_scanner.utils.lexer import ParsedSource, parse_source

from . import RuleSet
from .text import classify


def inspect_source(source: ParsedSource, rules: RuleSet) -> Iterator[Record]:
    """Yield a record for every comment starting with a recognized prefix.

    Records follow the document order of the comments. Calling this again with the
    same arguments yields the same records.
    """

    for comment in source.comments:
        # Materialize the text of the comment only once.
        text = source.comment_text(comment)
        result = classify(text, rules)
        if result is None:
            continue
        line, column = source.position(comment)
        yield Record(result.prefix, result.suffix, line, column, result.status)


def inspect_text(text: str, rules: RuleSet) -> Iterator[Record]:
    return inspect_source(parse_source(text), rules)
