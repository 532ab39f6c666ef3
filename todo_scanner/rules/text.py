"""Inspect the text of a single comment against the rule set."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from todo_scanner.status import Status

from . import RuleSet

LINE_COMMENT_OPEN = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"


class MalformedCommentError(ValueError):
    """Raised when a block comment does not end with its closing marker."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Unexpected comment: {text}")


@dataclass(frozen=True)
class ClassificationResult:
    prefix: str
    suffix: str
    status: Status


def _strip_delimiters(text: str) -> Optional[str]:
    if text.startswith(LINE_COMMENT_OPEN):
        return text[len(LINE_COMMENT_OPEN):]
    if text.startswith(BLOCK_COMMENT_OPEN):
        if len(text) < len(BLOCK_COMMENT_OPEN) + len(BLOCK_COMMENT_CLOSE) or not text.endswith(
            BLOCK_COMMENT_CLOSE
        ):
            raise MalformedCommentError(text)
        return text[len(BLOCK_COMMENT_OPEN):-len(BLOCK_COMMENT_CLOSE)]
    # Not a comment.
    return None


def _split(patterns: Iterable[re.Pattern[str]], content: str) -> Optional[Tuple[str, str]]:
    for pattern in patterns:
        match = pattern.search(content)
        if match:
            return match.group(0), content[match.end():]
    return None


def classify(text: str, rules: RuleSet) -> Optional[ClassificationResult]:
    """Classify the raw text of a comment.

    The comment delimiters and the surrounding white-space are stripped before the
    prefix patterns are tried in order. The suffix is only validated for allowed
    prefixes; disallowed prefixes are reported regardless of what follows them.

    Returns ``None`` if ``text`` is not a comment or carries no recognized prefix.
    Raises :class:`MalformedCommentError` for a block comment without its closing
    marker.
    """

    content = _strip_delimiters(text.strip())
    if content is None:
        return None

    # Trim again due to the white-space around the comment markers.
    content = content.strip()

    split = _split(rules.prefixes, content)
    if split is not None:
        prefix, suffix = split
        if any(pattern.search(suffix) for pattern in rules.suffixes):
            return ClassificationResult(prefix, suffix, Status.OK)
        return ClassificationResult(prefix, suffix, Status.NON_MATCHING_SUFFIX)

    split = _split(rules.disallowed_prefixes, content)
    if split is not None:
        prefix, suffix = split
        return ClassificationResult(prefix, suffix, Status.DISALLOWED_PREFIX)

    return None
