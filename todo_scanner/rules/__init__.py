"""Rule set governing how annotation comments are inspected."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_PREFIXES: Tuple[str, ...] = ("^TODO", "^BUG", "^HACK")

DEFAULT_DISALLOWED_PREFIXES: Tuple[str, ...] = (
    "^DONT-CHECK-IN",
    "^Todo",
    "^todo",
    "^ToDo",
    "^Bug",
    "^bug",
    "^Hack",
    "^hack",
)

DEFAULT_SUFFIXES: Tuple[str, ...] = (r"^ \([^)]+, [0-9]{4}-[0-9]{2}-[0-9]{2}\): .",)


class ConfigError(ValueError):
    """Raised when the rule configuration cannot be used for scanning."""

    def __init__(self, errors: Sequence[str]) -> None:
        self.errors = list(errors)
        super().__init__("\n".join(self.errors))


@dataclass(frozen=True)
class RuleSet:
    """Bundle the ordered pattern lists shared across all inspections.

    ``prefixes`` are tried in order and the first match wins. ``disallowed_prefixes``
    are only consulted when no prefix matched. Any one of ``suffixes`` matching the
    remainder of a comment is enough for it to be well-formed.
    """

    prefixes: Tuple[re.Pattern[str], ...] = ()
    disallowed_prefixes: Tuple[re.Pattern[str], ...] = ()
    suffixes: Tuple[re.Pattern[str], ...] = ()


def _compile_patterns(
    patterns: Iterable[str], kind: str, flags: int, errors: List[str]
) -> Tuple[re.Pattern[str], ...]:
    compiled: List[re.Pattern[str]] = []
    for pattern in patterns:
        try:
            compiled.append(re.compile(pattern, flags))
        except re.error as exc:
            errors.append(f"Failed to parse a {kind} pattern {pattern}: {exc}")
    return tuple(compiled)


def compile_rules(
    prefixes: Iterable[str] = DEFAULT_PREFIXES,
    disallowed_prefixes: Iterable[str] = DEFAULT_DISALLOWED_PREFIXES,
    suffixes: Iterable[str] = DEFAULT_SUFFIXES,
    case_insensitive: bool = False,
) -> RuleSet:
    """Compile the pattern lists into a :class:`RuleSet`.

    Every pattern is attempted so that all offending patterns are reported at once
    in the raised :class:`ConfigError`.
    """

    flags = re.IGNORECASE if case_insensitive else 0
    errors: List[str] = []
    rules = RuleSet(
        prefixes=_compile_patterns(prefixes, "prefix", flags, errors),
        disallowed_prefixes=_compile_patterns(disallowed_prefixes, "disallowed prefix", flags, errors),
        suffixes=_compile_patterns(suffixes, "suffix", flags, errors),
    )
    if errors:
        raise ConfigError(errors)
    logger.debug(
        "Compiled %d prefix, %d disallowed prefix and %d suffix pattern(s)",
        len(rules.prefixes),
        len(rules.disallowed_prefixes),
        len(rules.suffixes),
    )
    return rules


__all__ = [
    "ConfigError",
    "DEFAULT_DISALLOWED_PREFIXES",
    "DEFAULT_PREFIXES",
    "DEFAULT_SUFFIXES",
    "RuleSet",
    "compile_rules",
]
