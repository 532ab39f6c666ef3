"""Status definitions for inspected annotation comments."""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Enumerate the possible outcomes of inspecting an annotation comment."""

    OK = "ok"
    DISALLOWED_PREFIX = "disallowedPrefix"
    NON_MATCHING_SUFFIX = "nonMatchingSuffix"

    @property
    def is_ok(self) -> bool:
        return self is Status.OK

    @property
    def hint(self) -> str:
        """Return the diagnostic label pointing the user at the relevant option."""

        hints = {
            Status.DISALLOWED_PREFIX: "disallowed prefix (see --disallowed-prefixes)",
            Status.NON_MATCHING_SUFFIX: "invalid suffix (see --suffixes)",
        }
        if self not in hints:
            raise ValueError(f"No diagnostic hint for status: {self.value}")
        return hints[self]
