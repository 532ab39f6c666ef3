"""Source file resolution."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Set


def _glob(cwd: Path, pattern: str) -> List[Path]:
    path = Path(pattern)
    if path.is_absolute():
        anchor = Path(path.anchor)
        relative = str(path.relative_to(anchor))
        if not relative or relative == ".":
            return [anchor]
        return sorted(anchor.glob(relative))
    return sorted(match.relative_to(cwd) for match in cwd.glob(pattern))


def match_files(cwd: Path, inputs: Iterable[str], excludes: Iterable[str] = ()) -> Iterator[Path]:
    """Yield the files matched by the ``inputs`` globs minus those matched by ``excludes``.

    Files are yielded in the order of the patterns, sorted within a pattern, and each
    file at most once. Relative patterns are resolved against ``cwd`` and yield
    relative paths.
    """

    excluded: Set[Path] = {
        (cwd / match).resolve() for pattern in excludes for match in _glob(cwd, pattern)
    }
    seen: Set[Path] = set()
    for pattern in inputs:
        for match in _glob(cwd, pattern):
            resolved = (cwd / match).resolve()
            if resolved in seen or resolved in excluded or not resolved.is_file():
                continue
            seen.add(resolved)
            yield match
