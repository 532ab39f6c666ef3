"""Core result data structures for the scanner."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, List

from .status import Status


@dataclass(frozen=True)
class Record:
    """Capture a single inspected annotation comment.

    ``line`` and ``column`` are zero-based and point at the start of the comment.
    """

    prefix: str
    suffix: str
    line: int
    column: int
    status: Status

    def __post_init__(self) -> None:
        if self.line < 0:
            raise ValueError(f"Negative line: {self.line}")
        if self.column < 0:
            raise ValueError(f"Negative column: {self.column}")

    @property
    def text(self) -> str:
        return self.prefix + self.suffix

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["status"] = self.status.value
        return data


@dataclass
class FileRecords:
    """Bundle the records inspected in a single file, split by outcome."""

    path: str
    ok_records: List[Record] = field(default_factory=list)
    failed_records: List[Record] = field(default_factory=list)

    @classmethod
    def from_records(cls, path: str, records: List[Record]) -> "FileRecords":
        file_records = cls(path=path)
        for record in records:
            file_records.add_record(record)
        return file_records

    @property
    def passed(self) -> bool:
        return not self.failed_records

    def add_record(self, record: Record) -> None:
        if record.status.is_ok:
            self.ok_records.append(record)
        else:
            self.failed_records.append(record)

    def to_dict(self) -> Dict[str, object]:
        return {
            "path": self.path,
            "records": [record.to_dict() for record in self.ok_records],
        }


@dataclass
class ScanResult:
    """Collect per-file records in input order."""

    files: List[FileRecords] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(file_records.passed for file_records in self.files)

    @property
    def failed_files(self) -> List[FileRecords]:
        return [file_records for file_records in self.files if not file_records.passed]

    @property
    def todo_bank(self) -> List[FileRecords]:
        """Return the files which contain at least one well-formed annotation."""

        return [file_records for file_records in self.files if file_records.ok_records]

    def add_file(self, file_records: FileRecords) -> None:
        self.files.append(file_records)

    def to_list(self) -> List[Dict[str, object]]:
        return [file_records.to_dict() for file_records in self.todo_bank]

    def exit_code(self) -> int:
        return 0 if self.passed else 1


def format_diagnostic(record: Record) -> str:
    """Describe why ``record`` is not acceptable, e.g. for the failure report."""

    if record.status is Status.DISALLOWED_PREFIX:
        payload = record.prefix
    elif record.status is Status.NON_MATCHING_SUFFIX:
        payload = record.suffix
    else:
        raise ValueError(f"Unhandled status: {record.status.value}")
    return f"{record.status.hint}: {payload}"


def format_failure(file_records: FileRecords) -> str:
    """Create the console block listing the invalid annotations of a file."""

    lines: List[str] = [f"FAILED: {file_records.path}"]
    for record in file_records.failed_records:
        lines.append(
            f" * Line {record.line + 1}, column {record.column + 1}: {format_diagnostic(record)}"
        )
    return "\n".join(lines)


def format_todo_line(path: str, record: Record) -> str:
    return f"{path}:{record.line + 1}:{record.column + 1}:{record.text}"


def format_todo_lines(result: ScanResult) -> List[str]:
    """Return one flat line per well-formed annotation, in input order."""

    return [
        format_todo_line(file_records.path, record)
        for file_records in result.todo_bank
        for record in file_records.ok_records
    ]
