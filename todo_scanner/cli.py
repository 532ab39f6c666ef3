"""Command-line entry point for the TODO scanner."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from .result import FileRecords, ScanResult, format_failure, format_todo_lines
from .rules import (
    DEFAULT_DISALLOWED_PREFIXES,
    DEFAULT_PREFIXES,
    DEFAULT_SUFFIXES,
    ConfigError,
    RuleSet,
    compile_rules,
)
from .rules.source import inspect_source
from .rules.text import MalformedCommentError
from .utils import RuleConfig, load_config, match_files, parse_source, read_text_file

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = "One or more TODOs were invalid. Please see above."
STDOUT_REPORT_PATH = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-scanner",
        description="Examines and collects the TODOs from your C# code.",
    )
    parser.add_argument(
        "--inputs",
        "-i",
        nargs="+",
        default=None,
        help="Glob patterns of the files to be inspected.",
    )
    parser.add_argument(
        "--excludes",
        "-e",
        nargs="+",
        default=None,
        help="Glob patterns of the files to be excluded from inspection.",
    )
    parser.add_argument(
        "--prefixes",
        nargs="*",
        default=None,
        help=f"Prefix regular expressions marking the TODOs. [Default: {' '.join(DEFAULT_PREFIXES)}]",
    )
    parser.add_argument(
        "--disallowed-prefixes",
        nargs="*",
        default=None,
        help=(
            "Prefix regular expressions which should not occur. "
            f"[Default: {' '.join(DEFAULT_DISALLOWED_PREFIXES)}]"
        ),
    )
    parser.add_argument(
        "--suffixes",
        nargs="*",
        default=None,
        help=f"Suffix regular expressions that TODOs must conform to. [Default: {' '.join(DEFAULT_SUFFIXES)}]",
    )
    parser.add_argument(
        "--case-insensitive",
        action="store_true",
        default=None,
        help="If set, the regular expressions are applied as case-insensitive.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML file providing the patterns, inputs and excludes; command-line options take precedence.",
    )
    parser.add_argument(
        "--report-path",
        default=None,
        help="If set, outputs the TODOs as a JSON (the path '-' denotes STDOUT).",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="If set, makes the console output more verbose.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug diagnostics to STDERR.",
    )
    return parser


def resolve_config(args: argparse.Namespace) -> RuleConfig:
    """Merge the command-line options over the configuration file over the defaults."""

    config = load_config(Path(args.config)) if args.config else RuleConfig()

    def pick(name: str, default):
        value = getattr(args, name)
        if value is not None:
            return value
        configured = getattr(config, name)
        return configured if configured is not None else default

    return RuleConfig(
        prefixes=pick("prefixes", list(DEFAULT_PREFIXES)),
        disallowed_prefixes=pick("disallowed_prefixes", list(DEFAULT_DISALLOWED_PREFIXES)),
        suffixes=pick("suffixes", list(DEFAULT_SUFFIXES)),
        inputs=pick("inputs", []),
        excludes=pick("excludes", []),
        case_insensitive=pick("case_insensitive", False),
    )


def run_scan(paths: Iterable[Path], rules: RuleSet) -> ScanResult:
    """Inspect the files in the given order."""

    result = ScanResult()
    for path in paths:
        source = parse_source(read_text_file(path))
        records = list(inspect_source(source, rules))
        logger.debug("Inspected %s: %d record(s)", path, len(records))
        result.add_file(FileRecords.from_records(str(path), records))
    return result


def write_output(result: ScanResult, report_path: str | None, verbose: bool = False) -> None:
    for file_records in result.files:
        if file_records.passed:
            if verbose:
                print(f"OK, {len(file_records.ok_records)} todo(s): {file_records.path}")
        else:
            print(format_failure(file_records), file=sys.stderr)

    if not result.passed:
        print(FAILURE_MESSAGE, file=sys.stderr)
        return

    if report_path is None:
        for line in format_todo_lines(result):
            print(line)
        return

    payload = json.dumps(result.to_list(), indent=2, ensure_ascii=False)
    if report_path == STDOUT_REPORT_PATH:
        print(payload)
    else:
        output_file = Path(report_path)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload + "\n", encoding="utf-8")


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
        rules = compile_rules(
            config.prefixes,
            config.disallowed_prefixes,
            config.suffixes,
            case_insensitive=bool(config.case_insensitive),
        )
    except ConfigError as exc:
        for error in exc.errors:
            print(error, file=sys.stderr)
        return 1

    if not config.inputs:
        parser.error("the following arguments are required: --inputs/-i")

    paths = list(match_files(Path.cwd(), config.inputs, config.excludes or ()))
    logger.debug("Resolved %d file(s) to inspect", len(paths))

    try:
        result = run_scan(paths, rules)
    except MalformedCommentError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    write_output(result, args.report_path, verbose=args.verbose)
    return result.exit_code()


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
