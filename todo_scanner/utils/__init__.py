"""Utility helpers for the scanner."""

from .code import match_files
from .config import RuleConfig, load_config
from .fileio import read_text_file, read_yaml_file
from .lexer import ParsedSource, parse_source

__all__ = [
    "ParsedSource",
    "RuleConfig",
    "load_config",
    "match_files",
    "parse_source",
    "read_text_file",
    "read_yaml_file",
]
