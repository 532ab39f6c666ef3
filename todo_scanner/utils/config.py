"""Rule configuration file helpers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from todo_scanner.rules import ConfigError

from .fileio import read_yaml_file

PATTERN_LIST_KEYS = ("prefixes", "disallowed_prefixes", "suffixes", "inputs", "excludes")


@dataclass
class RuleConfig:
    """Settings read from a configuration file; ``None`` means not configured."""

    prefixes: Optional[List[str]] = None
    disallowed_prefixes: Optional[List[str]] = None
    suffixes: Optional[List[str]] = None
    inputs: Optional[List[str]] = None
    excludes: Optional[List[str]] = None
    case_insensitive: Optional[bool] = None


def _string_list(key: str, value: Any, errors: List[str]) -> Optional[List[str]]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        errors.append(f"Expected '{key}' to be a list of strings, got: {value!r}")
        return None
    return list(value)


def parse_config(data: Dict[str, Any], source: str = "<config>") -> RuleConfig:
    errors: List[str] = []
    config = RuleConfig()
    for key, value in data.items():
        if key in PATTERN_LIST_KEYS:
            setattr(config, key, _string_list(key, value, errors))
        elif key == "case_insensitive":
            if isinstance(value, bool):
                config.case_insensitive = value
            else:
                errors.append(f"Expected 'case_insensitive' to be a boolean, got: {value!r}")
        else:
            errors.append(f"Unexpected key '{key}'")
    if errors:
        raise ConfigError([f"{source}: {error}" for error in errors])
    return config


def load_config(path: Path) -> RuleConfig:
    """Load the rule configuration from a YAML file."""

    if not path.is_file():
        raise ConfigError([f"Configuration file does not exist or is not a file: {path}"])
    try:
        data = read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise ConfigError([f"Failed to parse the configuration {path}: {exc}"]) from exc
    except OSError as exc:
        raise ConfigError([f"Failed to read the configuration {path}: {exc}"]) from exc
    if data is None:
        return RuleConfig()
    if not isinstance(data, dict):
        raise ConfigError([f"Configuration at {path} is not a mapping"])
    return parse_config(data, source=str(path))
