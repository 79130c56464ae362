"""
Run settings for TORAT.

Defaults below are used unless a flag changes them. A JSON settings file may override any
subset of them:

    {
        "output_file": "out.txt",
        "input_file": "target.txt",
        "state": "ME",
        "database_file": "data.csv"
    }
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional, Union

from canonical import ConfigError, FileAccessError


DEFAULT_OUTPUT_PATH = "out.txt"
DEFAULT_INPUT_PATH = "target.txt"
DEFAULT_STATE = "ME"
DEFAULT_DATABASE_PATH = "data.csv"

# Settings file key -> RunSettings field
_FILE_KEYS: dict[str, str] = {
    "output_file": "output_path",
    "input_file": "input_path",
    "state": "state",
    "database_file": "database_path",
}


@dataclass(frozen=True, slots=True)
class RunSettings:
    output_path: str = DEFAULT_OUTPUT_PATH
    input_path: str = DEFAULT_INPUT_PATH
    state: str = DEFAULT_STATE
    database_path: str = DEFAULT_DATABASE_PATH

    def with_overrides(self, **changes: Any) -> "RunSettings":
        return replace(self, **changes)


def load_settings_file(config_path: Union[str, Path], base: Optional[RunSettings] = None) -> RunSettings:
    """
    Apply a JSON settings file on top of `base` (or the defaults).

    Unknown keys are ignored.

    Raises:
        FileAccessError: The file does not exist or cannot be read.
        ConfigError: The document is not valid UTF-8 JSON, is not a JSON object, or a
            value is not a string.
    """
    base = base or RunSettings()
    path = Path(config_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise FileAccessError(config_path, "config", e) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(config_path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigError(config_path, "expected a JSON object.")

    changes: dict[str, str] = {}
    for key, field_name in _FILE_KEYS.items():
        if key not in data:
            continue
        value = data[key]
        if not isinstance(value, str):
            raise ConfigError(config_path, f"'{key}' must be a string.")
        changes[field_name] = value
    return base.with_overrides(**changes)
