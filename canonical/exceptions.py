"""
Exception taxonomy for TORAT.

Library code raises these; the command-line layer is the only place that
catches them and turns them into console messages.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ToratError(Exception):
    """Base exception for all TORAT errors."""
    pass


class UsageError(ToratError):
    """Raised when a command-line flag is missing its argument."""

    def __init__(self, flag: str, message: str):
        self.flag = flag
        super().__init__(message)


class FileAccessError(ToratError):
    """Raised when a database, input, output or config file cannot be opened, read or written."""

    def __init__(
        self,
        path: Union[str, Path],
        role: str,
        error: Optional[Exception] = None,
        *,
        writing: bool = False,
        line_number: Optional[int] = None,
    ):
        self.path = str(path)
        self.role = role
        self.error = error
        self.writing = writing
        self.line_number = line_number
        super().__init__(_file_error_message(self.path, role, error, writing, line_number))


class RecordParseError(ToratError, ValueError):
    """Raised when a database row cannot be turned into a record."""

    def __init__(
        self,
        path: Union[str, Path],
        line_number: int,
        field_count: int,
        expected: int,
        reason: Optional[str] = None,
    ):
        self.path = str(path)
        self.line_number = line_number
        self.field_count = field_count
        self.expected = expected
        self.reason = reason or f"expected at least {expected} fields, found {field_count}"
        super().__init__(f"Malformed record on line {line_number} of {self.path}: {self.reason}.")


class ConfigError(ToratError, ValueError):
    """Raised when a settings file is not a valid settings document."""

    def __init__(self, path: Union[str, Path], message: str):
        self.path = str(path)
        super().__init__(f"Invalid settings file {self.path}: {message}")


_ROLE_NAMES = {
    "database": "the database file",
    "input": "input file",
    "output": "output file",
}


def _file_error_message(
    path: str,
    role: str,
    error: Optional[Exception],
    writing: bool,
    line_number: Optional[int],
) -> str:
    if writing:
        if error is None:
            return f"Error writing to {role} file {path}."
        return f"Error writing to {role} file {path} ({error}.)"
    if role == "output":
        return f"Unable to open or create output file {path} ({error}.)"

    file_name = _ROLE_NAMES.get(role, f"the {role} file")
    if line_number is not None:
        message = f"Unable to read {file_name} {path} at line {line_number}."
    else:
        message = f"Unable to open {file_name} {path}."
    if error is not None:
        message += f"\n {error}"
    return message
