"""
Two-phase writer for the state-filter report.

Phase 1 streams flagged (out-of-state) records to the output file as soon as
they are found. Phase 2 appends the buffered unknown entries as a footer once
the whole target list has been consumed.

If a write fails partway through phase 1 the lines already written stay in the
output file; the run is aborted and the error reported.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, TextIO, Union

from canonical import FileAccessError, RoutingRecord, UnknownEntry
from egress.formatting import format_flagged_line, format_unknown_line


class ReportWriter:
    """
    Writes one filter report. Use as a context manager, or call close().
    """

    def __init__(self, stream: TextIO, path: Union[str, Path]) -> None:
        self._stream = stream
        self._path = str(path)
        self._unknowns: list[UnknownEntry] = []

    @classmethod
    def create(cls, path: Union[str, Path]) -> "ReportWriter":
        """Create or truncate the output file."""
        try:
            stream = open(path, "w", encoding="utf-8", newline="\n")
        except OSError as e:
            raise FileAccessError(path, "output", e) from e
        return cls(stream, path)

    def write_flagged(self, record: RoutingRecord) -> None:
        """Phase 1: append a flagged record immediately."""
        self._write(format_flagged_line(record))

    def add_unknown(self, entry: UnknownEntry) -> None:
        """Buffer an unknown entry for the footer."""
        self._unknowns.append(entry)

    def write_unknowns(self) -> None:
        """Phase 2: append every buffered unknown entry, in the order they were added."""
        for entry in self._unknowns:
            self._write(format_unknown_line(entry))
        self._unknowns.clear()

    def close(self) -> None:
        try:
            self._stream.close()
        except OSError as e:
            raise FileAccessError(self._path, "output", e, writing=True) from e

    def _write(self, text: str) -> None:
        try:
            self._stream.write(text)
            self._stream.flush()
        except OSError as e:
            raise FileAccessError(self._path, "output", e, writing=True) from e

    def __enter__(self) -> "ReportWriter":
        return self

    def __exit__(self, exc_type, exc: Optional[BaseException], tb) -> None:
        self.close()
