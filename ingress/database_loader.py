"""
Routing-number database loader.

The database is a headerless comma-separated file with a fixed column order:

    routing_number, name, addr_line1, addr_line2, addr_line3, state

Every row must carry at least those six fields. A short row is a fatal load
error; nothing is skipped.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterator, Sequence, Union

from canonical import RECORD_FIELD_COUNT, RecordParseError, RoutingRecord
from ingress.line_reader import iter_decoded_lines, open_binary


def normalize_routing_number(routing_number: str) -> str:
    """Strip surrounding whitespace and line terminators from a routing number."""
    return routing_number.strip()


def parse_record(fields: Sequence[str], *, path: Union[str, Path] = "<memory>", line_number: int = 0) -> RoutingRecord:
    """
    Build a RoutingRecord from one split database row.

    Args:
        fields: Row fields in database column order. Fields past the sixth are ignored.
        path: Source file, used for error context.
        line_number: 1-based line of the row in the source file.

    Raises:
        RecordParseError: The row has fewer than RECORD_FIELD_COUNT fields.
    """
    if len(fields) < RECORD_FIELD_COUNT:
        raise RecordParseError(path, line_number, len(fields), RECORD_FIELD_COUNT)

    routing_number, name, addr_line1, addr_line2, addr_line3, state = fields[:RECORD_FIELD_COUNT]
    try:
        return RoutingRecord(
            routing_number=normalize_routing_number(routing_number),
            name=name,
            addr_line1=addr_line1,
            addr_line2=addr_line2,
            addr_line3=addr_line3,
            state=state,
        )
    except ValueError as e:
        raise RecordParseError(
            path, line_number, len(fields), RECORD_FIELD_COUNT, reason="empty routing number"
        ) from e


def iter_records(path: Union[str, Path]) -> Iterator[RoutingRecord]:
    """
    Yield database records in file order.

    The file is only read as far as the caller iterates, so a caller that stops
    early (single lookup) never parses the rest of the file.
    """
    with open_binary(path, "database") as f:
        # One line is one row; quotes are ordinary characters
        reader = csv.reader(iter_decoded_lines(f, path, "database"), quoting=csv.QUOTE_NONE)
        try:
            for row in reader:
                yield parse_record(row, path=path, line_number=reader.line_num)
        except csv.Error as e:
            raise RecordParseError(
                path, reader.line_num, 0, RECORD_FIELD_COUNT, reason=str(e)
            ) from e


def load_database(path: Union[str, Path]) -> dict[str, RoutingRecord]:
    """
    Load the whole database into a mapping keyed by routing number.

    Duplicate routing numbers resolve last-write-wins.

    Raises:
        FileAccessError: The database file cannot be opened or read.
        RecordParseError: A row is malformed. No partial mapping is returned.
    """
    database: dict[str, RoutingRecord] = {}
    for record in iter_records(path):
        database[record.routing_number] = record
    print(f"[Loader] Loaded {len(database)} routing records from {path}")
    return database
