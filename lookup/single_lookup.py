"""
Single routing-number lookup.

Scans the database file row by row and stops at the first match; the full
mapping is never built.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from canonical import RoutingRecord
from egress.formatting import format_lookup_line, format_not_found
from ingress import iter_records, normalize_routing_number


def scan_database(database_path: Union[str, Path], routing_number: str) -> Optional[RoutingRecord]:
    """
    Return the first record whose routing number matches, or None.

    Rows before the match are parsed, so a malformed row ahead of the match is
    still a fatal RecordParseError.
    """
    wanted = normalize_routing_number(routing_number)
    for record in iter_records(database_path):
        if record.routing_number == wanted:
            return record
    return None


def describe_lookup(routing_number: str, record: Optional[RoutingRecord]) -> str:
    if record is None:
        return format_not_found(routing_number)
    return format_lookup_line(record)


def single_lookup(routing_number: str, database_path: Union[str, Path]) -> str:
    """Look up one routing number, print the summary line and return it."""
    record = scan_database(database_path, routing_number)
    message = describe_lookup(routing_number, record)
    print(message)
    return message
