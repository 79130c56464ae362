"""
Text formats for TORAT output.

The state filter and the single lookup compose a record's address differently:
the filter uses all four positional fields (three address lines and the state
column), the lookup uses the three address lines only and prints the state
separately. They are kept as two functions on purpose.
"""

from __future__ import annotations

from canonical import RoutingRecord, UnknownEntry


def filter_address(record: RoutingRecord) -> str:
    """Address as composed for state-filter mode (four fields)."""
    return record.address


def lookup_address(record: RoutingRecord) -> str:
    """Address as composed for single-lookup mode (three fields)."""
    return " ".join((record.addr_line1, record.addr_line2, record.addr_line3))


def format_flagged_line(record: RoutingRecord) -> str:
    """`ROUTING_NUMBER:NAME(STATE)` followed by a newline."""
    return f"{record.routing_number}:{record.name}({record.state})\n"


def format_unknown_line(entry: UnknownEntry) -> str:
    return entry.note + "\n"


def format_lookup_line(record: RoutingRecord) -> str:
    """`ROUTING_NUMBER: NAME, ADDRESS STATE`"""
    return f"{record.routing_number}: {record.name}, {lookup_address(record)} {record.state}"


def format_not_found(routing_number: str) -> str:
    return f"Unable to locate routing number ({routing_number}) in database."
