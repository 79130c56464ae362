"""
State filter: cross-reference a list of routing numbers against the database.

For each routing number in the target list:
- found, registered in the target state   -> excluded, no output line
- found, registered in a different state  -> `ROUTING_NUMBER:NAME(STATE)`
- not in the database                     -> unknown footer line

Flagged lines are written in target-list order, followed by all unknown lines
in target-list order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional, Union

from canonical import FilterReport, RoutingRecord, UnknownEntry
from egress import ReportWriter
from ingress import load_database, read_target_routing_numbers


def is_flagged(record: RoutingRecord, target_state: str) -> bool:
    """A record is flagged when its registered state differs from the target state."""
    return record.state != target_state


def filter_by_state(
    database: Mapping[str, RoutingRecord],
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    target_state: str,
) -> FilterReport:
    """
    Write the filter report for the routing numbers listed in `input_path`.

    The target list is read in full before the output file is created, so an
    unreadable input leaves no output behind.

    Raises:
        FileAccessError: The input cannot be read, or the output cannot be
            created or written. Flagged lines written before a write failure
            remain in the output file.
    """
    report = FilterReport(output_path=str(output_path), target_state=target_state)

    routing_numbers = read_target_routing_numbers(input_path)

    with ReportWriter.create(output_path) as writer:
        for routing_number in routing_numbers:
            record: Optional[RoutingRecord] = database.get(routing_number)
            if record is None:
                print(f"[StateFilter] Unknown routing number entered: {routing_number}.")
                entry = UnknownEntry(routing_number)
                writer.add_unknown(entry)
                report.unknowns.append(entry)
            elif is_flagged(record, target_state):
                writer.write_flagged(record)
                report.flagged.append(record)
            else:
                report.in_state += 1

        writer.write_unknowns()

    return report


def run_state_filter(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    target_state: str,
    database_path: Union[str, Path],
) -> FilterReport:
    """Load the database and run the filter. The mapping lives only for this run."""
    database = load_database(database_path)
    report = filter_by_state(database, input_path, output_path, target_state)
    print(
        f"[StateFilter] Checked {report.total_checked} routing numbers: wrote {len(report.flagged)} "
        f"flagged and {len(report.unknowns)} unknown entries to {report.output_path}"
    )
    return report
