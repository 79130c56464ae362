from __future__ import annotations

from pathlib import Path
from typing import Union

from ingress.database_loader import normalize_routing_number
from ingress.line_reader import iter_decoded_lines, open_binary


def read_target_routing_numbers(path: Union[str, Path]) -> list[str]:
    """
    Read the newline-delimited list of routing numbers to check.

    The whole list is read before anything is written, so an unreadable or
    undecodable input never leaves a partial report behind. Blank lines are
    skipped.

    Raises:
        FileAccessError: The file cannot be opened, read or decoded.
    """
    routing_numbers: list[str] = []
    with open_binary(path, "input") as f:
        for line in iter_decoded_lines(f, path, "input"):
            routing_number = normalize_routing_number(line)
            if routing_number:
                routing_numbers.append(routing_number)
    return routing_numbers
