from __future__ import annotations

from dataclasses import dataclass, field


# Minimum number of comma-separated fields in a database row:
# routing_number, name, addr_line1, addr_line2, addr_line3, state
RECORD_FIELD_COUNT = 6

UNKNOWN_SUFFIX = ": unknown (not in database.)"


@dataclass(frozen=True, slots=True)
class RoutingRecord:
    """
    One row of the routing-number reference database.

    Fields are kept exactly as they appear in the source row so the two output
    formats (state filter and single lookup) can compose the address the way
    each of them needs.
    """

    routing_number: str
    name: str
    addr_line1: str
    addr_line2: str
    addr_line3: str
    state: str

    def __post_init__(self) -> None:
        if not isinstance(self.routing_number, str) or not self.routing_number.strip():
            raise ValueError("routing_number must be a non-empty string.")
        for attr in ("name", "addr_line1", "addr_line2", "addr_line3", "state"):
            if not isinstance(getattr(self, attr), str):
                raise TypeError(f"{attr} must be a string.")

    @property
    def address(self) -> str:
        """Composite address: the three address lines followed by the state column."""
        return " ".join((self.addr_line1, self.addr_line2, self.addr_line3, self.state))


@dataclass(frozen=True, slots=True)
class UnknownEntry:
    """
    A target routing number that has no record in the database.
    """

    routing_number: str

    @property
    def note(self) -> str:
        return self.routing_number + UNKNOWN_SUFFIX


@dataclass(slots=True)
class FilterReport:
    """
    Outcome of one state-filter run.

    `flagged` and `unknowns` preserve the order in which the routing numbers
    appeared in the target list.
    """

    output_path: str
    target_state: str
    flagged: list[RoutingRecord] = field(default_factory=list)
    unknowns: list[UnknownEntry] = field(default_factory=list)
    in_state: int = 0

    @property
    def total_checked(self) -> int:
        return len(self.flagged) + len(self.unknowns) + self.in_state
