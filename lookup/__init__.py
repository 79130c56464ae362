from .single_lookup import describe_lookup, scan_database, single_lookup
from .state_filter import filter_by_state, is_flagged, run_state_filter

__all__ = [
    "describe_lookup",
    "filter_by_state",
    "is_flagged",
    "run_state_filter",
    "scan_database",
    "single_lookup",
]
