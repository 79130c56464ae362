from .database_loader import iter_records, load_database, normalize_routing_number, parse_record
from .line_reader import iter_decoded_lines
from .target_reader import read_target_routing_numbers

__all__ = [
    "iter_decoded_lines",
    "iter_records",
    "load_database",
    "normalize_routing_number",
    "parse_record",
    "read_target_routing_numbers",
]
