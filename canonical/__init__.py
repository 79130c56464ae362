from .exceptions import (
    ConfigError,
    FileAccessError,
    RecordParseError,
    ToratError,
    UsageError,
)
from .models import (
    RECORD_FIELD_COUNT,
    UNKNOWN_SUFFIX,
    FilterReport,
    RoutingRecord,
    UnknownEntry,
)

__all__ = [
    "RECORD_FIELD_COUNT",
    "UNKNOWN_SUFFIX",
    "ConfigError",
    "FileAccessError",
    "FilterReport",
    "RecordParseError",
    "RoutingRecord",
    "ToratError",
    "UnknownEntry",
    "UsageError",
]
