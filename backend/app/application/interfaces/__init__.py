from .record_store import (
    CLIENTS,
    COLLECTIONS,
    MATTER_RATES,
    MATTERS,
    TIME_ENTRIES,
    TIMEKEEPERS,
    Record,
    RecordStore,
)

__all__ = [
    "CLIENTS",
    "COLLECTIONS",
    "MATTER_RATES",
    "MATTERS",
    "TIME_ENTRIES",
    "TIMEKEEPERS",
    "Record",
    "RecordStore",
]
