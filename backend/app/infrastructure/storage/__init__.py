from .json_file_record_store import JsonFileRecordStore
from .in_memory_record_store import InMemoryRecordStore

__all__ = [
    "JsonFileRecordStore",
    "InMemoryRecordStore",
]
