from .record_collection import RecordCollectionModel

__all__ = [
    "RecordCollectionModel",
]
