"""Process-local record store. Content is lost when the process exits."""

import json

from app.application.interfaces import Record, RecordStore


class InMemoryRecordStore(RecordStore):
    """Keeps each collection as serialized JSON text, like the durable stores."""

    def __init__(self) -> None:
        super().__init__()
        self._data: dict[str, str] = {}

    async def read_all(self, collection: str) -> list[Record]:
        self._check_collection(collection)
        raw = self._data.get(collection)
        return json.loads(raw) if raw else []

    async def write_all(self, collection: str, records: list[Record]) -> None:
        self._check_collection(collection)
        self._data[collection] = json.dumps(records)
