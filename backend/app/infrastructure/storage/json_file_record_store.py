"""Local filesystem record store — one JSON document per collection.

Storage layout:
    <store_dir>/<collection>.json
"""

import json
import logging
import os
from pathlib import Path

from app.application.interfaces import Record, RecordStore

logger = logging.getLogger(__name__)


class JsonFileRecordStore(RecordStore):
    """Infrastructure adapter keeping each collection in its own file."""

    def __init__(self, store_dir: str):
        super().__init__()
        self._store_dir = Path(store_dir)
        self._store_dir.mkdir(parents=True, exist_ok=True)

    def _path(self, collection: str) -> Path:
        self._check_collection(collection)
        return self._store_dir / f"{collection}.json"

    async def read_all(self, collection: str) -> list[Record]:
        path = self._path(collection)
        if not path.exists():
            return []
        text = path.read_text("utf-8")
        return json.loads(text) if text.strip() else []

    async def write_all(self, collection: str, records: list[Record]) -> None:
        """Write to a sibling temp file, then rename it over the old one."""
        path = self._path(collection)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(records, indent=2), encoding="utf-8")
        os.replace(tmp_path, path)
        logger.debug("Wrote %d record(s) to %s", len(records), path)
