"""Abstract record store (port) — named collections of flat JSON records.

Every write replaces a whole collection. Callers that read, modify and
write back a collection must hold ``locked(collection)`` for the whole
sequence so that concurrent operations cannot lose each other's updates.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from contextlib import AsyncExitStack, asynccontextmanager
from typing import Any

CLIENTS = "clients"
MATTERS = "matters"
TIMEKEEPERS = "timekeepers"
TIME_ENTRIES = "time_entries"
MATTER_RATES = "matter_rates"

# Locks are always taken in this order.
COLLECTIONS: tuple[str, ...] = (
    CLIENTS,
    MATTERS,
    TIMEKEEPERS,
    TIME_ENTRIES,
    MATTER_RATES,
)

Record = dict[str, Any]


class RecordStore(ABC):
    """Port for collection persistence — implemented in the infrastructure layer."""

    def __init__(self) -> None:
        self._locks: dict[str, asyncio.Lock] = {}

    @abstractmethod
    async def read_all(self, collection: str) -> list[Record]:
        """Return every record in the collection, or [] if it was never written."""
        ...

    @abstractmethod
    async def write_all(self, collection: str, records: list[Record]) -> None:
        """Replace the collection's content with ``records``."""
        ...

    async def next_id(self, collection: str) -> int:
        """Return 1 for an empty collection, else the highest id plus one."""
        records = await self.read_all(collection)
        if not records:
            return 1
        return max(int(r["id"]) for r in records) + 1

    @asynccontextmanager
    async def locked(self, *collections: str) -> AsyncIterator[None]:
        """Hold the per-collection locks for the given collections."""
        for name in collections:
            self._check_collection(name)
        ordered = [name for name in COLLECTIONS if name in collections]
        async with AsyncExitStack() as stack:
            for name in ordered:
                await stack.enter_async_context(self._lock_for(name))
            yield

    def _lock_for(self, collection: str) -> asyncio.Lock:
        lock = self._locks.get(collection)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[collection] = lock
        return lock

    @staticmethod
    def _check_collection(collection: str) -> None:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection '{collection}'")
