"""Application service (use case) for TimeEntry operations."""

import logging

from app.application.interfaces import MATTERS, TIME_ENTRIES, TIMEKEEPERS, RecordStore
from app.application.schemas.time_entry import TimeEntryCreate, TimeEntryUpdate
from app.domain.entities import Matter, TimeEntry, TimeEntryDetail, Timekeeper
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class TimeEntryService:
    """Records and lists time.

    Entries are stored without checking that their matter or timekeeper
    exists; listings join whatever is present and label the rest
    ``Unknown``.
    """

    def __init__(self, store: RecordStore):
        self._store = store

    async def _load(self) -> list[TimeEntry]:
        return [TimeEntry.from_record(r) for r in await self._store.read_all(TIME_ENTRIES)]

    async def _save(self, entries: list[TimeEntry]) -> None:
        await self._store.write_all(TIME_ENTRIES, [e.to_record() for e in entries])

    async def create_time_entry(self, data: TimeEntryCreate) -> TimeEntry:
        async with self._store.locked(TIME_ENTRIES):
            entries = await self._load()
            entry = TimeEntry(
                matter_id=data.matter_id,
                timekeeper_id=data.timekeeper_id,
                date=data.date,
                hours=data.hours,
                description=data.description,
                is_billable=data.is_billable,
                override_rate=data.override_rate,
                id=await self._store.next_id(TIME_ENTRIES),
            )
            entries.append(entry)
            await self._save(entries)

        logger.info(
            "Recorded %.2fh on matter id=%d for timekeeper id=%d",
            entry.hours,
            entry.matter_id,
            entry.timekeeper_id,
        )
        return entry

    async def get_time_entries(self, matter_id: int | None = None) -> list[TimeEntryDetail]:
        """List entries (optionally for one matter), newest work date first."""
        entries = await self._load()
        if matter_id is not None:
            entries = [e for e in entries if e.matter_id == matter_id]

        timekeepers = {
            r["id"]: Timekeeper.from_record(r) for r in await self._store.read_all(TIMEKEEPERS)
        }
        matters = {r["id"]: Matter.from_record(r) for r in await self._store.read_all(MATTERS)}

        details = [
            TimeEntryDetail.join(e, timekeepers.get(e.timekeeper_id), matters.get(e.matter_id))
            for e in entries
        ]
        return sorted(details, key=lambda d: (d.date, d.created_at, d.id or 0), reverse=True)

    async def get_time_entry(self, entry_id: int) -> TimeEntry | None:
        for entry in await self._load():
            if entry.id == entry_id:
                return entry
        return None

    async def update_time_entry(self, entry_id: int, data: TimeEntryUpdate) -> TimeEntry:
        changes = data.model_dump(exclude_unset=True)
        # Only override_rate may be explicitly cleared.
        changes = {k: v for k, v in changes.items() if v is not None or k == "override_rate"}

        async with self._store.locked(TIME_ENTRIES):
            entries = await self._load()
            entry = next((e for e in entries if e.id == entry_id), None)
            if entry is None:
                raise EntityNotFoundError("TimeEntry", entry_id)
            entry.update(changes)
            await self._save(entries)

        logger.info("Updated time entry id=%d", entry_id)
        return entry

    async def delete_time_entry(self, entry_id: int) -> None:
        async with self._store.locked(TIME_ENTRIES):
            entries = await self._load()
            remaining = [e for e in entries if e.id != entry_id]
            if len(remaining) == len(entries):
                raise EntityNotFoundError("TimeEntry", entry_id)
            await self._save(remaining)

        logger.info("Deleted time entry id=%d", entry_id)
