"""Application service (use case) for Timekeeper operations."""

import logging

from app.application.interfaces import TIMEKEEPERS, RecordStore
from app.application.schemas.timekeeper import TimekeeperCreate
from app.domain.entities import Timekeeper

logger = logging.getLogger(__name__)


class TimekeeperService:
    def __init__(self, store: RecordStore):
        self._store = store

    async def _load(self) -> list[Timekeeper]:
        return [Timekeeper.from_record(r) for r in await self._store.read_all(TIMEKEEPERS)]

    async def create_timekeeper(self, data: TimekeeperCreate) -> Timekeeper:
        """Register a timekeeper. Names are not required to be unique."""
        async with self._store.locked(TIMEKEEPERS):
            records = await self._store.read_all(TIMEKEEPERS)
            timekeeper = Timekeeper(
                name=data.name,
                rate_tier=data.rate_tier,
                standard_rate=data.standard_rate,
                id=await self._store.next_id(TIMEKEEPERS),
            )
            records.append(timekeeper.to_record())
            await self._store.write_all(TIMEKEEPERS, records)

        logger.info(
            "Created timekeeper %s (%s @ %.2f)",
            timekeeper.name,
            timekeeper.rate_tier.value,
            timekeeper.standard_rate,
        )
        return timekeeper

    async def get_timekeepers(self) -> list[Timekeeper]:
        timekeepers = await self._load()
        return sorted(timekeepers, key=lambda t: (t.name.casefold(), t.name))

    async def get_timekeeper(self, timekeeper_id: int) -> Timekeeper | None:
        for timekeeper in await self._load():
            if timekeeper.id == timekeeper_id:
                return timekeeper
        return None
