"""Application service (use case) for per-matter rate overrides."""

import logging

from app.application.interfaces import MATTER_RATES, RecordStore
from app.domain.entities import MatterRate

logger = logging.getLogger(__name__)


class MatterRateService:
    def __init__(self, store: RecordStore):
        self._store = store

    async def _load(self) -> list[MatterRate]:
        return [MatterRate.from_record(r) for r in await self._store.read_all(MATTER_RATES)]

    async def set_matter_rate(
        self, matter_id: int, timekeeper_id: int, override_rate: float
    ) -> MatterRate:
        """Upsert the override for (matter, timekeeper); the pair stays unique."""
        async with self._store.locked(MATTER_RATES):
            rates = await self._load()
            rate = next(
                (r for r in rates if r.matter_id == matter_id and r.timekeeper_id == timekeeper_id),
                None,
            )
            if rate is not None:
                rate.override_rate = override_rate
            else:
                rate = MatterRate(
                    matter_id=matter_id,
                    timekeeper_id=timekeeper_id,
                    override_rate=override_rate,
                    id=await self._store.next_id(MATTER_RATES),
                )
                rates.append(rate)
            await self._store.write_all(MATTER_RATES, [r.to_record() for r in rates])

        logger.info(
            "Matter id=%d rate for timekeeper id=%d set to %.2f",
            matter_id,
            timekeeper_id,
            override_rate,
        )
        return rate

    async def get_matter_rate(self, matter_id: int, timekeeper_id: int) -> MatterRate | None:
        for rate in await self._load():
            if rate.matter_id == matter_id and rate.timekeeper_id == timekeeper_id:
                return rate
        return None

    async def get_matter_rates(self, matter_id: int) -> list[MatterRate]:
        return [r for r in await self._load() if r.matter_id == matter_id]
