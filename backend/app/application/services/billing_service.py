"""Billing aggregation — resolves each entry's rate and totals a matter.

Rate precedence, highest first:

1. the entry's own ``override_rate``
2. the matter rate for (matter, timekeeper)
3. the timekeeper's ``standard_rate``
4. 0 when the timekeeper no longer exists

A tier whose rate is missing or 0 is skipped.
"""

import logging

from app.application.interfaces import MATTER_RATES, TIME_ENTRIES, TIMEKEEPERS, RecordStore
from app.domain.entities import (
    UNKNOWN,
    BillingSummary,
    MatterRate,
    RatePreview,
    TimeEntry,
    Timekeeper,
    TimekeeperBilling,
)

logger = logging.getLogger(__name__)


def resolve_effective_rate(
    override_rate: float | None,
    matter_rate: MatterRate | None,
    timekeeper: Timekeeper | None,
) -> float:
    """Apply the precedence above; the first non-zero rate wins."""
    return (
        override_rate
        or (matter_rate.override_rate if matter_rate else 0)
        or (timekeeper.standard_rate if timekeeper else 0)
        or 0
    )


class BillingService:
    """Computes billing summaries and rate previews from stored records."""

    def __init__(self, store: RecordStore):
        self._store = store

    async def _rate_tables(
        self, matter_id: int
    ) -> tuple[dict[int, Timekeeper], dict[int, MatterRate]]:
        timekeepers = {
            r["id"]: Timekeeper.from_record(r) for r in await self._store.read_all(TIMEKEEPERS)
        }
        matter_rates = {
            r["timekeeper_id"]: MatterRate.from_record(r)
            for r in reversed(await self._store.read_all(MATTER_RATES))
            if r["matter_id"] == matter_id
        }
        return timekeepers, matter_rates

    async def get_billing_summary(self, matter_id: int) -> BillingSummary:
        entries = [
            TimeEntry.from_record(r)
            for r in await self._store.read_all(TIME_ENTRIES)
            if r["matter_id"] == matter_id
        ]
        timekeepers, matter_rates = await self._rate_tables(matter_id)

        summary = BillingSummary(matter_id=matter_id)
        breakdown: dict[int, TimekeeperBilling] = {}

        for entry in entries:
            if not entry.is_billable:
                summary.total_non_billable_hours += entry.hours
                continue

            timekeeper = timekeepers.get(entry.timekeeper_id)
            rate = resolve_effective_rate(
                entry.override_rate, matter_rates.get(entry.timekeeper_id), timekeeper
            )
            amount = entry.hours * rate
            summary.total_billable_hours += entry.hours
            summary.total_billable_amount += amount

            bucket = breakdown.get(entry.timekeeper_id)
            if bucket is None:
                bucket = TimekeeperBilling(
                    timekeeper_id=entry.timekeeper_id,
                    timekeeper_name=(timekeeper.name if timekeeper else "") or UNKNOWN,
                    rate_used=rate,
                )
                breakdown[entry.timekeeper_id] = bucket
            bucket.billable_hours += entry.hours
            bucket.billable_amount += amount

        # dicts keep insertion order: first-seen timekeeper first
        summary.timekeeper_breakdown = list(breakdown.values())

        logger.debug(
            "Billing summary for matter id=%d: %d entries, %.2f billable hours, amount %.2f",
            matter_id,
            len(entries),
            summary.total_billable_hours,
            summary.total_billable_amount,
        )
        return summary

    async def preview_rate(
        self,
        matter_id: int,
        timekeeper_id: int,
        hours: float = 0,
        override_rate: float | None = None,
    ) -> RatePreview:
        """Rate and amount an entry would bill at if it were saved now."""
        timekeepers, matter_rates = await self._rate_tables(matter_id)
        rate = resolve_effective_rate(
            override_rate, matter_rates.get(timekeeper_id), timekeepers.get(timekeeper_id)
        )
        return RatePreview(rate=rate, amount=hours * rate)
