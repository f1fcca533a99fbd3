"""Unit tests for the TimeEntryService."""

from datetime import date

import pytest

from app.application.schemas import (
    ClientCreate,
    MatterCreate,
    TimeEntryCreate,
    TimeEntryUpdate,
    TimekeeperCreate,
)
from app.domain.entities import UNKNOWN, RateTier
from app.domain.exceptions import EntityNotFoundError


def _entry(matter_id: int, timekeeper_id: int, day: str, hours: float = 1.0, **fields):
    return TimeEntryCreate(
        matter_id=matter_id, timekeeper_id=timekeeper_id, date=day, hours=hours, **fields
    )


@pytest.mark.asyncio
async def test_create_time_entry_accepts_dangling_references(time_entry_service):
    entry = await time_entry_service.create_time_entry(
        _entry(matter_id=77, timekeeper_id=88, day="2024-02-01", hours=2.5)
    )

    assert entry.id == 1
    assert entry.date == date(2024, 2, 1)
    assert entry.is_billable is True
    assert entry.override_rate is None


@pytest.mark.asyncio
async def test_get_time_entries_joins_names(
    client_service, matter_service, timekeeper_service, time_entry_service
):
    client = await client_service.create_client(ClientCreate(name="Acme"))
    matter = await matter_service.create_matter(
        MatterCreate(client_id=client.id, matter_name="Merger")
    )
    tk = await timekeeper_service.create_timekeeper(
        TimekeeperCreate(name="Jane Partner", rate_tier=RateTier.PARTNER, standard_rate=500)
    )
    await time_entry_service.create_time_entry(_entry(matter.id, tk.id, "2024-02-01"))

    [detail] = await time_entry_service.get_time_entries()

    assert detail.timekeeper_name == "Jane Partner"
    assert detail.client_name == "Acme"
    assert detail.matter_number == "0000"
    assert detail.matter_name == "Merger"


@pytest.mark.asyncio
async def test_missing_references_join_as_unknown(time_entry_service):
    await time_entry_service.create_time_entry(_entry(5, 6, "2024-02-01"))

    [detail] = await time_entry_service.get_time_entries()

    assert detail.timekeeper_name == UNKNOWN
    assert detail.client_name == UNKNOWN
    assert detail.matter_number == UNKNOWN
    assert detail.matter_name == UNKNOWN


@pytest.mark.asyncio
async def test_get_time_entries_filters_and_sorts(time_entry_service):
    await time_entry_service.create_time_entry(_entry(1, 1, "2024-01-10", description="a"))
    await time_entry_service.create_time_entry(_entry(1, 1, "2024-01-12", description="b"))
    await time_entry_service.create_time_entry(_entry(2, 1, "2024-01-15", description="c"))
    await time_entry_service.create_time_entry(_entry(1, 1, "2024-01-12", description="d"))

    all_entries = await time_entry_service.get_time_entries()
    assert [e.description for e in all_entries] == ["c", "d", "b", "a"]

    matter_one = await time_entry_service.get_time_entries(matter_id=1)
    assert [e.description for e in matter_one] == ["d", "b", "a"]


@pytest.mark.asyncio
async def test_get_time_entry_returns_none_when_missing(time_entry_service):
    assert await time_entry_service.get_time_entry(1) is None


@pytest.mark.asyncio
async def test_update_time_entry_merges_and_clears_override(time_entry_service):
    entry = await time_entry_service.create_time_entry(
        _entry(1, 1, "2024-01-10", hours=1.0, override_rate=600)
    )

    updated = await time_entry_service.update_time_entry(
        entry.id, TimeEntryUpdate(hours=3.0, is_billable=False)
    )
    assert updated.hours == 3.0
    assert updated.is_billable is False
    assert updated.override_rate == 600
    assert updated.created_at == entry.created_at

    cleared = await time_entry_service.update_time_entry(
        entry.id, TimeEntryUpdate(override_rate=None)
    )
    assert cleared.override_rate is None
    assert (await time_entry_service.get_time_entry(entry.id)).override_rate is None


@pytest.mark.asyncio
async def test_update_and_delete_missing_entry_raise(time_entry_service):
    with pytest.raises(EntityNotFoundError):
        await time_entry_service.update_time_entry(9, TimeEntryUpdate(hours=1))
    with pytest.raises(EntityNotFoundError):
        await time_entry_service.delete_time_entry(9)


@pytest.mark.asyncio
async def test_delete_time_entry(time_entry_service):
    keep = await time_entry_service.create_time_entry(_entry(1, 1, "2024-01-10"))
    drop = await time_entry_service.create_time_entry(_entry(1, 1, "2024-01-11"))

    await time_entry_service.delete_time_entry(drop.id)

    assert await time_entry_service.get_time_entry(drop.id) is None
    assert [e.id for e in await time_entry_service.get_time_entries()] == [keep.id]


def test_negative_hours_are_rejected():
    with pytest.raises(ValueError):
        _entry(1, 1, "2024-01-10", hours=-1)
