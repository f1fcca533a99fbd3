"""Tests for the SQLAlchemy-backed record store against a SQLite file."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.application.interfaces import CLIENTS, MATTERS
from app.application.schemas import ClientCreate, MatterCreate
from app.application.services import ClientService, MatterService
from app.infrastructure.database.repositories import SQLAlchemyRecordStore


@pytest_asyncio.fixture
async def sql_store(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'billing.db'}")
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    store = SQLAlchemyRecordStore(factory)
    await store.create_schema()
    yield store
    await engine.dispose()


@pytest.mark.asyncio
async def test_unwritten_collection_reads_empty(sql_store):
    assert await sql_store.read_all(CLIENTS) == []
    assert await sql_store.next_id(CLIENTS) == 1


@pytest.mark.asyncio
async def test_write_then_read_round_trip(sql_store):
    records = [
        {"id": 1, "client_id": 1, "matter_number": "0000", "status": "active"},
        {"id": 3, "client_id": 2, "matter_number": "0000", "status": "on_hold"},
    ]
    await sql_store.write_all(MATTERS, records)

    assert await sql_store.read_all(MATTERS) == records
    assert await sql_store.next_id(MATTERS) == 4


@pytest.mark.asyncio
async def test_second_write_overwrites_collection(sql_store):
    await sql_store.write_all(CLIENTS, [{"id": 1}, {"id": 2}])
    await sql_store.write_all(CLIENTS, [])

    assert await sql_store.read_all(CLIENTS) == []


@pytest.mark.asyncio
async def test_services_over_sql_store(sql_store):
    clients = ClientService(sql_store)
    matters = MatterService(sql_store)

    acme = await clients.create_client(ClientCreate(name="Acme"))
    await matters.create_matter(MatterCreate(client_id=acme.id, matter_name="Merger"))
    await matters.create_matter(MatterCreate(client_id=acme.id, matter_name="Lease"))

    assert [m.matter_number for m in await clients.get_matters_for_client(acme.id)] == [
        "0000",
        "0001",
    ]

    await clients.delete_client(acme.id)
    assert await sql_store.read_all(MATTERS) == []
    assert await sql_store.read_all(CLIENTS) == []
