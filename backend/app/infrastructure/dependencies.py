"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from app.config import get_settings
from app.application.interfaces import RecordStore
from app.application.services import (
    BillingService,
    ClientService,
    InvoiceService,
    MatterRateService,
    MatterService,
    TimeEntryService,
    TimekeeperService,
)
from app.infrastructure.database.repositories import SQLAlchemyRecordStore
from app.infrastructure.database.session import async_session_factory
from app.infrastructure.storage import InMemoryRecordStore, JsonFileRecordStore


@lru_cache
def get_record_store() -> RecordStore:
    """Process-wide record store selected by ``storage_backend``.

    A single instance is shared so its per-collection locks serialize
    every writer in the process.
    """
    settings = get_settings()
    if settings.storage_backend == "json":
        return JsonFileRecordStore(settings.json_store_dir)
    if settings.storage_backend == "memory":
        return InMemoryRecordStore()

    return SQLAlchemyRecordStore(async_session_factory)


async def get_client_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[ClientService, None]:
    yield ClientService(store)


async def get_matter_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[MatterService, None]:
    """Provides a MatterService bound to the shared record store."""
    yield MatterService(store)


async def get_timekeeper_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[TimekeeperService, None]:
    yield TimekeeperService(store)


async def get_time_entry_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[TimeEntryService, None]:
    yield TimeEntryService(store)


async def get_matter_rate_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[MatterRateService, None]:
    yield MatterRateService(store)


async def get_billing_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[BillingService, None]:
    yield BillingService(store)


async def get_invoice_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[InvoiceService, None]:
    yield InvoiceService(MatterService(store), BillingService(store))
