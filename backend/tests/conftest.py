"""Shared fixtures: services wired to a fresh in-memory record store."""

import pytest

from app.application.services import (
    BillingService,
    ClientService,
    InvoiceService,
    MatterRateService,
    MatterService,
    TimeEntryService,
    TimekeeperService,
)
from app.infrastructure.storage import InMemoryRecordStore


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def client_service(store) -> ClientService:
    return ClientService(store)


@pytest.fixture
def matter_service(store) -> MatterService:
    return MatterService(store)


@pytest.fixture
def timekeeper_service(store) -> TimekeeperService:
    return TimekeeperService(store)


@pytest.fixture
def time_entry_service(store) -> TimeEntryService:
    return TimeEntryService(store)


@pytest.fixture
def matter_rate_service(store) -> MatterRateService:
    return MatterRateService(store)


@pytest.fixture
def billing_service(store) -> BillingService:
    return BillingService(store)


@pytest.fixture
def invoice_service(matter_service, billing_service) -> InvoiceService:
    return InvoiceService(matter_service, billing_service)
