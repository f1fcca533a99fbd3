"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.application.interfaces import CLIENTS, COLLECTIONS
from app.infrastructure.dependencies import get_record_store
from app.infrastructure.storage import InMemoryRecordStore
from app.main import app


@pytest.mark.asyncio
async def test_health_check_reports_record_counts():
    store = InMemoryRecordStore()
    await store.write_all(CLIENTS, [{"id": 0, "name": "Acme"}])
    app.dependency_overrides[get_record_store] = lambda: store
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/health")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data
    assert data["storage"] in {"database", "json", "memory"}
    assert set(data["records"]) == set(COLLECTIONS)
    assert data["records"][CLIENTS] == 1
