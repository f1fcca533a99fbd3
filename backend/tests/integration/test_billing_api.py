"""End-to-end tests for the billing API over an in-memory record store."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.infrastructure.dependencies import get_record_store
from app.infrastructure.storage import InMemoryRecordStore
from app.main import app


@pytest_asyncio.fixture
async def api():
    store = InMemoryRecordStore()
    app.dependency_overrides[get_record_store] = lambda: store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def _seed(api: AsyncClient) -> dict:
    client = (await api.post("/api/v1/clients", json={"name": "Acme"})).json()
    matter = (
        await api.post(
            "/api/v1/matters",
            json={"client_id": client["id"], "matter_name": "Merger", "description": "Deal"},
        )
    ).json()
    timekeeper = (
        await api.post(
            "/api/v1/timekeepers",
            json={"name": "Jane", "rate_tier": "partner", "standard_rate": 500},
        )
    ).json()
    return {"client": client, "matter": matter, "timekeeper": timekeeper}


@pytest.mark.asyncio
async def test_client_lifecycle(api):
    created = await api.post("/api/v1/clients", json={"name": "Acme", "address": "1 Main St"})
    assert created.status_code == 201
    body = created.json()
    assert body["client_number"] == "000000"
    assert body["contact_email"] == ""

    duplicate = await api.post("/api/v1/clients", json={"name": "Acme"})
    assert duplicate.status_code == 409

    exists = await api.get("/api/v1/clients/name-exists", params={"name": "Acme"})
    assert exists.json() == {"exists": True}

    updated = await api.put(f"/api/v1/clients/{body['id']}", json={"name": "Acme Ltd"})
    assert updated.status_code == 200
    assert updated.json()["name"] == "Acme Ltd"
    assert updated.json()["client_number"] == "000000"

    deleted = await api.delete(f"/api/v1/clients/{body['id']}")
    assert deleted.status_code == 204
    assert (await api.get(f"/api/v1/clients/{body['id']}")).status_code == 404
    assert (await api.delete(f"/api/v1/clients/{body['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_blank_client_name_is_unprocessable(api):
    response = await api.post("/api/v1/clients", json={"name": "  "})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_client_search_and_sort(api):
    for name in ["beta", "Alpha", "Alphabet"]:
        await api.post("/api/v1/clients", json={"name": name})

    searched = await api.get("/api/v1/clients", params={"q": "ALPHA"})
    assert {c["name"] for c in searched.json()} == {"Alpha", "Alphabet"}

    by_name = await api.get("/api/v1/clients", params={"sort": "name"})
    assert [c["name"] for c in by_name.json()] == ["Alpha", "Alphabet", "beta"]


@pytest.mark.asyncio
async def test_matter_for_unknown_client_is_rejected(api):
    response = await api.post("/api/v1/matters", json={"client_id": 99, "matter_name": "X"})
    assert response.status_code == 422
    assert "Client not found" in response.json()["detail"]


@pytest.mark.asyncio
async def test_billing_flow(api):
    seeded = await _seed(api)
    matter_id = seeded["matter"]["id"]
    tk_id = seeded["timekeeper"]["id"]

    rate = await api.put(
        "/api/v1/matter-rates",
        json={"matter_id": matter_id, "timekeeper_id": tk_id, "override_rate": 550},
    )
    assert rate.status_code == 200

    for payload in [
        {"hours": 2},
        {"hours": 1, "override_rate": 600},
        {"hours": 0.5, "is_billable": False},
    ]:
        response = await api.post(
            "/api/v1/time-entries",
            json={"matter_id": matter_id, "timekeeper_id": tk_id, "date": "2024-03-04", **payload},
        )
        assert response.status_code == 201

    summary = (await api.get(f"/api/v1/billing/{matter_id}/summary")).json()
    assert summary["total_billable_hours"] == 3
    assert summary["total_non_billable_hours"] == 0.5
    assert summary["total_billable_amount"] == 1100 + 600
    assert summary["timekeeper_breakdown"][0]["timekeeper_name"] == "Jane"
    assert summary["timekeeper_breakdown"][0]["rate_used"] == 550

    entries = (await api.get("/api/v1/time-entries", params={"matter_id": matter_id})).json()
    assert len(entries) == 3
    assert all(e["client_name"] == "Acme" for e in entries)

    preview = await api.post(
        "/api/v1/billing/rate-preview",
        json={"matter_id": matter_id, "timekeeper_id": tk_id, "hours": 2},
    )
    assert preview.json() == {"rate": 550, "amount": 1100}

    invoice = await api.get(
        f"/api/v1/billing/{matter_id}/invoice", params={"issued_on": "2024-03-31"}
    )
    assert invoice.status_code == 200
    assert "invoice-0000-2024-03-31.txt" in invoice.headers["content-disposition"]
    assert "TOTAL AMOUNT DUE: $1700.00" in invoice.text


@pytest.mark.asyncio
async def test_time_entry_not_found_paths(api):
    assert (await api.get("/api/v1/time-entries/1")).status_code == 404
    assert (await api.put("/api/v1/time-entries/1", json={"hours": 2})).status_code == 404
    assert (await api.delete("/api/v1/time-entries/1")).status_code == 404


@pytest.mark.asyncio
async def test_invoice_for_missing_matter_is_404(api):
    response = await api.get("/api/v1/billing/8/invoice")
    assert response.status_code == 404
