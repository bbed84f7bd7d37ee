"""Tests for POST /v1/inventory-logs, backed by the in-memory repositories."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from motor_market.adapters.in_memory_dealer_repository import InMemoryDealerRepository
from motor_market.adapters.in_memory_inventory_log_repository import (
    InMemoryInventoryLogRepository,
)
from motor_market.adapters.in_memory_vehicle_repository import InMemoryVehicleRepository
from motor_market.domain.dealer import Dealer
from motor_market.domain.vehicle import Vehicle
from motor_market.entrypoints.http.dependencies import get_create_inventory_log_entry_use_case
from motor_market.entrypoints.http.exception_handlers import register_exception_handlers
from motor_market.entrypoints.http.routes.inventory_logs import router
from motor_market.use_cases.create_inventory_log_entry import CreateInventoryLogEntry


@pytest.fixture
def logs() -> InMemoryInventoryLogRepository:
    return InMemoryInventoryLogRepository()


@pytest.fixture
def app(
    logs: InMemoryInventoryLogRepository,
    make_vehicle: Callable[..., Vehicle],
    clock: Callable[[], datetime],
    fixed_now: datetime,
) -> FastAPI:
    use_case = CreateInventoryLogEntry(
        inventory_log_repository=logs,
        vehicle_repository=InMemoryVehicleRepository([make_vehicle("v-1")]),
        dealer_repository=InMemoryDealerRepository(
            [
                Dealer(id="d-1", name="Harbor Auto", location="Seattle, WA", created_at=fixed_now),
                Dealer(id="d-2", name="Rainier Cars", location="Tacoma, WA", created_at=fixed_now),
            ]
        ),
        clock=clock,
    )

    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    test_app.dependency_overrides[get_create_inventory_log_entry_use_case] = lambda: use_case
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


def test_record_removed_entry_returns_201(
    client: TestClient, logs: InMemoryInventoryLogRepository
) -> None:
    response = client.post(
        "/v1/inventory-logs",
        json={
            "vehicle_id": "v-1",
            "action": "removed",
            "new_status": "out_of_stock",
            "new_price": "24000.00",
            "notes": "Sent to auction",
            "performed_by": "lot-manager",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["vehicle_id"] == "v-1"
    assert data["dealer_id"] == "d-1"
    assert data["action"] == "removed"
    assert data["previous_status"] is None
    assert data["new_status"] == "out_of_stock"
    assert data["new_price"] == "24000.00"
    assert data["performed_by"] == "lot-manager"
    assert [e.id for e in logs.list_by_dealer("d-1")] == [data["id"]]


def test_automatic_action_is_rejected_with_domain_code(client: TestClient) -> None:
    response = client.post("/v1/inventory-logs", json={"vehicle_id": "v-1", "action": "sold"})

    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "VALIDATION_ERROR"
    assert body["errors"][0]["field"] == "action"
    assert body["errors"][0]["code"] == "AUTOMATIC_ACTION"


@pytest.mark.parametrize(
    "payload",
    [
        {"vehicle_id": "v-1", "action": "scrapped"},
        {"vehicle_id": "v-1", "action": "removed", "new_status": "lost"},
        {"vehicle_id": "v-1", "action": "removed", "new_price": "-1"},
        {"vehicle_id": "v-1", "action": "removed", "previous_price": "12.345"},
        {"action": "removed"},
    ],
)
def test_invalid_payloads_are_rejected(client: TestClient, payload: dict) -> None:
    response = client.post("/v1/inventory-logs", json=payload)

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_unknown_vehicle_returns_404(client: TestClient) -> None:
    response = client.post(
        "/v1/inventory-logs", json={"vehicle_id": "missing", "action": "removed"}
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "Vehicle with identifier 'missing' not found"


def test_other_dealers_vehicle_returns_409(
    client: TestClient, logs: InMemoryInventoryLogRepository
) -> None:
    response = client.post(
        "/v1/inventory-logs",
        json={"vehicle_id": "v-1", "dealer_id": "d-2", "action": "updated"},
    )

    assert response.status_code == 409
    assert response.json()["code"] == "CONFLICT"
    assert logs.list_by_dealer("d-2") == []
