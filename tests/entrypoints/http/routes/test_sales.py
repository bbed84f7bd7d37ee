"""
Tests for the /v1/sales routes.

Covers amount parsing at the boundary, 201 on record, 409 when the vehicle
cannot be sold and 404 for unknown sales.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from motor_market.domain.errors import ConflictError, NotFoundError
from motor_market.domain.sale import PaymentMethod, Sale, SaleStatus
from motor_market.entrypoints.http.dependencies import (
    get_record_sale_use_case,
    get_update_sale_use_case,
)
from motor_market.entrypoints.http.exception_handlers import register_exception_handlers
from motor_market.entrypoints.http.routes.sales import router
from motor_market.use_cases.record_sale import RecordSaleResponse


@pytest.fixture
def app() -> FastAPI:
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/v1")
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def mock_use_case() -> Mock:
    return Mock()


@pytest.fixture
def sale(fixed_now: datetime) -> Sale:
    return Sale(
        id="s-1",
        vehicle_id="v-1",
        dealer_id="d-1",
        buyer_name="Jane Doe",
        sale_price=Decimal("42000.00"),
        commission=Decimal("1260.00"),
        payment_method=PaymentMethod.FINANCING,
        status=SaleStatus.COMPLETED,
        created_at=fixed_now,
        completed_at=fixed_now,
    )


SALE_PAYLOAD = {
    "vehicle_id": "v-1",
    "dealer_id": "d-1",
    "buyer_name": "Jane Doe",
    "sale_price": "42000.00",
    "commission": "1260.00",
    "payment_method": "financing",
    "status": "completed",
}


# ==============================================================================
# POST /v1/sales
# ==============================================================================


def test_record_sale_returns_201(
    app: FastAPI, client: TestClient, mock_use_case: Mock, sale: Sale
) -> None:
    mock_use_case.execute.return_value = RecordSaleResponse(sale=sale)
    app.dependency_overrides[get_record_sale_use_case] = lambda: mock_use_case

    response = client.post("/v1/sales", json=SALE_PAYLOAD)

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == "s-1"
    assert data["sale_price"] == "42000.00"
    assert data["commission"] == "1260.00"
    assert data["status"] == "completed"
    assert data["completed_at"] is not None

    new_sale = mock_use_case.execute.call_args.args[0].sale
    assert new_sale.sale_price == Decimal("42000.00")
    assert new_sale.payment_method is PaymentMethod.FINANCING


def test_record_sale_for_sold_vehicle_is_409(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.side_effect = ConflictError("Vehicle v-1 is already sold")
    app.dependency_overrides[get_record_sale_use_case] = lambda: mock_use_case

    response = client.post("/v1/sales", json=SALE_PAYLOAD)

    assert response.status_code == 409
    assert response.json() == {"detail": "Vehicle v-1 is already sold", "code": "CONFLICT"}


def test_record_sale_for_unknown_vehicle_is_404(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    mock_use_case.execute.side_effect = NotFoundError(resource="Vehicle", identifier="v-404")
    app.dependency_overrides[get_record_sale_use_case] = lambda: mock_use_case

    response = client.post("/v1/sales", json={**SALE_PAYLOAD, "vehicle_id": "v-404"})

    assert response.status_code == 404


@pytest.mark.parametrize(
    ("field", "value"),
    [
        ("sale_price", "forty grand"),
        ("sale_price", "-5"),
        ("commission", "1.234"),
        ("payment_method", "barter"),
        ("buyer_name", ""),
    ],
)
def test_record_sale_rejects_invalid_payload(
    app: FastAPI, client: TestClient, mock_use_case: Mock, field: str, value: str
) -> None:
    app.dependency_overrides[get_record_sale_use_case] = lambda: mock_use_case

    response = client.post("/v1/sales", json={**SALE_PAYLOAD, field: value})

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == field
    mock_use_case.execute.assert_not_called()


def test_record_sale_missing_buyer_name(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    app.dependency_overrides[get_record_sale_use_case] = lambda: mock_use_case
    payload = {k: v for k, v in SALE_PAYLOAD.items() if k != "buyer_name"}

    response = client.post("/v1/sales", json=payload)

    assert response.status_code == 422
    assert response.json()["errors"] == [
        {"field": "buyer_name", "message": "Field required", "code": "missing"}
    ]


# ==============================================================================
# PATCH /v1/sales/{sale_id}
# ==============================================================================


def test_update_sale(app: FastAPI, client: TestClient, mock_use_case: Mock, sale: Sale) -> None:
    mock_use_case.execute.return_value = replace(sale, status=SaleStatus.REFUNDED)
    app.dependency_overrides[get_update_sale_use_case] = lambda: mock_use_case

    response = client.patch("/v1/sales/s-1", json={"status": "refunded"})

    assert response.status_code == 200
    assert response.json()["status"] == "refunded"
    request = mock_use_case.execute.call_args.args[0]
    assert request.sale_id == "s-1"
    assert request.patch.status is SaleStatus.REFUNDED
    assert request.patch.sale_price is None


def test_update_sale_not_found(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.return_value = None
    app.dependency_overrides[get_update_sale_use_case] = lambda: mock_use_case

    response = client.patch("/v1/sales/s-404", json={"status": "cancelled"})

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Sale with identifier 's-404' not found",
        "code": "NOT_FOUND",
    }


def test_update_sale_rejects_unknown_status(
    app: FastAPI, client: TestClient, mock_use_case: Mock
) -> None:
    app.dependency_overrides[get_update_sale_use_case] = lambda: mock_use_case

    response = client.patch("/v1/sales/s-1", json={"status": "lost"})

    assert response.status_code == 422
    mock_use_case.execute.assert_not_called()
