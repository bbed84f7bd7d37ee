"""Test suite for UpdateSale."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from motor_market.adapters.in_memory_sale_repository import InMemorySaleRepository
from motor_market.domain.errors import ValidationError
from motor_market.domain.sale import PaymentMethod, Sale, SalePatch, SaleStatus
from motor_market.use_cases.update_sale import UpdateSale, UpdateSaleRequest


class SteppingClock:
    """Advances one hour per call so repeated stamps are distinguishable."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(hours=1)
        return self.now


@pytest.fixture()
def sales(fixed_now: datetime) -> InMemorySaleRepository:
    repository = InMemorySaleRepository()
    repository.add(
        Sale(
            id="s-1",
            vehicle_id="v-1",
            dealer_id="d-1",
            buyer_name="Jane Doe",
            sale_price=Decimal("24000.00"),
            payment_method=PaymentMethod.CASH,
            status=SaleStatus.PENDING,
            created_at=fixed_now,
        )
    )
    return repository


@pytest.fixture()
def clock(fixed_now: datetime) -> SteppingClock:
    return SteppingClock(fixed_now)


@pytest.fixture()
def use_case(sales: InMemorySaleRepository, clock: SteppingClock) -> UpdateSale:
    return UpdateSale(sale_repository=sales, clock=clock)


def _update(use_case: UpdateSale, sale_id: str = "s-1", **patch) -> Sale | None:
    return use_case.execute(UpdateSaleRequest(sale_id=sale_id, patch=SalePatch(**patch)))


def test_completing_a_sale_stamps_completed_at(
    use_case: UpdateSale, sales: InMemorySaleRepository, fixed_now: datetime
) -> None:
    updated = _update(use_case, status=SaleStatus.COMPLETED)

    assert updated is not None
    assert updated.completed_at == fixed_now + timedelta(hours=1)
    assert sales.get_by_id("s-1") == updated


def test_completed_at_is_never_overwritten(use_case: UpdateSale, fixed_now: datetime) -> None:
    _update(use_case, status=SaleStatus.COMPLETED)
    again = _update(use_case, status=SaleStatus.COMPLETED, notes="Paperwork filed")

    assert again is not None
    assert again.completed_at == fixed_now + timedelta(hours=1)
    assert again.notes == "Paperwork filed"


def test_refunding_keeps_completed_at(use_case: UpdateSale) -> None:
    completed = _update(use_case, status=SaleStatus.COMPLETED)
    refunded = _update(use_case, status=SaleStatus.REFUNDED)

    assert completed is not None and refunded is not None
    assert refunded.status is SaleStatus.REFUNDED
    assert refunded.completed_at == completed.completed_at


def test_partial_update_keeps_other_fields(use_case: UpdateSale) -> None:
    updated = _update(use_case, commission=Decimal("720.00"))

    assert updated is not None
    assert updated.commission == Decimal("720.00")
    assert updated.sale_price == Decimal("24000.00")
    assert updated.status is SaleStatus.PENDING
    assert updated.completed_at is None


def test_unknown_sale_returns_none(use_case: UpdateSale) -> None:
    assert _update(use_case, sale_id="missing", notes="x") is None


def test_invalid_patch_rejected(use_case: UpdateSale) -> None:
    with pytest.raises(ValidationError):
        _update(use_case, sale_price=Decimal("-1"))
