"""
Test suite for SearchVehicles UseCase.

Verifies:
- Validates paging and filter parameters before touching the repository
- Delegates filtering/sorting to repository (no filtering logic in UseCase)
- Returns properly structured response
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable
from unittest.mock import Mock

import pytest

from motor_market.domain.errors import ValidationError
from motor_market.domain.vehicle import Paging, SearchFilters, SortBy, Vehicle
from motor_market.ports.vehicle_repository import SearchResult, VehicleRepository
from motor_market.use_cases.search_vehicles import (
    SearchVehicles,
    SearchVehiclesRequest,
    SearchVehiclesResponse,
)


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock repository for testing UseCase in isolation."""
    return Mock(spec=VehicleRepository)


# ==============================================================================
# Happy Path
# ==============================================================================


def test_execute_delegates_to_repository(
    mock_repository: Mock, make_vehicle: Callable[..., Vehicle]
) -> None:
    vehicles = [make_vehicle("v-1"), make_vehicle("v-2")]
    mock_repository.search.return_value = SearchResult(vehicles=vehicles, total_count=12)
    filters = SearchFilters(make="toyota", sort_by=SortBy.PRICE_ASC)
    paging = Paging(offset=10, limit=2)

    response = SearchVehicles(mock_repository).execute(
        SearchVehiclesRequest(filters=filters, paging=paging)
    )

    assert response == SearchVehiclesResponse(vehicles=vehicles, total_count=12)
    mock_repository.search.assert_called_once_with(filters=filters, paging=paging)


def test_execute_with_no_matches(mock_repository: Mock) -> None:
    mock_repository.search.return_value = SearchResult(vehicles=[], total_count=0)

    response = SearchVehicles(mock_repository).execute(
        SearchVehiclesRequest(filters=SearchFilters(), paging=Paging())
    )

    assert response.vehicles == []
    assert response.total_count == 0


# ==============================================================================
# Validation - repository never called
# ==============================================================================


@pytest.mark.parametrize(
    "filters, paging",
    [
        (SearchFilters(), Paging(limit=0)),
        (SearchFilters(), Paging(limit=101)),
        (SearchFilters(), Paging(offset=-1)),
        (SearchFilters(price_min=Decimal("10"), price_max=Decimal("5")), Paging()),
        (SearchFilters(year_min=2024, year_max=2020), Paging()),
        (SearchFilters(max_mileage=-1), Paging()),
    ],
)
def test_invalid_requests_never_reach_repository(
    mock_repository: Mock, filters: SearchFilters, paging: Paging
) -> None:
    with pytest.raises(ValidationError):
        SearchVehicles(mock_repository).execute(
            SearchVehiclesRequest(filters=filters, paging=paging)
        )

    mock_repository.search.assert_not_called()
