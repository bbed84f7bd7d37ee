from __future__ import annotations

import logging
from dataclasses import dataclass

from motor_market.domain.vehicle import Paging, SearchFilters, Vehicle
from motor_market.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchVehiclesRequest:
    filters: SearchFilters
    paging: Paging


@dataclass(frozen=True, slots=True)
class SearchVehiclesResponse:
    vehicles: list[Vehicle]
    total_count: int  # every match, regardless of offset/limit


class SearchVehicles:
    """
    One page of vehicles matching every supplied filter, in ``sort_by`` order.

    Range checks (year_min <= year_max, limit <= 100, ...) happen here, once;
    the repository receives only valid filters and owns matching and ordering.
    """

    def __init__(self, vehicle_repository: VehicleRepository) -> None:
        self._repository = vehicle_repository

    def execute(self, request: SearchVehiclesRequest) -> SearchVehiclesResponse:
        """
        Raises:
            FilterValidationError: If a range is inverted or a bound is negative
            PagingValidationError: If offset/limit are out of bounds
        """
        filters, paging = request.filters, request.paging
        filters.validate()
        paging.validate()

        result = self._repository.search(filters=filters, paging=paging)

        logger.debug(
            "Vehicle search",
            extra={
                "sort_by": filters.sort_by.value,
                "offset": paging.offset,
                "limit": paging.limit,
                "total_count": result.total_count,
            },
        )

        return SearchVehiclesResponse(vehicles=result.vehicles, total_count=result.total_count)
