from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from motor_market.domain.vehicle import Paging, SearchFilters, Vehicle


@dataclass(frozen=True)
class SearchResult:
    """Result from vehicle search including pagination metadata."""

    vehicles: list[Vehicle]
    total_count: int  # Total matching vehicles before paging


class VehicleRepository(ABC):
    """
    Port for vehicle data access.

    Contract (Preconditions):
        - filters and paging parameters must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate
        - save() receives the full vehicle; price_history entries already stored
          are never rewritten, only new trailing entries are appended
    """

    @abstractmethod
    def add(self, vehicle: Vehicle) -> None: ...

    @abstractmethod
    def save(self, vehicle: Vehicle) -> None: ...

    @abstractmethod
    def get_by_id(self, vehicle_id: str, *, for_update: bool = False) -> Vehicle | None:
        """
        Get vehicle by ID.

        Args:
            vehicle_id: Vehicle ID
            for_update: Lock the vehicle until the surrounding transaction ends
                        (ignored by stores without row locks)

        Returns:
            Vehicle if found, None otherwise
        """
        ...

    @abstractmethod
    def search(self, filters: SearchFilters, paging: Paging) -> SearchResult:
        """
        Search vehicles with filters, sort order and paging.

        Precondition: filters and paging must be validated by caller (UseCase).

        Args:
            filters: Filter criteria (AND semantics) and sort key - pre-validated
            paging: Pagination parameters - pre-validated

        Returns:
            SearchResult containing the requested page and the total match count
        """
        ...

    @abstractmethod
    def featured(self, limit: int) -> list[Vehicle]:
        """Newest available, in-stock vehicles, at most ``limit`` of them."""
        ...
