from __future__ import annotations

from abc import ABC, abstractmethod

from motor_market.domain.dealer import Review


class ReviewRepository(ABC):
    """Reviews are immutable: there is no save()."""

    @abstractmethod
    def add(self, review: Review) -> None: ...

    @abstractmethod
    def list_by_dealer(self, dealer_id: str) -> list[Review]:
        """Reviews of a dealer, newest first."""
        ...

    @abstractmethod
    def list_by_vehicle(self, vehicle_id: str) -> list[Review]:
        """Reviews of a vehicle, newest first."""
        ...
