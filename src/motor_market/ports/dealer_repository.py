from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from motor_market.domain.dealer import Dealer


class DealerRepository(ABC):
    @abstractmethod
    def add(self, dealer: Dealer) -> None: ...

    @abstractmethod
    def get_by_id(self, dealer_id: str, *, for_update: bool = False) -> Dealer | None: ...

    @abstractmethod
    def list_all(self, location: str | None = None) -> list[Dealer]:
        """
        List dealers, optionally narrowed to a case-insensitive location substring.
        """
        ...

    @abstractmethod
    def update_rating(self, dealer_id: str, rating: Decimal, review_count: int) -> None:
        """Overwrite both aggregate fields in a single write."""
        ...
