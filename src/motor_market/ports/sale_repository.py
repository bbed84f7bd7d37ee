from __future__ import annotations

from abc import ABC, abstractmethod

from motor_market.domain.sale import Sale


class SaleRepository(ABC):
    @abstractmethod
    def add(self, sale: Sale) -> None: ...

    @abstractmethod
    def save(self, sale: Sale) -> None: ...

    @abstractmethod
    def get_by_id(self, sale_id: str, *, for_update: bool = False) -> Sale | None: ...

    @abstractmethod
    def list_by_dealer(self, dealer_id: str) -> list[Sale]:
        """Sales of a dealer, newest first."""
        ...
