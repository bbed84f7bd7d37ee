from __future__ import annotations

from motor_market.domain.sale import Sale
from motor_market.ports.sale_repository import SaleRepository


class InMemorySaleRepository(SaleRepository):
    def __init__(self) -> None:
        self._sales: dict[str, Sale] = {}

    def add(self, sale: Sale) -> None:
        self._sales[sale.id] = sale

    def save(self, sale: Sale) -> None:
        self._sales[sale.id] = sale

    def get_by_id(self, sale_id: str, *, for_update: bool = False) -> Sale | None:
        return self._sales.get(sale_id)

    def list_by_dealer(self, dealer_id: str) -> list[Sale]:
        sales = [s for s in reversed(self._sales.values()) if s.dealer_id == dealer_id]
        sales.sort(key=lambda s: s.created_at, reverse=True)
        return sales
