from __future__ import annotations

from dataclasses import dataclass

from motor_market.domain.sale import Sale
from motor_market.ports.sale_repository import SaleRepository


@dataclass(frozen=True, slots=True)
class ListSalesRequest:
    dealer_id: str


class ListSales:
    def __init__(self, sale_repository: SaleRepository) -> None:
        self._sales = sale_repository

    def execute(self, request: ListSalesRequest) -> list[Sale]:
        return self._sales.list_by_dealer(request.dealer_id)
