from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

from motor_market.domain.dealer import Dealer
from motor_market.ports.dealer_repository import DealerRepository


class InMemoryDealerRepository(DealerRepository):
    def __init__(self, dealers: list[Dealer] | None = None) -> None:
        self._dealers: dict[str, Dealer] = {d.id: d for d in dealers or []}

    def add(self, dealer: Dealer) -> None:
        self._dealers[dealer.id] = dealer

    def get_by_id(self, dealer_id: str, *, for_update: bool = False) -> Dealer | None:
        return self._dealers.get(dealer_id)

    def list_all(self, location: str | None = None) -> list[Dealer]:
        dealers = list(self._dealers.values())
        if location:
            dealers = [d for d in dealers if location.lower() in d.location.lower()]
        return sorted(dealers, key=lambda d: d.name)

    def update_rating(self, dealer_id: str, rating: Decimal, review_count: int) -> None:
        dealer = self._dealers[dealer_id]
        self._dealers[dealer_id] = replace(dealer, rating=rating, review_count=review_count)
