from __future__ import annotations

from dataclasses import dataclass

from motor_market.domain.dealer import Dealer
from motor_market.ports.dealer_repository import DealerRepository


@dataclass(frozen=True, slots=True)
class ListDealersRequest:
    location: str | None = None  # case-insensitive substring


class ListDealers:
    def __init__(self, dealer_repository: DealerRepository) -> None:
        self._dealers = dealer_repository

    def execute(self, request: ListDealersRequest) -> list[Dealer]:
        location = request.location.strip() if request.location else None
        return self._dealers.list_all(location=location or None)
