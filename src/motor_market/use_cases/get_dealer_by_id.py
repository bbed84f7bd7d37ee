from __future__ import annotations

from dataclasses import dataclass

from motor_market.domain.dealer import Dealer
from motor_market.ports.dealer_repository import DealerRepository


@dataclass(frozen=True, slots=True)
class GetDealerByIdRequest:
    dealer_id: str


class GetDealerById:
    def __init__(self, dealer_repository: DealerRepository) -> None:
        self._dealers = dealer_repository

    def execute(self, request: GetDealerByIdRequest) -> Dealer | None:
        return self._dealers.get_by_id(request.dealer_id)
