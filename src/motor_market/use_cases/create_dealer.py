from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.dealer import Dealer, NewDealer
from motor_market.ports.dealer_repository import DealerRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateDealerRequest:
    dealer: NewDealer


class CreateDealer:
    """Register a dealer. Rating and review count always start at zero."""

    def __init__(self, dealer_repository: DealerRepository, clock: Clock = utc_now) -> None:
        self._dealers = dealer_repository
        self._clock = clock

    def execute(self, request: CreateDealerRequest) -> Dealer:
        data = request.dealer
        data.validate()

        dealer = Dealer(
            id=str(uuid.uuid4()),
            name=data.name,
            location=data.location,
            description=data.description,
            phone=data.phone,
            email=data.email,
            address=data.address,
            image_url=data.image_url,
            verified=data.verified,
            created_at=self._clock(),
        )
        self._dealers.add(dealer)

        logger.info("Dealer created", extra={"dealer_id": dealer.id, "dealer_name": dealer.name})

        return dealer
