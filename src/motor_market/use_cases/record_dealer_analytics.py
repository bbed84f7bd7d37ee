"""Record dealer analytics use case."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from motor_market.domain.analytics import (
    AnalyticsPeriod,
    DealerAnalytics,
    average_price,
    utc_day,
)
from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.errors import NotFoundError
from motor_market.domain.inventory import InventoryAction
from motor_market.domain.sale import SaleStatus
from motor_market.ports.dealer_analytics_repository import DealerAnalyticsRepository
from motor_market.ports.dealer_repository import DealerRepository
from motor_market.ports.inventory_log_repository import InventoryLogRepository
from motor_market.ports.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RecordDealerAnalyticsRequest:
    dealer_id: str
    period: AnalyticsPeriod = AnalyticsPeriod.MONTHLY
    day: date | None = None  # any day inside the period; defaults to today (UTC)


class RecordDealerAnalytics:
    """
    Compute and store a dealer's snapshot for one period.

    - total_sales / revenue / total_commission: sales completed inside the
      period (by completed_at, UTC)
    - average_sale_price: revenue / total_sales in cents, 0.00 without sales
    - vehicles_listed: "added" inventory log entries inside the period

    The dealer row is locked while recomputing, and an existing snapshot for
    the same period keeps its id.
    """

    def __init__(
        self,
        analytics_repository: DealerAnalyticsRepository,
        dealer_repository: DealerRepository,
        sale_repository: SaleRepository,
        inventory_log_repository: InventoryLogRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._analytics = analytics_repository
        self._dealers = dealer_repository
        self._sales = sale_repository
        self._logs = inventory_log_repository
        self._clock = clock

    def execute(self, request: RecordDealerAnalyticsRequest) -> DealerAnalytics:
        """
        Raises:
            NotFoundError: If the dealer does not exist
        """
        if self._dealers.get_by_id(request.dealer_id, for_update=True) is None:
            raise NotFoundError(resource="Dealer", identifier=request.dealer_id)

        now = self._clock()
        start, end = request.period.bounds(request.day or utc_day(now))

        completed = [
            sale
            for sale in self._sales.list_by_dealer(request.dealer_id)
            if sale.status is SaleStatus.COMPLETED
            and sale.completed_at is not None
            and start <= utc_day(sale.completed_at) < end
        ]
        listed = [
            entry
            for entry in self._logs.list_by_dealer(request.dealer_id)
            if entry.action is InventoryAction.ADDED and start <= utc_day(entry.created_at) < end
        ]
        revenue = sum((sale.sale_price for sale in completed), Decimal("0.00"))

        existing = self._analytics.get(request.dealer_id, request.period, start)
        snapshot = DealerAnalytics(
            id=existing.id if existing else str(uuid.uuid4()),
            dealer_id=request.dealer_id,
            period=request.period,
            period_date=start,
            total_sales=len(completed),
            revenue=revenue,
            total_commission=sum((sale.commission for sale in completed), Decimal("0.00")),
            average_sale_price=average_price(revenue, len(completed)),
            vehicles_listed=len(listed),
            created_at=now,
        )
        self._analytics.save(snapshot)

        logger.info(
            "Dealer analytics recorded",
            extra={
                "dealer_id": snapshot.dealer_id,
                "period": snapshot.period.value,
                "period_date": snapshot.period_date.isoformat(),
                "total_sales": snapshot.total_sales,
                "revenue": str(snapshot.revenue),
            },
        )

        return snapshot
