from __future__ import annotations

from dataclasses import dataclass

from motor_market.domain.analytics import AnalyticsPeriod, DealerAnalytics
from motor_market.ports.dealer_analytics_repository import DealerAnalyticsRepository


@dataclass(frozen=True, slots=True)
class GetDealerAnalyticsRequest:
    dealer_id: str
    period: AnalyticsPeriod = AnalyticsPeriod.MONTHLY


class GetDealerAnalytics:
    """Stored snapshots of one period kind, most recent period first."""

    def __init__(self, analytics_repository: DealerAnalyticsRepository) -> None:
        self._analytics = analytics_repository

    def execute(self, request: GetDealerAnalyticsRequest) -> list[DealerAnalytics]:
        return self._analytics.list_by_dealer(request.dealer_id, request.period)
