from __future__ import annotations

from datetime import date

from motor_market.domain.analytics import AnalyticsPeriod, DealerAnalytics
from motor_market.ports.dealer_analytics_repository import DealerAnalyticsRepository

_Key = tuple[str, AnalyticsPeriod, date]


class InMemoryDealerAnalyticsRepository(DealerAnalyticsRepository):
    def __init__(self) -> None:
        self._snapshots: dict[_Key, DealerAnalytics] = {}

    def get(
        self, dealer_id: str, period: AnalyticsPeriod, period_date: date
    ) -> DealerAnalytics | None:
        return self._snapshots.get((dealer_id, period, period_date))

    def save(self, snapshot: DealerAnalytics) -> None:
        self._snapshots[(snapshot.dealer_id, snapshot.period, snapshot.period_date)] = snapshot

    def list_by_dealer(self, dealer_id: str, period: AnalyticsPeriod) -> list[DealerAnalytics]:
        snapshots = [
            s for s in self._snapshots.values() if s.dealer_id == dealer_id and s.period is period
        ]
        return sorted(snapshots, key=lambda s: s.period_date, reverse=True)
