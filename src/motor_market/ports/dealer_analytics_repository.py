from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from motor_market.domain.analytics import AnalyticsPeriod, DealerAnalytics


class DealerAnalyticsRepository(ABC):
    """Dealer snapshots, at most one per (dealer_id, period, period_date)."""

    @abstractmethod
    def get(
        self, dealer_id: str, period: AnalyticsPeriod, period_date: date
    ) -> DealerAnalytics | None: ...

    @abstractmethod
    def save(self, snapshot: DealerAnalytics) -> None:
        """Insert the snapshot, or overwrite the one with the same key."""
        ...

    @abstractmethod
    def list_by_dealer(self, dealer_id: str, period: AnalyticsPeriod) -> list[DealerAnalytics]:
        """Most recent period first."""
        ...
