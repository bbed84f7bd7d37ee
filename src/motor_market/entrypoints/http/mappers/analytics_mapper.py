from __future__ import annotations

from motor_market.domain.analytics import DealerAnalytics
from motor_market.entrypoints.http.dtos.analytics import (
    DealerAnalyticsListResponseDTO,
    DealerAnalyticsResponseDTO,
)


class AnalyticsMapper:
    @staticmethod
    def to_analytics_response(snapshot: DealerAnalytics) -> DealerAnalyticsResponseDTO:
        return DealerAnalyticsResponseDTO(
            id=snapshot.id,
            dealer_id=snapshot.dealer_id,
            period=snapshot.period,
            period_date=snapshot.period_date,
            total_sales=snapshot.total_sales,
            revenue=str(snapshot.revenue),
            total_commission=str(snapshot.total_commission),
            average_sale_price=str(snapshot.average_sale_price),
            vehicles_listed=snapshot.vehicles_listed,
            created_at=snapshot.created_at,
        )

    @staticmethod
    def to_list_response(snapshots: list[DealerAnalytics]) -> DealerAnalyticsListResponseDTO:
        return DealerAnalyticsListResponseDTO(
            analytics=[AnalyticsMapper.to_analytics_response(s) for s in snapshots]
        )
