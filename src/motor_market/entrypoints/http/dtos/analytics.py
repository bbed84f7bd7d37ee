from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from motor_market.domain.analytics import AnalyticsPeriod


class AnalyticsQueryDTO(BaseModel):
    period: AnalyticsPeriod = Field(default=AnalyticsPeriod.MONTHLY, examples=["monthly"])


class AnalyticsRecordDTO(BaseModel):
    period: AnalyticsPeriod = AnalyticsPeriod.MONTHLY
    day: date | None = Field(
        default=None,
        description="Any day inside the period to compute; defaults to today (UTC)",
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"period": "monthly", "day": "2025-05-14"}}
    )


class DealerAnalyticsResponseDTO(BaseModel):
    id: str
    dealer_id: str
    period: AnalyticsPeriod
    period_date: date = Field(description="First day of the period")
    total_sales: int
    revenue: str = Field(examples=["128500.00"])
    total_commission: str
    average_sale_price: str
    vehicles_listed: int
    created_at: datetime


class DealerAnalyticsListResponseDTO(BaseModel):
    analytics: list[DealerAnalyticsResponseDTO]
