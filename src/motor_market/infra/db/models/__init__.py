from motor_market.infra.db.models.base import Base
from motor_market.infra.db.models.dealer import DealerRow, ReviewRow
from motor_market.infra.db.models.dealer_analytics import DealerAnalyticsRow
from motor_market.infra.db.models.favorite import FavoriteRow
from motor_market.infra.db.models.inventory_log import InventoryLogRow
from motor_market.infra.db.models.sale import SaleRow
from motor_market.infra.db.models.vehicle import PriceHistoryRow, VehicleRow

__all__ = [
    "Base",
    "DealerAnalyticsRow",
    "DealerRow",
    "FavoriteRow",
    "InventoryLogRow",
    "PriceHistoryRow",
    "ReviewRow",
    "SaleRow",
    "VehicleRow",
]
