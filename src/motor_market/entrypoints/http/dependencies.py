"""
Dependency injection for FastAPI routes.

Key principle: Database sessions are per-request, not cached. Every
repository built for a request shares that request's session, so all the
writes of one use case commit or roll back together.
Only stateless singletons use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from motor_market.adapters.postgres_dealer_analytics_repository import (
    PostgresDealerAnalyticsRepository,
)
from motor_market.adapters.postgres_dealer_repository import PostgresDealerRepository
from motor_market.adapters.postgres_favorite_repository import PostgresFavoriteRepository
from motor_market.adapters.postgres_inventory_log_repository import (
    PostgresInventoryLogRepository,
)
from motor_market.adapters.postgres_review_repository import PostgresReviewRepository
from motor_market.adapters.postgres_sale_repository import PostgresSaleRepository
from motor_market.adapters.postgres_vehicle_repository import PostgresVehicleRepository
from motor_market.infra.db.session import get_session
from motor_market.use_cases.add_favorite import AddFavorite
from motor_market.use_cases.calculate_vehicle_price import CalculateVehiclePrice
from motor_market.use_cases.create_dealer import CreateDealer
from motor_market.use_cases.create_inventory_log_entry import CreateInventoryLogEntry
from motor_market.use_cases.create_review import CreateReview
from motor_market.use_cases.create_vehicle import CreateVehicle
from motor_market.use_cases.get_dealer_analytics import GetDealerAnalytics
from motor_market.use_cases.get_dealer_by_id import GetDealerById
from motor_market.use_cases.get_featured_vehicles import GetFeaturedVehicles
from motor_market.use_cases.get_inventory_logs import GetInventoryLogs
from motor_market.use_cases.get_vehicle_by_id import GetVehicleById
from motor_market.use_cases.list_dealers import ListDealers
from motor_market.use_cases.list_favorites import ListFavorites
from motor_market.use_cases.list_reviews import ListReviews
from motor_market.use_cases.list_sales import ListSales
from motor_market.use_cases.recalculate_vehicle_price import RecalculateVehiclePrice
from motor_market.use_cases.record_dealer_analytics import RecordDealerAnalytics
from motor_market.use_cases.record_sale import RecordSale
from motor_market.use_cases.remove_favorite import RemoveFavorite
from motor_market.use_cases.search_vehicles import SearchVehicles
from motor_market.use_cases.update_sale import UpdateSale
from motor_market.use_cases.update_vehicle import UpdateVehicle


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into every repository of the request
    3. Commit/rollback and close the session when the request ends

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


@lru_cache
def get_calculate_vehicle_price_use_case() -> CalculateVehiclePrice:
    """The pricing engine holds no state, so one instance serves every request."""
    return CalculateVehiclePrice()


# ==============================================================================
# Vehicles
# ==============================================================================


def get_search_vehicles_use_case(db: Session = Depends(get_db)) -> SearchVehicles:
    return SearchVehicles(vehicle_repository=PostgresVehicleRepository(session=db))


def get_featured_vehicles_use_case(db: Session = Depends(get_db)) -> GetFeaturedVehicles:
    return GetFeaturedVehicles(vehicle_repository=PostgresVehicleRepository(session=db))


def get_vehicle_by_id_use_case(db: Session = Depends(get_db)) -> GetVehicleById:
    return GetVehicleById(vehicle_repository=PostgresVehicleRepository(session=db))


def get_create_vehicle_use_case(
    db: Session = Depends(get_db),
    pricing: CalculateVehiclePrice = Depends(get_calculate_vehicle_price_use_case),
) -> CreateVehicle:
    """
    Factory for CreateVehicle.

    Vehicle and inventory log repositories share ``db`` so the listing and
    its "added" log entry are committed together.
    """
    return CreateVehicle(
        vehicle_repository=PostgresVehicleRepository(session=db),
        dealer_repository=PostgresDealerRepository(session=db),
        inventory_log_repository=PostgresInventoryLogRepository(session=db),
        pricing=pricing,
    )


def get_update_vehicle_use_case(db: Session = Depends(get_db)) -> UpdateVehicle:
    return UpdateVehicle(
        vehicle_repository=PostgresVehicleRepository(session=db),
        inventory_log_repository=PostgresInventoryLogRepository(session=db),
    )


def get_recalculate_vehicle_price_use_case(
    db: Session = Depends(get_db),
    pricing: CalculateVehiclePrice = Depends(get_calculate_vehicle_price_use_case),
) -> RecalculateVehiclePrice:
    return RecalculateVehiclePrice(
        vehicle_repository=PostgresVehicleRepository(session=db),
        pricing=pricing,
    )


def get_inventory_logs_use_case(db: Session = Depends(get_db)) -> GetInventoryLogs:
    return GetInventoryLogs(inventory_log_repository=PostgresInventoryLogRepository(session=db))


def get_create_inventory_log_entry_use_case(
    db: Session = Depends(get_db),
) -> CreateInventoryLogEntry:
    return CreateInventoryLogEntry(
        inventory_log_repository=PostgresInventoryLogRepository(session=db),
        vehicle_repository=PostgresVehicleRepository(session=db),
        dealer_repository=PostgresDealerRepository(session=db),
    )


# ==============================================================================
# Dealers & reviews
# ==============================================================================


def get_create_dealer_use_case(db: Session = Depends(get_db)) -> CreateDealer:
    return CreateDealer(dealer_repository=PostgresDealerRepository(session=db))


def get_dealer_by_id_use_case(db: Session = Depends(get_db)) -> GetDealerById:
    return GetDealerById(dealer_repository=PostgresDealerRepository(session=db))


def get_list_dealers_use_case(db: Session = Depends(get_db)) -> ListDealers:
    return ListDealers(dealer_repository=PostgresDealerRepository(session=db))


def get_create_review_use_case(db: Session = Depends(get_db)) -> CreateReview:
    return CreateReview(
        review_repository=PostgresReviewRepository(session=db),
        dealer_repository=PostgresDealerRepository(session=db),
        vehicle_repository=PostgresVehicleRepository(session=db),
    )


def get_list_reviews_use_case(db: Session = Depends(get_db)) -> ListReviews:
    return ListReviews(review_repository=PostgresReviewRepository(session=db))


# ==============================================================================
# Sales
# ==============================================================================


def get_record_sale_use_case(db: Session = Depends(get_db)) -> RecordSale:
    """
    Factory for RecordSale.

    The sale, the vehicle update and the "sold" log entry go through one
    session and therefore one transaction.
    """
    return RecordSale(
        vehicle_repository=PostgresVehicleRepository(session=db),
        dealer_repository=PostgresDealerRepository(session=db),
        sale_repository=PostgresSaleRepository(session=db),
        inventory_log_repository=PostgresInventoryLogRepository(session=db),
    )


def get_update_sale_use_case(db: Session = Depends(get_db)) -> UpdateSale:
    return UpdateSale(sale_repository=PostgresSaleRepository(session=db))


def get_list_sales_use_case(db: Session = Depends(get_db)) -> ListSales:
    return ListSales(sale_repository=PostgresSaleRepository(session=db))


def get_record_dealer_analytics_use_case(
    db: Session = Depends(get_db),
) -> RecordDealerAnalytics:
    return RecordDealerAnalytics(
        analytics_repository=PostgresDealerAnalyticsRepository(session=db),
        dealer_repository=PostgresDealerRepository(session=db),
        sale_repository=PostgresSaleRepository(session=db),
        inventory_log_repository=PostgresInventoryLogRepository(session=db),
    )


def get_dealer_analytics_use_case(db: Session = Depends(get_db)) -> GetDealerAnalytics:
    return GetDealerAnalytics(analytics_repository=PostgresDealerAnalyticsRepository(session=db))


# ==============================================================================
# Favorites
# ==============================================================================


def get_add_favorite_use_case(db: Session = Depends(get_db)) -> AddFavorite:
    return AddFavorite(
        favorite_repository=PostgresFavoriteRepository(session=db),
        vehicle_repository=PostgresVehicleRepository(session=db),
    )


def get_list_favorites_use_case(db: Session = Depends(get_db)) -> ListFavorites:
    return ListFavorites(favorite_repository=PostgresFavoriteRepository(session=db))


def get_remove_favorite_use_case(db: Session = Depends(get_db)) -> RemoveFavorite:
    return RemoveFavorite(favorite_repository=PostgresFavoriteRepository(session=db))
