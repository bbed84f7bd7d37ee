from __future__ import annotations

import logging
from dataclasses import dataclass

from motor_market.ports.favorite_repository import FavoriteRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RemoveFavoriteRequest:
    user_id: str
    vehicle_id: str


class RemoveFavorite:
    """Unsave a vehicle. Removing a pair that is not saved is a no-op."""

    def __init__(self, favorite_repository: FavoriteRepository) -> None:
        self._favorites = favorite_repository

    def execute(self, request: RemoveFavoriteRequest) -> bool:
        """Returns True if a favorite was deleted."""
        removed = self._favorites.remove(request.user_id, request.vehicle_id)
        if removed:
            logger.info(
                "Favorite removed",
                extra={"user_id": request.user_id, "vehicle_id": request.vehicle_id},
            )
        return removed
