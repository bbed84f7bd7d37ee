"""Add favorite use case."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.errors import NotFoundError
from motor_market.domain.favorite import Favorite, NewFavorite
from motor_market.ports.favorite_repository import FavoriteRepository
from motor_market.ports.vehicle_repository import VehicleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddFavoriteRequest:
    favorite: NewFavorite


@dataclass(frozen=True, slots=True)
class AddFavoriteResponse:
    favorite: Favorite
    created: bool  # False when the vehicle was already saved


class AddFavorite:
    """
    Save a vehicle to a shopper's favorites. Idempotent.

    Saving a vehicle twice returns the first favorite unchanged. The vehicle
    row is locked while checking, so concurrent saves of the same pair
    cannot both insert.
    """

    def __init__(
        self,
        favorite_repository: FavoriteRepository,
        vehicle_repository: VehicleRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._favorites = favorite_repository
        self._vehicles = vehicle_repository
        self._clock = clock

    def execute(self, request: AddFavoriteRequest) -> AddFavoriteResponse:
        """
        Raises:
            ValidationError: If the user id is blank or too long
            NotFoundError: If the vehicle does not exist
        """
        data = request.favorite
        data.validate()

        if self._vehicles.get_by_id(data.vehicle_id, for_update=True) is None:
            raise NotFoundError(resource="Vehicle", identifier=data.vehicle_id)

        existing = self._favorites.get(data.user_id, data.vehicle_id)
        if existing is not None:
            return AddFavoriteResponse(favorite=existing, created=False)

        favorite = Favorite(
            id=str(uuid.uuid4()),
            user_id=data.user_id,
            vehicle_id=data.vehicle_id,
            created_at=self._clock(),
        )
        self._favorites.add(favorite)

        logger.info(
            "Favorite added",
            extra={"user_id": favorite.user_id, "vehicle_id": favorite.vehicle_id},
        )

        return AddFavoriteResponse(favorite=favorite, created=True)
