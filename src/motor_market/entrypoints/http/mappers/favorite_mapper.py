from __future__ import annotations

from motor_market.domain.favorite import Favorite
from motor_market.entrypoints.http.dtos.favorite import (
    FavoriteListResponseDTO,
    FavoriteResponseDTO,
)


class FavoriteMapper:
    @staticmethod
    def to_favorite_response(favorite: Favorite) -> FavoriteResponseDTO:
        return FavoriteResponseDTO(
            id=favorite.id,
            user_id=favorite.user_id,
            vehicle_id=favorite.vehicle_id,
            created_at=favorite.created_at,
        )

    @staticmethod
    def to_list_response(favorites: list[Favorite]) -> FavoriteListResponseDTO:
        return FavoriteListResponseDTO(
            favorites=[FavoriteMapper.to_favorite_response(f) for f in favorites]
        )
