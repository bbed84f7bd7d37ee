from __future__ import annotations

from motor_market.domain.favorite import Favorite
from motor_market.ports.favorite_repository import FavoriteRepository


class InMemoryFavoriteRepository(FavoriteRepository):
    def __init__(self) -> None:
        self._favorites: dict[tuple[str, str], Favorite] = {}

    def add(self, favorite: Favorite) -> None:
        key = (favorite.user_id, favorite.vehicle_id)
        if key in self._favorites:
            raise ValueError(f"Vehicle {favorite.vehicle_id} is already a favorite")
        self._favorites[key] = favorite

    def get(self, user_id: str, vehicle_id: str) -> Favorite | None:
        return self._favorites.get((user_id, vehicle_id))

    def list_by_user(self, user_id: str) -> list[Favorite]:
        favorites = [f for f in reversed(self._favorites.values()) if f.user_id == user_id]
        favorites.sort(key=lambda f: f.created_at, reverse=True)
        return favorites

    def remove(self, user_id: str, vehicle_id: str) -> bool:
        return self._favorites.pop((user_id, vehicle_id), None) is not None
