from __future__ import annotations

from dataclasses import dataclass

from motor_market.domain.favorite import Favorite
from motor_market.ports.favorite_repository import FavoriteRepository


@dataclass(frozen=True, slots=True)
class ListFavoritesRequest:
    user_id: str


class ListFavorites:
    """A shopper's saved vehicles, newest first. Unknown shoppers have none."""

    def __init__(self, favorite_repository: FavoriteRepository) -> None:
        self._favorites = favorite_repository

    def execute(self, request: ListFavoritesRequest) -> list[Favorite]:
        return self._favorites.list_by_user(request.user_id)
