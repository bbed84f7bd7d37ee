from __future__ import annotations

from abc import ABC, abstractmethod

from motor_market.domain.favorite import Favorite


class FavoriteRepository(ABC):
    """
    Saved vehicles per shopper.

    Callers check for an existing (user_id, vehicle_id) pair before ``add``;
    implementations may reject a duplicate.
    """

    @abstractmethod
    def add(self, favorite: Favorite) -> None: ...

    @abstractmethod
    def get(self, user_id: str, vehicle_id: str) -> Favorite | None: ...

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Favorite]:
        """Newest first."""
        ...

    @abstractmethod
    def remove(self, user_id: str, vehicle_id: str) -> bool:
        """Delete the pair. Returns False if it was not saved."""
        ...
