from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from motor_market.adapters.postgres_helpers import as_uuid, parse_uuid
from motor_market.domain.favorite import Favorite
from motor_market.infra.db.models import FavoriteRow
from motor_market.ports.favorite_repository import FavoriteRepository


class PostgresFavoriteRepository(FavoriteRepository):
    """
    PostgreSQL implementation of FavoriteRepository.

    uq_favorites_user_id_vehicle_id rejects a duplicate pair at flush time.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, favorite: Favorite) -> None:
        row = FavoriteRow(
            id=as_uuid(favorite.id),
            user_id=favorite.user_id,
            vehicle_id=as_uuid(favorite.vehicle_id),
            created_at=favorite.created_at,
        )
        self._session.add(row)
        self._session.flush()

    def get(self, user_id: str, vehicle_id: str) -> Favorite | None:
        vehicle_key = parse_uuid(vehicle_id)
        if vehicle_key is None:
            return None

        query = select(FavoriteRow).where(
            FavoriteRow.user_id == user_id,
            FavoriteRow.vehicle_id == vehicle_key,
        )
        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def list_by_user(self, user_id: str) -> list[Favorite]:
        query = (
            select(FavoriteRow)
            .where(FavoriteRow.user_id == user_id)
            .order_by(FavoriteRow.created_at.desc(), FavoriteRow.id)
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    def remove(self, user_id: str, vehicle_id: str) -> bool:
        vehicle_key = parse_uuid(vehicle_id)
        if vehicle_key is None:
            return False

        result = self._session.execute(
            delete(FavoriteRow).where(
                FavoriteRow.user_id == user_id,
                FavoriteRow.vehicle_id == vehicle_key,
            )
        )
        self._session.flush()
        return result.rowcount > 0

    @staticmethod
    def _to_domain(row: FavoriteRow) -> Favorite:
        return Favorite(
            id=str(row.id),
            user_id=row.user_id,
            vehicle_id=str(row.vehicle_id),
            created_at=row.created_at,
        )
