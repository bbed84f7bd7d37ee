from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import InstrumentedAttribute, Session

from motor_market.adapters.postgres_helpers import as_uuid, optional_str, optional_uuid, parse_uuid
from motor_market.domain.inventory import InventoryAction, InventoryLogEntry
from motor_market.domain.vehicle import InventoryStatus
from motor_market.infra.db.models import InventoryLogRow
from motor_market.ports.inventory_log_repository import InventoryLogRepository


class PostgresInventoryLogRepository(InventoryLogRepository):
    """
    PostgreSQL implementation of InventoryLogRepository.

    Only ever INSERTs; there is no code path that updates or deletes a log row.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def append(self, entry: InventoryLogEntry) -> None:
        row = InventoryLogRow(
            id=as_uuid(entry.id),
            vehicle_id=as_uuid(entry.vehicle_id),
            dealer_id=optional_uuid(entry.dealer_id),
            action=entry.action.value,
            previous_status=entry.previous_status.value if entry.previous_status else None,
            new_status=entry.new_status.value,
            previous_price=entry.previous_price,
            new_price=entry.new_price,
            notes=entry.notes,
            performed_by=entry.performed_by,
            created_at=entry.created_at,
        )
        self._session.add(row)
        self._session.flush()

    def list_by_dealer(self, dealer_id: str) -> list[InventoryLogEntry]:
        return self._list_where(InventoryLogRow.dealer_id, dealer_id)

    def list_by_vehicle(self, vehicle_id: str) -> list[InventoryLogEntry]:
        return self._list_where(InventoryLogRow.vehicle_id, vehicle_id)

    def _list_where(self, column: InstrumentedAttribute, value: str) -> list[InventoryLogEntry]:
        key = parse_uuid(value)
        if key is None:
            return []

        query = (
            select(InventoryLogRow)
            .where(column == key)
            .order_by(InventoryLogRow.created_at.desc(), InventoryLogRow.id)
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _to_domain(row: InventoryLogRow) -> InventoryLogEntry:
        return InventoryLogEntry(
            id=str(row.id),
            vehicle_id=str(row.vehicle_id),
            dealer_id=optional_str(row.dealer_id),
            action=InventoryAction(row.action),
            previous_status=InventoryStatus(row.previous_status) if row.previous_status else None,
            new_status=InventoryStatus(row.new_status),
            previous_price=row.previous_price,
            new_price=row.new_price,
            notes=row.notes,
            performed_by=row.performed_by,
            created_at=row.created_at,
        )
