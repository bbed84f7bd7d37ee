from __future__ import annotations

from motor_market.domain.inventory import InventoryLogEntry
from motor_market.ports.inventory_log_repository import InventoryLogRepository


class InMemoryInventoryLogRepository(InventoryLogRepository):
    """Append-only list; entries written in the same instant keep latest-first order."""

    def __init__(self) -> None:
        self._entries: list[InventoryLogEntry] = []

    def append(self, entry: InventoryLogEntry) -> None:
        self._entries.append(entry)

    def list_by_dealer(self, dealer_id: str) -> list[InventoryLogEntry]:
        return self._newest_first([e for e in self._entries if e.dealer_id == dealer_id])

    def list_by_vehicle(self, vehicle_id: str) -> list[InventoryLogEntry]:
        return self._newest_first([e for e in self._entries if e.vehicle_id == vehicle_id])

    @staticmethod
    def _newest_first(entries: list[InventoryLogEntry]) -> list[InventoryLogEntry]:
        entries.reverse()
        entries.sort(key=lambda e: e.created_at, reverse=True)
        return entries
