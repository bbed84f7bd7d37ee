from __future__ import annotations

from abc import ABC, abstractmethod

from motor_market.domain.inventory import InventoryLogEntry


class InventoryLogRepository(ABC):
    """
    Append-only store of inventory log entries.

    Both listings return entries newest first.
    """

    @abstractmethod
    def append(self, entry: InventoryLogEntry) -> None: ...

    @abstractmethod
    def list_by_dealer(self, dealer_id: str) -> list[InventoryLogEntry]: ...

    @abstractmethod
    def list_by_vehicle(self, vehicle_id: str) -> list[InventoryLogEntry]: ...
