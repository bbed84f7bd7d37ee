from __future__ import annotations

from motor_market.domain.inventory import InventoryLogEntry, NewInventoryLogEntry
from motor_market.entrypoints.http.dtos.inventory_log import (
    InventoryLogCreateDTO,
    InventoryLogEntryDTO,
    InventoryLogListResponseDTO,
)
from motor_market.entrypoints.http.mappers.decimals import money_str, parse_decimals


class InventoryLogMapper:
    @staticmethod
    def to_new_entry(dto: InventoryLogCreateDTO) -> NewInventoryLogEntry:
        """
        Raises:
            ValidationError: If a price is not a valid decimal
        """
        prices = parse_decimals({"previous_price": dto.previous_price, "new_price": dto.new_price})

        return NewInventoryLogEntry(
            vehicle_id=dto.vehicle_id,
            action=dto.action,
            dealer_id=dto.dealer_id,
            previous_status=dto.previous_status,
            new_status=dto.new_status,
            previous_price=prices["previous_price"],
            new_price=prices["new_price"],
            notes=dto.notes,
            performed_by=dto.performed_by,
        )

    @staticmethod
    def to_entry_response(entry: InventoryLogEntry) -> InventoryLogEntryDTO:
        return InventoryLogEntryDTO(
            id=entry.id,
            vehicle_id=entry.vehicle_id,
            dealer_id=entry.dealer_id,
            action=entry.action,
            previous_status=entry.previous_status,
            new_status=entry.new_status,
            previous_price=money_str(entry.previous_price),
            new_price=money_str(entry.new_price),
            notes=entry.notes,
            performed_by=entry.performed_by,
            created_at=entry.created_at,
        )

    @staticmethod
    def to_list_response(entries: list[InventoryLogEntry]) -> InventoryLogListResponseDTO:
        return InventoryLogListResponseDTO(
            logs=[InventoryLogMapper.to_entry_response(entry) for entry in entries]
        )
