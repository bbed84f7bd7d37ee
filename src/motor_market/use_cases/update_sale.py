from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace

from motor_market.domain.clock import Clock, utc_now
from motor_market.domain.sale import Sale, SalePatch, SaleStatus
from motor_market.ports.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateSaleRequest:
    sale_id: str
    patch: SalePatch


class UpdateSale:
    """
    Apply a partial update to a sale.

    completed_at is stamped the first time the sale becomes completed and is
    never overwritten afterwards, including by later completed -> completed
    updates.
    """

    def __init__(self, sale_repository: SaleRepository, clock: Clock = utc_now) -> None:
        self._sales = sale_repository
        self._clock = clock

    def execute(self, request: UpdateSaleRequest) -> Sale | None:
        """
        Returns:
            The updated sale, or None if no sale has that ID
        """
        patch = request.patch
        patch.validate()

        current = self._sales.get_by_id(request.sale_id, for_update=True)
        if current is None:
            return None

        changes = {
            f.name: getattr(patch, f.name)
            for f in fields(patch)
            if getattr(patch, f.name) is not None
        }
        updated = replace(current, **changes)

        if updated.status is SaleStatus.COMPLETED and updated.completed_at is None:
            updated = replace(updated, completed_at=self._clock())

        self._sales.save(updated)

        if updated.status is not current.status:
            logger.info(
                "Sale status changed",
                extra={
                    "sale_id": current.id,
                    "previous_status": current.status.value,
                    "new_status": updated.status.value,
                },
            )

        return updated
