from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from motor_market.adapters.postgres_helpers import as_uuid, parse_uuid
from motor_market.domain.errors import NotFoundError
from motor_market.domain.sale import PaymentMethod, Sale, SaleStatus
from motor_market.infra.db.models import SaleRow
from motor_market.ports.sale_repository import SaleRepository


class PostgresSaleRepository(SaleRepository):
    """PostgreSQL implementation of SaleRepository."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def add(self, sale: Sale) -> None:
        row = SaleRow(
            id=as_uuid(sale.id),
            vehicle_id=as_uuid(sale.vehicle_id),
            dealer_id=as_uuid(sale.dealer_id),
            created_at=sale.created_at,
        )
        self._copy_columns(sale, row)
        self._session.add(row)
        self._session.flush()

    def save(self, sale: Sale) -> None:
        row = self._session.get(SaleRow, as_uuid(sale.id))
        if row is None:
            raise NotFoundError(resource="Sale", identifier=sale.id)

        self._copy_columns(sale, row)
        self._session.flush()

    def get_by_id(self, sale_id: str, *, for_update: bool = False) -> Sale | None:
        key = parse_uuid(sale_id)
        if key is None:
            return None

        query = select(SaleRow).where(SaleRow.id == key)
        if for_update:
            query = query.with_for_update().execution_options(populate_existing=True)

        row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def list_by_dealer(self, dealer_id: str) -> list[Sale]:
        key = parse_uuid(dealer_id)
        if key is None:
            return []

        query = (
            select(SaleRow)
            .where(SaleRow.dealer_id == key)
            .order_by(SaleRow.created_at.desc(), SaleRow.id)
        )
        rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _copy_columns(sale: Sale, row: SaleRow) -> None:
        row.buyer_name = sale.buyer_name
        row.buyer_email = sale.buyer_email
        row.buyer_phone = sale.buyer_phone
        row.sale_price = sale.sale_price
        row.commission = sale.commission
        row.payment_method = sale.payment_method.value
        row.status = sale.status.value
        row.notes = sale.notes
        row.completed_at = sale.completed_at

    @staticmethod
    def _to_domain(row: SaleRow) -> Sale:
        return Sale(
            id=str(row.id),
            vehicle_id=str(row.vehicle_id),
            dealer_id=str(row.dealer_id),
            buyer_name=row.buyer_name,
            buyer_email=row.buyer_email,
            buyer_phone=row.buyer_phone,
            sale_price=row.sale_price,
            commission=row.commission,
            payment_method=PaymentMethod(row.payment_method),
            status=SaleStatus(row.status),
            notes=row.notes,
            created_at=row.created_at,
            completed_at=row.completed_at,
        )
