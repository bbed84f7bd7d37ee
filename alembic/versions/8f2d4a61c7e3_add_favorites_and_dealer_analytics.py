"""Add favorites and dealer analytics

Revision ID: 8f2d4a61c7e3
Revises: 3c1e9b7d2a40
Create Date: 2026-10-19 15:40:07.218934

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "8f2d4a61c7e3"
down_revision: Union[str, Sequence[str], None] = "3c1e9b7d2a40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "favorites",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", sa.String(length=100), nullable=False),
        sa.Column(
            "vehicle_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("vehicles.id"),
            nullable=False,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("user_id", "vehicle_id", name="uq_favorites_user_id_vehicle_id"),
    )
    op.create_index("ix_favorites_user_id", "favorites", ["user_id"])

    op.create_table(
        "dealer_analytics",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "dealer_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("dealers.id"), nullable=False
        ),
        sa.Column("period", sa.String(length=10), nullable=False),
        sa.Column("period_date", sa.Date(), nullable=False),
        sa.Column("total_sales", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("revenue", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("total_commission", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("average_sale_price", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("vehicles_listed", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint(
            "dealer_id", "period", "period_date", name="uq_dealer_analytics_dealer_period"
        ),
    )
    op.create_index("ix_dealer_analytics_dealer_id", "dealer_analytics", ["dealer_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_dealer_analytics_dealer_id", table_name="dealer_analytics")
    op.drop_table("dealer_analytics")
    op.drop_index("ix_favorites_user_id", table_name="favorites")
    op.drop_table("favorites")
