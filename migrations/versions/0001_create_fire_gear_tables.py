"""create stations, equipment, inspections, category inspections and vendors

Revision ID: 0001_fire_gear
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "0001_fire_gear"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

_JSON = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def _inspection_columns() -> list[sa.Column]:
    return [
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("template_id", sa.String(100), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=False),
        sa.Column("last_completed", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="scheduled"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("external_vendor", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("vendor_contact", sa.String(255), nullable=True),
    ]


def upgrade() -> None:
    op.create_table(
        "stations",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_stations_id", "stations", ["id"])

    op.create_table(
        "equipment",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("serial_number", sa.String(100), nullable=False),
        sa.Column("manufacturer", sa.String(255), nullable=True),
        sa.Column("model", sa.String(255), nullable=True),
        sa.Column("category", sa.String(32), nullable=False),
        sa.Column("subcategory", sa.String(100), nullable=True),
        sa.Column(
            "station_id",
            sa.Integer(),
            sa.ForeignKey("stations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("status", sa.String(32), nullable=False, server_default="in-service"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("history", _JSON, nullable=False, server_default=sa.text("'[]'")),
        *_timestamps(),
        sa.UniqueConstraint("serial_number", name="uq_equipment_serial_number"),
    )
    op.create_index("ix_equipment_id", "equipment", ["id"])
    op.create_index("ix_equipment_category", "equipment", ["category"])
    op.create_index("ix_equipment_station_id", "equipment", ["station_id"])
    op.create_index("ix_equipment_status", "equipment", ["status"])

    op.create_table(
        "inspections",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "equipment_id",
            sa.Integer(),
            sa.ForeignKey("equipment.id", ondelete="CASCADE"),
            nullable=False,
        ),
        *_inspection_columns(),
        *_timestamps(),
    )
    op.create_index("ix_inspections_id", "inspections", ["id"])
    op.create_index("ix_inspections_equipment_id", "inspections", ["equipment_id"])
    op.create_index("ix_inspections_due_date", "inspections", ["due_date"])
    op.create_index("ix_inspections_status", "inspections", ["status"])

    op.create_table(
        "category_inspections",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("category", sa.String(32), nullable=False),
        # NULL = every station
        sa.Column(
            "station_id",
            sa.Integer(),
            sa.ForeignKey("stations.id", ondelete="CASCADE"),
            nullable=True,
        ),
        *_inspection_columns(),
        *_timestamps(),
    )
    op.create_index("ix_category_inspections_id", "category_inspections", ["id"])
    op.create_index("ix_category_inspections_category", "category_inspections", ["category"])
    op.create_index("ix_category_inspections_station_id", "category_inspections", ["station_id"])
    op.create_index("ix_category_inspections_due_date", "category_inspections", ["due_date"])

    op.create_table(
        "vendors",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("contact_person", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("website", sa.String(500), nullable=True),
        sa.Column("services", sa.Text(), nullable=True),
        sa.Column("certifications", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_vendors_id", "vendors", ["id"])
    op.create_index("ix_vendors_name", "vendors", ["name"])


def downgrade() -> None:
    op.drop_table("vendors")
    op.drop_table("category_inspections")
    op.drop_table("inspections")
    op.drop_table("equipment")
    op.drop_table("stations")
