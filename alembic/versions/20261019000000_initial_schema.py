"""Users, catalog tables and waste records.

Revision ID: 20261019000000
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261019000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False, server_default="operator"),
        sa.Column("full_name", sa.String(length=255), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "waste_types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_waste_types_name"), "waste_types", ["name"], unique=True)

    op.create_table(
        "locations",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_locations_name"), "locations", ["name"], unique=True)

    op.create_table(
        "waste_records",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("waste_type_id", sa.Integer(), nullable=False),
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.Column("weight_kg", sa.Numeric(precision=10, scale=3), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "recorded_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.CheckConstraint("weight_kg > 0", name="ck_waste_records_weight_positive"),
        sa.ForeignKeyConstraint(["waste_type_id"], ["waste_types.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["location_id"], ["locations.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_waste_records_waste_type_id"), "waste_records", ["waste_type_id"], unique=False
    )
    op.create_index(
        op.f("ix_waste_records_location_id"), "waste_records", ["location_id"], unique=False
    )
    op.create_index(
        op.f("ix_waste_records_recorded_at"), "waste_records", ["recorded_at"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_waste_records_recorded_at"), table_name="waste_records")
    op.drop_index(op.f("ix_waste_records_location_id"), table_name="waste_records")
    op.drop_index(op.f("ix_waste_records_waste_type_id"), table_name="waste_records")
    op.drop_table("waste_records")
    op.drop_index(op.f("ix_locations_name"), table_name="locations")
    op.drop_table("locations")
    op.drop_index(op.f("ix_waste_types_name"), table_name="waste_types")
    op.drop_table("waste_types")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
