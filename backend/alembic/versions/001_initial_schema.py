"""Initial schema — Cars, Rentals, Users.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "Cars",
        sa.Column("CarID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Make", sa.Text, nullable=False),
        sa.Column("Model", sa.Text, nullable=False),
        sa.Column("Year", sa.Float, nullable=False),
        sa.Column("Color", sa.Text, nullable=False),
        sa.Column("LicensePlate", sa.Text, nullable=False),
        sa.Column("DailyRate", sa.Float, nullable=False),
        sa.Column("Status", sa.String(20), nullable=False, server_default="Available"),
        sa.Column("ImageURL", sa.Text, nullable=False),
    )

    op.create_table(
        "Users",
        sa.Column("UserID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Name", sa.Text, nullable=False),
        sa.Column("Email", sa.Text, nullable=False),
        sa.Column("Password", sa.Text, nullable=False),
    )

    op.create_table(
        "Rentals",
        sa.Column("RentalID", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("CarID", sa.Float, nullable=False),
        sa.Column("UserID", sa.Float, nullable=False),
        sa.Column("StartDate", sa.Text, nullable=False),
        sa.Column("EndDate", sa.Text, nullable=True),
        sa.Column("TotalAmount", sa.Float, nullable=False),
    )
    op.create_index("ix_Rentals_CarID", "Rentals", ["CarID"])
    op.create_index("ix_Rentals_UserID", "Rentals", ["UserID"])


def downgrade() -> None:
    op.drop_index("ix_Rentals_UserID", table_name="Rentals")
    op.drop_index("ix_Rentals_CarID", table_name="Rentals")
    op.drop_table("Rentals")
    op.drop_table("Users")
    op.drop_table("Cars")
