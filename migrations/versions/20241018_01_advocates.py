"""Advocates directory table."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20241018_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "advocates",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("city", sa.Text(), nullable=False),
        sa.Column("degree", sa.Text(), nullable=False),
        sa.Column("specialties", postgresql.JSONB(), server_default=sa.text("'[]'::jsonb"), nullable=True),
        sa.Column("years_of_experience", sa.Integer(), nullable=False),
        sa.Column("phone_number", sa.BigInteger(), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.text("timezone('utc', now())")),
        sa.CheckConstraint("years_of_experience >= 0", name="ck_advocates_years_non_negative"),
    )
    op.create_index("ix_advocates_last_name", "advocates", ["last_name"])
    op.create_index("ix_advocates_city", "advocates", ["city"])


def downgrade() -> None:
    op.drop_index("ix_advocates_city", table_name="advocates")
    op.drop_index("ix_advocates_last_name", table_name="advocates")
    op.drop_table("advocates")
