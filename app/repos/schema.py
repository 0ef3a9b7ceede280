"""SQLAlchemy Core table definitions."""

from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


metadata = sa.MetaData()

# JSONB on Postgres, plain JSON (stored as text) elsewhere, e.g. SQLite in tests.
SpecialtiesType = sa.JSON().with_variant(postgresql.JSONB(), "postgresql")

advocates = sa.Table(
    "advocates",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True),
    sa.Column("first_name", sa.Text(), nullable=False),
    sa.Column("last_name", sa.Text(), nullable=False),
    sa.Column("city", sa.Text(), nullable=False),
    sa.Column("degree", sa.Text(), nullable=False),
    sa.Column("specialties", SpecialtiesType, nullable=True, default=list),
    sa.Column("years_of_experience", sa.Integer(), nullable=False),
    sa.Column("phone_number", sa.BigInteger(), nullable=False),
    sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
)


__all__ = ["advocates", "metadata"]
