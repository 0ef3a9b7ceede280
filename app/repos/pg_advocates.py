"""SQLAlchemy Core implementation of ``AdvocateRepo``."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

import sqlalchemy as sa
from sqlalchemy.engine import Engine

from . import Advocate
from .filters import build_filter
from .schema import advocates


def _row_to_advocate(row: Mapping[str, Any]) -> Advocate:
    return Advocate(
        id=int(row["id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        city=row["city"],
        degree=row["degree"],
        specialties=[str(s) for s in (row["specialties"] or [])],
        years_of_experience=int(row["years_of_experience"]),
        phone_number=int(row["phone_number"]),
    )


class PgAdvocateRepo:
    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def count(self, q: str) -> int:
        stmt = sa.select(sa.func.count()).select_from(advocates)
        clause = build_filter(advocates, q)
        if clause is not None:
            stmt = stmt.where(clause)
        with self._engine.connect() as conn:
            return int(conn.execute(stmt).scalar_one() or 0)

    def list_page(self, q: str, limit: int, offset: int) -> List[Advocate]:
        stmt = sa.select(advocates)
        clause = build_filter(advocates, q)
        if clause is not None:
            stmt = stmt.where(clause)
        stmt = stmt.order_by(advocates.c.id).limit(limit).offset(offset)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [_row_to_advocate(row) for row in rows]

    def get(self, advocate_id: int) -> Optional[Advocate]:
        stmt = sa.select(advocates).where(advocates.c.id == advocate_id).limit(1)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return _row_to_advocate(row) if row else None

    def ping(self) -> None:
        with self._engine.connect() as conn:
            conn.execute(sa.text("select 1"))


__all__ = ["PgAdvocateRepo"]
