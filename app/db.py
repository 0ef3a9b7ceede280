"""Shared database helpers."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any

import sqlalchemy as sa
from sqlalchemy.engine import Engine

from .dependencies import get_settings


def dump_json(value: Any) -> str:
    # JSON columns stored as text (SQLite) keep non-ASCII characters searchable
    return json.dumps(value, ensure_ascii=False)


def create_engine(url: str, **kwargs: Any) -> Engine:
    """``sa.create_engine`` with the JSON serializer every engine here shares."""

    kwargs.setdefault("json_serializer", dump_json)
    return sa.create_engine(url, **kwargs)


@lru_cache
def get_engine() -> Engine:
    """Return a cached SQLAlchemy engine."""

    settings = get_settings()
    return create_engine(settings.database_url, pool_pre_ping=True)


__all__ = ["create_engine", "dump_json", "get_engine"]
