"""Dependency helpers for the FastAPI service."""

from __future__ import annotations

from functools import lru_cache

from .config import Settings
from .repos import AdvocateRepo


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()


def get_advocate_repo() -> AdvocateRepo:
    """Return the SQLAlchemy-backed advocate repository bound to the shared engine."""

    from .db import get_engine  # db imports this module for settings
    from .repos.pg_advocates import PgAdvocateRepo

    return PgAdvocateRepo(get_engine())


__all__ = ["get_advocate_repo", "get_settings"]
