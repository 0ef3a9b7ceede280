"""Search filter construction for the advocates list.

A search term expands into a list of predicates, one per searchable field,
that are OR-ed together. Each predicate is a closure over the term that
produces a SQLAlchemy boolean clause for a given table, so the set of
predicates for a term can be inspected (and compiled) without a database.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, List, Optional

import sqlalchemy as sa
from sqlalchemy.sql.elements import ColumnElement


TEXT_FIELDS = ("first_name", "last_name", "city", "degree")

_DIGITS = re.compile(r"[0-9]+")

LIKE_ESCAPE = "/"

ClauseBuilder = Callable[[sa.Table], ColumnElement]


@dataclass(frozen=True)
class SearchPredicate:
    field: str
    build: ClauseBuilder

    def __call__(self, table: sa.Table) -> ColumnElement:
        return self.build(table)


def is_digits(q: str) -> bool:
    """True when ``q`` is a non-empty run of ASCII digits."""

    return bool(_DIGITS.fullmatch(q))


def like_pattern(q: str) -> str:
    """Wrap ``q`` in wildcards with any LIKE metacharacters in it escaped."""

    escaped = q.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2).replace("%", LIKE_ESCAPE + "%").replace("_", LIKE_ESCAPE + "_")
    return f"%{escaped}%"


def _text_contains(field: str, pattern: str) -> SearchPredicate:
    return SearchPredicate(field, lambda table: table.c[field].ilike(pattern, escape=LIKE_ESCAPE))


def _specialties_contains(pattern: str) -> SearchPredicate:
    # matches against the JSON text, e.g. ["Bipolar", "LGBTQ"]
    return SearchPredicate(
        "specialties",
        lambda table: sa.cast(table.c.specialties, sa.Text).ilike(pattern, escape=LIKE_ESCAPE),
    )


def _phone_contains(q: str) -> SearchPredicate:
    return SearchPredicate(
        "phone_number",
        lambda table: sa.cast(table.c.phone_number, sa.Text).like(f"%{q}%"),
    )


def build_predicates(q: str) -> List[SearchPredicate]:
    """Return the predicates a record may satisfy to match ``q``.

    Empty (or whitespace-only) terms produce no predicates. The phone number
    predicate is only included for all-digit terms.
    """

    q = q.strip()
    if not q:
        return []
    pattern = like_pattern(q)
    predicates = [_text_contains(field, pattern) for field in TEXT_FIELDS]
    predicates.append(_specialties_contains(pattern))
    if is_digits(q):
        predicates.append(_phone_contains(q))
    return predicates


def build_filter(table: sa.Table, q: str) -> Optional[ColumnElement]:
    """OR the predicates for ``q`` into one clause, or ``None`` when unfiltered."""

    predicates = build_predicates(q)
    if not predicates:
        return None
    return sa.or_(*(predicate(table) for predicate in predicates))


__all__ = ["SearchPredicate", "TEXT_FIELDS", "build_filter", "build_predicates", "is_digits", "like_pattern"]
