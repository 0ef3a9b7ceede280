from __future__ import annotations

from sqlalchemy.dialects import postgresql, sqlite

from app.repos.filters import build_filter, build_predicates, is_digits, like_pattern
from app.repos.schema import advocates


def _fields(q: str) -> list[str]:
    return [p.field for p in build_predicates(q)]


def _pg_sql(q: str) -> str:
    clause = build_filter(advocates, q)
    return str(clause.compile(dialect=postgresql.dialect()))


def test_empty_term_has_no_predicates() -> None:
    assert build_predicates("") == []
    assert build_predicates("   ") == []
    assert build_filter(advocates, "") is None


def test_text_term_skips_phone_predicate() -> None:
    assert _fields("smith") == ["first_name", "last_name", "city", "degree", "specialties"]


def test_digit_term_adds_phone_predicate() -> None:
    assert _fields("555") == ["first_name", "last_name", "city", "degree", "specialties", "phone_number"]
    assert "phone_number" not in _fields("555-1234")
    assert "phone_number" not in _fields("5.5")


def test_is_digits_is_ascii_only() -> None:
    assert is_digits("0123456789")
    assert not is_digits("")
    assert not is_digits("١٢٣")  # Arabic-Indic digits
    assert not is_digits("12a")


def test_filter_compiles_to_ilike_or_on_postgres() -> None:
    sql = _pg_sql("smith")
    assert sql.count("ILIKE") == 5
    assert sql.count(" OR ") == 4
    assert "CAST(advocates.specialties AS TEXT)" in sql
    assert "phone_number" not in sql


def test_phone_predicate_is_a_plain_like_on_text() -> None:
    sql = _pg_sql("4567")
    assert "CAST(advocates.phone_number AS TEXT) LIKE" in sql
    assert sql.count(" OR ") == 5


def test_filter_compiles_on_sqlite_with_lower() -> None:
    clause = build_filter(advocates, "Smith")
    sql = str(clause.compile(dialect=sqlite.dialect()))
    assert "lower(advocates.first_name) LIKE" in sql


def test_like_pattern_escapes_metacharacters() -> None:
    assert like_pattern("ann") == "%ann%"
    assert like_pattern("100%") == "%100/%%"
    assert like_pattern("a_b") == "%a/_b%"
    assert like_pattern("and/or") == "%and//or%"
