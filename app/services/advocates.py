"""List and detail lookups for advocate records.

Both operations take an ``AdvocateRepo`` so they can run against the
SQLAlchemy repository in production and an in-memory SQLite engine in tests.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from app.repos import Advocate, AdvocateRepo


logger = logging.getLogger(__name__)

MAX_ADVOCATE_ID = 2_147_483_647  # Postgres integer
MAX_PAGE = 2**53 - 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

_ID_PATTERN = re.compile(r"[0-9]+")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


class AdvocateLookupError(Exception):
    """Base class for detail lookup failures that map to a client error."""

    message = "Lookup failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidAdvocateId(AdvocateLookupError):
    message = "Invalid id"


class AdvocateNotFound(AdvocateLookupError):
    message = "Not found"


@dataclass(frozen=True)
class PageRequest:
    page: int
    page_size: int
    q: str

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


def clamp(n: int, lo: int, hi: int) -> int:
    return min(max(n, lo), hi)


def coerce_int(raw: Any, default: int) -> int:
    """Parse a query-string integer, falling back to ``default`` on anything else."""

    if raw is None:
        return default
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    text = str(raw).strip()
    if not _INT_PATTERN.fullmatch(text):
        return default
    try:
        return int(text)
    except ValueError:  # longer than the int parsing digit limit
        return default


def page_request(
    page: Any = None,
    page_size: Any = None,
    q: Optional[str] = None,
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int = MAX_PAGE_SIZE,
) -> PageRequest:
    """Normalize raw list parameters: clamp page and size, trim the term."""

    return PageRequest(
        page=clamp(coerce_int(page, 1), 1, MAX_PAGE),
        page_size=clamp(coerce_int(page_size, default_page_size), 1, max_page_size),
        q=(q or "").strip(),
    )


def total_pages(total: int, page_size: int) -> int:
    return max(1, -(-total // page_size))


def to_dto(advocate: Advocate) -> Dict[str, Any]:
    return {
        "id": advocate.id,
        "firstName": advocate.first_name,
        "lastName": advocate.last_name,
        "city": advocate.city,
        "degree": advocate.degree,
        "specialties": list(advocate.specialties),
        "yearsOfExperience": advocate.years_of_experience,
        "phoneNumber": advocate.phone_number,
    }


def list_advocates(repo: AdvocateRepo, request: PageRequest) -> Dict[str, Any]:
    """Return one page of matching advocates plus pagination metadata.

    ``total`` counts every match before paging; pages past the end come back
    with empty ``data`` rather than an error.
    """

    logger.debug("advocate search q=%r page=%d size=%d", request.q, request.page, request.page_size)
    total = repo.count(request.q)
    rows = repo.list_page(request.q, limit=request.page_size, offset=request.offset)
    data: List[Dict[str, Any]] = [to_dto(a) for a in rows]
    return {
        "data": data,
        "meta": {
            "page": request.page,
            "pageSize": request.page_size,
            "total": total,
            "totalPages": total_pages(total, request.page_size),
            "q": request.q,
        },
    }


def parse_id(raw: str) -> Optional[int]:
    """Return the id for an all-ASCII-digit string in (0, 2**31-1], else ``None``."""

    if not _ID_PATTERN.fullmatch(raw):
        return None
    digits = raw.lstrip("0")
    if not digits or len(digits) > len(str(MAX_ADVOCATE_ID)):
        return None
    n = int(digits)
    return n if 0 < n <= MAX_ADVOCATE_ID else None


def get_advocate(repo: AdvocateRepo, raw_id: str) -> Dict[str, Any]:
    advocate_id = parse_id(raw_id)
    if advocate_id is None:
        raise InvalidAdvocateId()
    advocate = repo.get(advocate_id)
    if advocate is None:
        raise AdvocateNotFound()
    return to_dto(advocate)


__all__ = [
    "AdvocateLookupError",
    "AdvocateNotFound",
    "InvalidAdvocateId",
    "MAX_ADVOCATE_ID",
    "PageRequest",
    "get_advocate",
    "list_advocates",
    "page_request",
    "parse_id",
    "total_pages",
]
