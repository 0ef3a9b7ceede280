"""Repository interfaces for advocate reads (testable via fakes).

The SQLAlchemy implementation lives in app/repos/pg_advocates.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence


@dataclass(frozen=True)
class Advocate:
    id: int
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: List[str] = field(default_factory=list)
    years_of_experience: int = 0
    phone_number: int = 0


class AdvocateRepo(Protocol):
    def count(self, q: str) -> int: ...
    def list_page(self, q: str, limit: int, offset: int) -> Sequence[Advocate]: ...
    def get(self, advocate_id: int) -> Optional[Advocate]: ...
    def ping(self) -> None: ...


__all__ = ["Advocate", "AdvocateRepo"]
