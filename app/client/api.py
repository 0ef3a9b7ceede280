"""Async HTTP client for the advocates API."""

from __future__ import annotations

from typing import List

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Advocate(BaseModel):
    model_config = _CAMEL

    id: int
    first_name: str
    last_name: str
    city: str
    degree: str
    specialties: List[str] = Field(default_factory=list)
    years_of_experience: int
    phone_number: int

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class PageMeta(BaseModel):
    model_config = _CAMEL

    page: int
    page_size: int
    total: int
    total_pages: int
    q: str = ""


class AdvocatePage(BaseModel):
    data: List[Advocate]
    meta: PageMeta


class AdvocatesApiError(Exception):
    """Raised for any non-success response from the API."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class AdvocateNotFoundError(AdvocatesApiError):
    pass


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return f"Request failed ({response.status_code})"


class AdvocatesClient:
    def __init__(self, client: httpx.AsyncClient, base_url: str = "") -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")

    async def list_advocates(self, page: int = 1, page_size: int = 10, q: str = "") -> AdvocatePage:
        response = await self._client.get(
            f"{self._base_url}/api/advocates",
            params={"page": page, "pageSize": page_size, "q": q},
            headers={"Cache-Control": "no-store"},
        )
        if response.is_error:
            raise AdvocatesApiError(response.status_code, _error_message(response))
        return AdvocatePage.model_validate(response.json())

    async def get_advocate(self, advocate_id: int | str) -> Advocate:
        response = await self._client.get(
            f"{self._base_url}/api/advocates/{advocate_id}",
            headers={"Cache-Control": "no-store"},
        )
        if response.status_code == httpx.codes.NOT_FOUND:
            raise AdvocateNotFoundError(response.status_code, _error_message(response))
        if response.is_error:
            raise AdvocatesApiError(response.status_code, _error_message(response))
        return Advocate.model_validate(response.json())


__all__ = [
    "Advocate",
    "AdvocateNotFoundError",
    "AdvocatePage",
    "AdvocatesApiError",
    "AdvocatesClient",
    "PageMeta",
]
