from __future__ import annotations

import asyncio

import httpx
import pytest

from app.client import AdvocateNotFoundError, AdvocatesApiError, AdvocatesClient


ADVOCATE = {
    "id": 7,
    "firstName": "Jane",
    "lastName": "Smith",
    "city": "Los Angeles",
    "degree": "PhD",
    "specialties": ["Bipolar", "LGBTQ"],
    "yearsOfExperience": 8,
    "phoneNumber": 5559876543,
}


def build_client(handler) -> AdvocatesClient:  # noqa: ANN001
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://test")
    return AdvocatesClient(http)


def test_list_advocates_sends_params_and_parses_page() -> None:
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(
            200,
            json={"data": [ADVOCATE], "meta": {"page": 2, "pageSize": 5, "total": 6, "totalPages": 2, "q": "jan"}},
        )

    page = asyncio.run(build_client(handler).list_advocates(page=2, page_size=5, q="jan"))

    assert seen["path"] == "/api/advocates"
    assert seen["params"] == {"page": "2", "pageSize": "5", "q": "jan"}
    assert page.meta.total_pages == 2
    assert page.data[0].first_name == "Jane"
    assert page.data[0].full_name == "Jane Smith"


def test_list_advocates_raises_with_server_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "Internal server error"})

    with pytest.raises(AdvocatesApiError) as excinfo:
        asyncio.run(build_client(handler).list_advocates())
    assert excinfo.value.status_code == 500
    assert str(excinfo.value) == "Internal server error"


def test_error_without_json_body_uses_status() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="bad gateway")

    with pytest.raises(AdvocatesApiError) as excinfo:
        asyncio.run(build_client(handler).list_advocates())
    assert excinfo.value.message == "Request failed (502)"


def test_get_advocate_ok() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/advocates/7"
        return httpx.Response(200, json=ADVOCATE)

    advocate = asyncio.run(build_client(handler).get_advocate(7))
    assert advocate.phone_number == 5559876543
    assert advocate.specialties == ["Bipolar", "LGBTQ"]


def test_get_advocate_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"error": "Not found"})

    with pytest.raises(AdvocateNotFoundError):
        asyncio.run(build_client(handler).get_advocate(99))


def test_get_advocate_invalid_id_is_api_error_not_not_found() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": "Invalid id"})

    with pytest.raises(AdvocatesApiError) as excinfo:
        asyncio.run(build_client(handler).get_advocate("abc"))
    assert not isinstance(excinfo.value, AdvocateNotFoundError)
    assert excinfo.value.message == "Invalid id"
