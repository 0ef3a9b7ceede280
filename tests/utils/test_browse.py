from __future__ import annotations

import asyncio
from argparse import Namespace

import httpx

from app.client import Advocate
from app.dependencies import get_advocate_repo
from app.main import app
from utils import browse


def _advocate(**overrides) -> Advocate:
    data = {
        "id": 1,
        "firstName": "Alice",
        "lastName": "Johnson",
        "city": "Chicago",
        "degree": "MSW",
        "specialties": ["Trauma & PTSD", "Bipolar", "LGBTQ", "Sleep issues"],
        "yearsOfExperience": 5,
        "phoneNumber": 5554567890,
    }
    data.update(overrides)
    return Advocate.model_validate(data)


def test_render_table_has_header_and_formatted_cells() -> None:
    out = browse.render_table([_advocate(), _advocate(id=2, specialties=[])])
    lines = out.splitlines()
    assert lines[0].startswith("First Name")
    assert set(lines[1].replace(" ", "")) == {"-"}
    assert "Trauma & PTSD, Bipolar, LGBTQ +1 more" in lines[2]
    assert "+15554567890" in lines[2]
    assert "—" in lines[3]


def test_render_detail_lists_specialties() -> None:
    out = browse.render_detail(_advocate())
    assert out.splitlines()[0] == "Alice Johnson"
    assert "  - Bipolar" in out
    assert "+15554567890" in out


def _args(**overrides) -> Namespace:
    base = {"base_url": "http://test", "q": "", "page": 1, "page_size": 10, "id": None}
    base.update(overrides)
    return Namespace(**base)


def _run_against_app(advocate_repo, args: Namespace) -> int:
    app.dependency_overrides[get_advocate_repo] = lambda: advocate_repo
    try:
        return asyncio.run(browse.run(args, transport=httpx.ASGITransport(app=app)))
    finally:
        app.dependency_overrides.pop(get_advocate_repo, None)


def test_run_lists_page_through_api(advocate_repo, capsys) -> None:
    assert _run_against_app(advocate_repo, _args(page=2, page_size=2)) == 0
    out = capsys.readouterr().out
    assert "Carla" in out and "Dan" in out
    assert "Showing 3-4 of 5" in out
    assert "Page 2 of 3" in out


def test_run_search_with_no_results(advocate_repo, capsys) -> None:
    assert _run_against_app(advocate_repo, _args(q="zzz")) == 0
    out = capsys.readouterr().out
    assert "Searching for: zzz" in out
    assert "No advocates found for “zzz”." in out


def test_run_detail_and_not_found(advocate_repo, capsys) -> None:
    assert _run_against_app(advocate_repo, _args(id="3")) == 0
    assert "Carla Diaz" in capsys.readouterr().out

    assert _run_against_app(advocate_repo, _args(id="999")) == 1
    assert "Advocate not found" in capsys.readouterr().out

    assert _run_against_app(advocate_repo, _args(id="abc")) == 1
    assert "Error: Invalid id" in capsys.readouterr().out
