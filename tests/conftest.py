import sys
from pathlib import Path

import pytest
import sqlalchemy as sa
from sqlalchemy.pool import StaticPool

ROOT = Path(__file__).resolve().parent.parent
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


SEED_ROWS = [
    {
        "id": 1,
        "first_name": "Alice",
        "last_name": "Johnson",
        "city": "Chicago",
        "degree": "MSW",
        "specialties": ["Trauma & PTSD", "Bipolar"],
        "years_of_experience": 5,
        "phone_number": 5554567890,
    },
    {
        "id": 2,
        "first_name": "Bob",
        "last_name": "Smith",
        "city": "New York",
        "degree": "MD",
        "specialties": ["Sleep issues"],
        "years_of_experience": 10,
        "phone_number": 5551234567,
    },
    {
        "id": 3,
        "first_name": "Carla",
        "last_name": "Diaz",
        "city": "Austin",
        "degree": "PhD",
        "specialties": ["Eating disorders", "Chronic pain"],
        "years_of_experience": 7,
        "phone_number": 3125550000,
    },
    {
        "id": 4,
        "first_name": "Dan",
        "last_name": "Obrien",
        "city": "Boston",
        "degree": "MD",
        "specialties": [],
        "years_of_experience": 3,
        "phone_number": 6175551111,
    },
    {
        "id": 5,
        "first_name": "Erin",
        "last_name": "Wu",
        "city": "Seattle",
        "degree": "PsyD",
        "specialties": ["LGBTQ"],
        "years_of_experience": 12,
        "phone_number": 2065550199,
    },
]


@pytest.fixture()
def advocates_engine():
    """Provide an in-memory SQLite engine holding the five seed advocates."""

    from app.db import create_engine
    from app.repos.schema import advocates, metadata

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    with engine.begin() as conn:
        conn.execute(sa.insert(advocates), SEED_ROWS)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture()
def advocate_repo(advocates_engine):
    from app.repos.pg_advocates import PgAdvocateRepo

    return PgAdvocateRepo(advocates_engine)


@pytest.fixture()
def api_client(advocate_repo):
    """TestClient whose advocate repository reads the SQLite seed data."""

    from fastapi.testclient import TestClient

    from app.dependencies import get_advocate_repo
    from app.main import app

    app.dependency_overrides[get_advocate_repo] = lambda: advocate_repo
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_advocate_repo, None)
