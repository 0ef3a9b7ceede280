"""Seed the advocates table with sample records.

Usage examples:
  python -m utils.seed_db
  python -m utils.seed_db --file advocates.json --reset
  python -m utils.seed_db --dry-run

The JSON file holds a list of objects using the API field names
(firstName, lastName, city, degree, specialties, yearsOfExperience,
phoneNumber, and optionally id).
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

import sqlalchemy as sa

from app.config import Settings
from app.db import create_engine
from app.logging_config import setup_logging
from app.repos.schema import advocates


logger = logging.getLogger("seed_db")

SPECIALTIES = [
    "Bipolar",
    "LGBTQ",
    "Medication/Prescribing",
    "Suicide History/Attempts",
    "General Mental Health (anxiety, depression, stress, grief, life transitions)",
    "Men's issues",
    "Relationship Issues (family, friends, couple, etc)",
    "Trauma & PTSD",
    "Personality disorders",
    "Personal growth",
    "Substance use/abuse",
    "Pediatrics",
    "Women's issues (post-partum, infertility, family planning)",
    "Chronic pain",
    "Weight loss & nutrition",
    "Eating disorders",
    "Diabetic Diet and nutrition",
    "Coaching (leadership, career, academic and wellness)",
    "Life coaching",
    "Obsessive-compulsive disorders",
    "Neuropsychological evaluations & testing (ADHD testing)",
    "Attention and Hyperactivity (ADHD)",
    "Sleep issues",
    "Schizophrenia and psychotic disorders",
    "Learning disorders",
    "Domestic abuse",
]

SAMPLE_ADVOCATES: List[Dict[str, Any]] = [
    {"firstName": "John", "lastName": "Doe", "city": "New York", "degree": "MD", "yearsOfExperience": 10, "phoneNumber": 5551234567},
    {"firstName": "Jane", "lastName": "Smith", "city": "Los Angeles", "degree": "PhD", "yearsOfExperience": 8, "phoneNumber": 5559876543},
    {"firstName": "Alice", "lastName": "Johnson", "city": "Chicago", "degree": "MSW", "yearsOfExperience": 5, "phoneNumber": 5554567890},
    {"firstName": "Michael", "lastName": "Brown", "city": "Houston", "degree": "MD", "yearsOfExperience": 12, "phoneNumber": 5556543210},
    {"firstName": "Emily", "lastName": "Davis", "city": "Phoenix", "degree": "PhD", "yearsOfExperience": 7, "phoneNumber": 5553210987},
    {"firstName": "Chris", "lastName": "Martinez", "city": "Philadelphia", "degree": "MSW", "yearsOfExperience": 9, "phoneNumber": 5557890123},
    {"firstName": "Jessica", "lastName": "Taylor", "city": "San Antonio", "degree": "MD", "yearsOfExperience": 11, "phoneNumber": 5554561234},
    {"firstName": "David", "lastName": "Harris", "city": "San Diego", "degree": "PhD", "yearsOfExperience": 6, "phoneNumber": 5557896543},
    {"firstName": "Laura", "lastName": "Clark", "city": "Dallas", "degree": "MSW", "yearsOfExperience": 4, "phoneNumber": 5550123456},
    {"firstName": "Daniel", "lastName": "Lewis", "city": "San Jose", "degree": "MD", "yearsOfExperience": 13, "phoneNumber": 5553217654},
    {"firstName": "Sarah", "lastName": "Lee", "city": "Austin", "degree": "PhD", "yearsOfExperience": 10, "phoneNumber": 5551238765},
    {"firstName": "James", "lastName": "King", "city": "Jacksonville", "degree": "MSW", "yearsOfExperience": 5, "phoneNumber": 5556540987},
    {"firstName": "Megan", "lastName": "Green", "city": "San Francisco", "degree": "MD", "yearsOfExperience": 14, "phoneNumber": 5559873456},
    {"firstName": "Joshua", "lastName": "Walker", "city": "Columbus", "degree": "PhD", "yearsOfExperience": 9, "phoneNumber": 5556781234},
    {"firstName": "Amanda", "lastName": "Hall", "city": "Fort Worth", "degree": "MSW", "yearsOfExperience": 3, "phoneNumber": 5559872345},
]


def sample_specialties(index: int, count: int = 3) -> List[str]:
    """Deterministic slice of the specialty catalogue for the ``index``-th sample."""

    start = (index * 5) % len(SPECIALTIES)
    return [SPECIALTIES[(start + k) % len(SPECIALTIES)] for k in range(count)]


def sample_records() -> List[Dict[str, Any]]:
    return [
        {**record, "specialties": sample_specialties(i, count=1 + i % 4)}
        for i, record in enumerate(SAMPLE_ADVOCATES)
    ]


def to_row(record: Mapping[str, Any]) -> Dict[str, Any]:
    """Map an API-shaped record onto table columns."""

    row = {
        "first_name": str(record["firstName"]),
        "last_name": str(record["lastName"]),
        "city": str(record["city"]),
        "degree": str(record["degree"]),
        "specialties": [str(s) for s in record.get("specialties") or []],
        "years_of_experience": int(record["yearsOfExperience"]),
        "phone_number": int(record["phoneNumber"]),
    }
    if record.get("id") is not None:
        row["id"] = int(record["id"])
    return row


def load_records(path: Path) -> List[Dict[str, Any]]:
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise SystemExit(f"{path}: expected a JSON list of advocates")
    return payload


def seed(conn, records: Sequence[Mapping[str, Any]], reset: bool = False) -> int:
    if reset:
        conn.execute(sa.delete(advocates))
    rows = [to_row(r) for r in records]
    if rows:
        conn.execute(sa.insert(advocates), rows)
    return len(rows)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the advocates table")
    parser.add_argument("--file", type=Path, help="JSON file of advocates (defaults to bundled samples)")
    parser.add_argument("--reset", action="store_true", help="Delete existing advocates first")
    parser.add_argument("--dry-run", action="store_true")
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings.log_level)
    records = load_records(args.file) if args.file else sample_records()
    if args.dry_run:
        logger.info("DRY-RUN: would insert %d advocates%s", len(records), " after reset" if args.reset else "")
        return

    engine = create_engine(settings.database_url)
    with engine.begin() as conn:
        count = seed(conn, records, reset=args.reset)
    logger.info("Seeded %d advocates", count)


if __name__ == "__main__":
    main()
