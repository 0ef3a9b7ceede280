"""Browse the advocates directory from a terminal.

Usage examples:
  python -m utils.browse --q therapy --page-size 20
  python -m utils.browse --id 7
  python -m utils.browse --base-url http://localhost:8000 --page 2
"""

from __future__ import annotations

import argparse
import asyncio
from typing import List, Sequence

import httpx

from app.client import (
    Advocate,
    AdvocateNotFoundError,
    AdvocatesApiError,
    AdvocatesClient,
    SearchController,
    format_list_preview,
    format_phone,
)
from app.client.format import PLACEHOLDER
from app.client.search import PAGE_SIZES

COLUMNS = ("First Name", "Last Name", "City", "Degree", "Specialties", "Years of Experience", "Phone Number")


def advocate_cells(a: Advocate) -> List[str]:
    return [
        a.first_name,
        a.last_name,
        a.city,
        a.degree,
        format_list_preview(a.specialties, max_items=3, max_chars=60) or PLACEHOLDER,
        str(a.years_of_experience),
        format_phone(a.phone_number),
    ]


def render_table(rows: Sequence[Advocate]) -> str:
    cells = [list(COLUMNS)] + [advocate_cells(a) for a in rows]
    widths = [max(len(row[i]) for row in cells) for i in range(len(COLUMNS))]
    lines = []
    for n, row in enumerate(cells):
        lines.append("  ".join(value.ljust(widths[i]) for i, value in enumerate(row)).rstrip())
        if n == 0:
            lines.append("  ".join("-" * w for w in widths))
    return "\n".join(lines)


def render_summary(controller: SearchController) -> str:
    if controller.total == 0:
        suffix = f" for “{controller.search}”" if controller.search else ""
        return f"No advocates found{suffix}."
    start, end = controller.visible_range()
    return (
        f"Showing {start}-{end} of {controller.total}"
        f"  |  Page {controller.page} of {controller.total_pages}"
    )


def render_detail(a: Advocate) -> str:
    lines = [a.full_name]
    if a.city:
        lines.append(a.city)
    lines += [
        "",
        f"Degree:              {a.degree or PLACEHOLDER}",
        f"Years of Experience: {a.years_of_experience}",
        f"Phone:               {format_phone(a.phone_number)}",
        "",
        "Specialties:",
    ]
    lines += [f"  - {s}" for s in a.specialties] or [f"  {PLACEHOLDER}"]
    return "\n".join(lines)


async def run(args: argparse.Namespace, transport: httpx.AsyncBaseTransport | None = None) -> int:
    async with httpx.AsyncClient(base_url=args.base_url, transport=transport) as http:
        client = AdvocatesClient(http)
        if args.id is not None:
            try:
                advocate = await client.get_advocate(args.id)
            except AdvocateNotFoundError:
                print("Advocate not found")
                return 1
            except AdvocatesApiError as exc:
                print(f"Error: {exc.message}")
                return 1
            print(render_detail(advocate))
            return 0

        controller = SearchController(client, page_size=args.page_size)
        controller.set_search(args.q)
        await controller.settle()
        if args.page > 1:
            controller.set_page(args.page)
            await controller.settle()
        elif not controller.search:
            # an empty term never changes the search, so fetch explicitly
            controller.refresh()
            await controller.settle()

        if controller.error:
            print(f"Error: {controller.error}")
            return 1
        if controller.search:
            print(f"Searching for: {controller.search}")
        if controller.rows:
            print(render_table(controller.rows))
        print(render_summary(controller))
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Browse the advocates directory")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API root URL")
    parser.add_argument("--q", default="", help="Search by name, city, degree, specialty or phone digits")
    parser.add_argument("--page", type=int, default=1)
    parser.add_argument("--page-size", type=int, default=10, choices=PAGE_SIZES)
    parser.add_argument("--id", help="Show a single advocate instead of a list")
    args = parser.parse_args(argv)
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
