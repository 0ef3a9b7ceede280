"""Debounced, cancellable search over the advocates list.

``SearchController`` mirrors what a list view needs: the text the user is
typing, the effective (debounced) search term, paging state and the rows of
the last applied response. Every state change issues a fetch tagged with a
new token. Starting a fetch cancels the one in flight, and a response is
only applied when its token is still the latest, so the state always
reflects the most recently issued request.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Tuple

from .api import Advocate, AdvocatesClient

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.15
PAGE_SIZES = (5, 10, 20, 50, 100)
LOAD_FAILED = "Failed to load advocates."


class SearchController:
    def __init__(
        self,
        client: AdvocatesClient,
        *,
        page_size: int = 10,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self._client = client
        self.debounce_seconds = debounce_seconds

        self.raw_search = ""
        self.search = ""
        self.page = 1
        self.page_size = page_size

        self.rows: List[Advocate] = []
        self.total = 0
        self.total_pages = 1
        self.loading = False
        self.error = ""

        self._token = 0
        self._debounce: Optional[asyncio.Task] = None
        self._inflight: Optional[asyncio.Task] = None

    # Inputs ----------------------------------------------------------------
    def set_search(self, raw: str) -> None:
        """Record typed text; the search term updates after a quiet period."""

        self.raw_search = raw
        if self._debounce is not None and not self._debounce.done():
            self._debounce.cancel()
        self._debounce = asyncio.ensure_future(self._debounced(raw.strip()))

    def reset_search(self) -> None:
        self.set_search("")

    def set_page_size(self, page_size: int) -> None:
        if page_size == self.page_size:
            return
        self.page_size = page_size
        self.page = 1
        self.refresh()

    def set_page(self, page: int) -> None:
        page = max(1, page)
        if page == self.page:
            return
        self.page = page
        self.refresh()

    def first_page(self) -> None:
        self.set_page(1)

    def prev_page(self) -> None:
        self.set_page(max(1, self.page - 1))

    def next_page(self) -> None:
        self.set_page(min(self.total_pages, self.page + 1))

    def last_page(self) -> None:
        self.set_page(self.total_pages)

    # Fetching --------------------------------------------------------------
    def refresh(self) -> asyncio.Task:
        """Fetch the current page, superseding any request still in flight."""

        self._token += 1
        if self._inflight is not None and not self._inflight.done():
            self._inflight.cancel()
        self.loading = True
        self.error = ""
        self._inflight = asyncio.ensure_future(
            self._fetch(self._token, self.page, self.page_size, self.search)
        )
        return self._inflight

    async def settle(self) -> None:
        """Wait until no debounce timer or request is pending."""

        while True:
            pending = [t for t in (self._debounce, self._inflight) if t is not None and not t.done()]
            if not pending:
                return
            await asyncio.gather(*pending, return_exceptions=True)

    def close(self) -> None:
        for task in (self._debounce, self._inflight):
            if task is not None and not task.done():
                task.cancel()

    async def _debounced(self, term: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        if term == self.search:
            return
        self.search = term
        self.page = 1
        self.refresh()

    async def _fetch(self, token: int, page: int, page_size: int, q: str) -> None:
        try:
            result = await self._client.list_advocates(page=page, page_size=page_size, q=q)
        except Exception as exc:  # noqa: BLE001
            if token == self._token:
                logger.warning("advocate search failed: %s", exc)
                self.error = str(exc) or LOAD_FAILED
            return
        finally:
            if token == self._token:
                self.loading = False

        if token != self._token:
            logger.debug("dropping stale response for token %d (latest %d)", token, self._token)
            return
        self.rows = list(result.data)
        self.total = result.meta.total
        self.total_pages = result.meta.total_pages

    # Derived ---------------------------------------------------------------
    def visible_range(self) -> Tuple[int, int]:
        """1-based indices of the first and last row shown, ``(0, 0)`` when empty."""

        if self.total == 0:
            return 0, 0
        start = (self.page - 1) * self.page_size + 1
        end = min(self.page * self.page_size, self.total)
        return start, end


__all__ = ["LOAD_FAILED", "PAGE_SIZES", "SearchController"]
