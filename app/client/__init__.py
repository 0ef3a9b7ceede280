"""Client-side access to the advocates API."""

from .api import (
    Advocate,
    AdvocateNotFoundError,
    AdvocatePage,
    AdvocatesApiError,
    AdvocatesClient,
    PageMeta,
)
from .format import format_list_preview, format_phone
from .search import SearchController

__all__ = [
    "Advocate",
    "AdvocateNotFoundError",
    "AdvocatePage",
    "AdvocatesApiError",
    "AdvocatesClient",
    "PageMeta",
    "SearchController",
    "format_list_preview",
    "format_phone",
]
