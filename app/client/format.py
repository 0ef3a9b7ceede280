"""Display helpers for advocate rows."""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

ELLIPSIS = "…"
PLACEHOLDER = "—"


def _flatten(values: Iterable[Any]) -> Iterable[Any]:
    for value in values:
        if isinstance(value, (list, tuple)):
            yield from _flatten(value)
        else:
            yield value


def truncate(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    cut = max(0, max_chars - 1)
    return text[:cut].rstrip() + ELLIPSIS


def format_list_preview(items: Any, max_items: int = 3, max_chars: int = 60) -> str:
    """Short preview of a list: the first ``max_items`` entries, then ``+N more``.

    ``None`` and blank entries are skipped, nested lists are flattened and the
    result is truncated to ``max_chars`` with an ellipsis. Anything that is not
    a list or tuple previews as an empty string.
    """

    if not isinstance(items, (list, tuple)):
        return ""
    cleaned: List[str] = [str(v).strip() for v in _flatten(items) if v is not None]
    cleaned = [s for s in cleaned if s]
    if not cleaned:
        return ""

    shown = cleaned[:max_items]
    hidden = len(cleaned) - len(shown)
    display = ", ".join(shown)
    if hidden > 0:
        display += f" +{hidden} more"
    return truncate(display, max_chars)


def format_phone(phone_number: Optional[int]) -> str:
    """Render a stored phone number as ``+1<digits>`` (US country code)."""

    if not phone_number:
        return PLACEHOLDER
    return f"+1{phone_number}"


__all__ = ["ELLIPSIS", "PLACEHOLDER", "format_list_preview", "format_phone", "truncate"]
