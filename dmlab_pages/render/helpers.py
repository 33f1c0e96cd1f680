"""Text and collection helpers shared by card templates and page builders."""

from __future__ import annotations

import datetime as dt
import typing as typ

from markupsafe import Markup, escape

if typ.TYPE_CHECKING:
    import collections.abc as cabc

T = typ.TypeVar("T")

_DATE_STYLES: dict[str, typ.Callable[[dt.date], str]] = {
    "long": lambda value: f"{value:%B} {value.day}, {value.year}",
    "month": lambda value: f"{value:%b}",
    "day": lambda value: str(value.day),
    "month_year": lambda value: f"{value:%B} {value.year}",
    "short_month_year": lambda value: f"{value:%b} {value.year}",
    "year": lambda value: str(value.year),
}


def truncate(text: str | None, max_length: int = 100) -> str:
    """Cut ``text`` to ``max_length`` characters and append an ellipsis.

    Text that already fits is returned unchanged; ``None`` becomes ``""``.

    >>> truncate("Graph mining at scale", 10)
    'Graph mini...'
    >>> truncate("short", 10)
    'short'
    """
    if not text or len(text) <= max_length:
        return text or ""
    return text[:max_length].strip() + "..."


def format_date(value: dt.date | dt.datetime | None, style: str = "long") -> str:
    """Format ``value`` in US English (``"January 5, 2024"`` by default).

    >>> import datetime as dt
    >>> format_date(dt.date(2024, 1, 5))
    'January 5, 2024'
    >>> format_date(dt.date(2024, 1, 5), "month")
    'Jan'
    """
    if value is None:
        return ""
    try:
        formatter = _DATE_STYLES[style]
    except KeyError as exc:
        known = ", ".join(sorted(_DATE_STYLES))
        msg = f"Unknown date style '{style}'. Known styles: {known}"
        raise ValueError(msg) from exc
    if isinstance(value, dt.datetime):
        value = value.date()
    return formatter(value)


def initials(name: str) -> str:
    """Return up to two uppercase initials for ``name``.

    >>> initials("Maria K. Papadopoulou")
    'MK'
    """
    return "".join(part[0] for part in name.split() if part).upper()[:2]


def get_nested_value(obj: object, path: str) -> object | None:
    """Return the value at a dot-separated ``path`` of keys or attributes."""
    current: object | None = obj
    for key in path.split("."):
        if current is None:
            return None
        if isinstance(current, dict):
            current = current.get(key)
        else:
            current = getattr(current, key, None)
    return current


def filter_by_query(
    items: cabc.Sequence[T], query: str | None, fields: cabc.Sequence[str]
) -> list[T]:
    """Return items where any of ``fields`` contains ``query`` (case-insensitive).

    List-valued fields match when any element contains the query. A blank
    query keeps every item.
    """
    if not query or not query.strip():
        return list(items)
    needle = query.lower()

    def _hit(value: object | None) -> bool:
        if value is None or value == "":
            return False
        if isinstance(value, list | tuple):
            return any(needle in str(element).lower() for element in value)
        return needle in str(value).lower()

    return [
        item
        for item in items
        if any(_hit(get_nested_value(item, field)) for field in fields)
    ]


def group_by(items: cabc.Iterable[T], field: str) -> dict[object, list[T]]:
    """Group ``items`` by the value at ``field``, preserving first-seen order."""
    groups: dict[object, list[T]] = {}
    for item in items:
        groups.setdefault(get_nested_value(item, field), []).append(item)
    return groups


def sort_by(items: cabc.Iterable[T], field: str, order: str = "asc") -> list[T]:
    """Return ``items`` sorted by ``field``; missing values sort last."""
    if order not in {"asc", "desc"}:
        msg = f"Sort order must be 'asc' or 'desc', got {order!r}."
        raise ValueError(msg)
    present: list[T] = []
    missing: list[T] = []
    for item in items:
        (missing if get_nested_value(item, field) is None else present).append(item)
    present.sort(
        key=lambda item: typ.cast("typ.Any", get_nested_value(item, field)),
        reverse=order == "desc",
    )
    return present + missing


def render_list(
    items: cabc.Sequence[T],
    template_fn: typ.Callable[[T], str],
    *,
    empty_message: str = "No items found",
    wrapper: str | None = None,
    class_name: str = "",
) -> Markup:
    """Render ``items`` with ``template_fn``, or an empty-state paragraph."""
    if not items:
        return Markup('<p class="empty-state">{}</p>').format(empty_message)
    body = Markup("").join(Markup(template_fn(item)) for item in items)
    if wrapper:
        return Markup('<{0} class="{1}">{2}</{0}>').format(
            Markup(escape(wrapper)), class_name, body
        )
    return body


__all__ = [
    "filter_by_query",
    "format_date",
    "get_nested_value",
    "group_by",
    "initials",
    "render_list",
    "sort_by",
    "truncate",
]
