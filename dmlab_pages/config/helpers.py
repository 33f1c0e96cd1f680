"""Utility helpers shared by the dmlab configuration loader."""

from __future__ import annotations

import re
import typing as typ

from .models import SiteConfigError

PANEL_KINDS = frozenset(
    {
        "hero",
        "about",
        "partners",
        "research",
        "projects",
        "team",
        "publications",
        "news",
        "contact",
        "markdown",
    }
)

_SLUG_PATTERN = re.compile(r"[^a-z0-9]+")


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_int(value: object | None, *, field: str) -> int | None:
    """Return ``value`` as an int, None when absent, or raise SiteConfigError."""
    if value is None or value == "":
        return None
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"Configuration field '{field}' must be numeric."
        raise SiteConfigError(msg) from exc


def _positive_number(value: object, *, field: str) -> float:
    """Return ``value`` as a positive float or raise SiteConfigError."""
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"Configuration field '{field}' must be numeric."
        raise SiteConfigError(msg) from exc
    if number <= 0:
        msg = f"Configuration field '{field}' must be positive."
        raise SiteConfigError(msg)
    return number


def _slugify(text: str) -> str:
    """Return a lowercase, hyphen-separated identifier for ``text``."""
    return _SLUG_PATTERN.sub("-", text.lower()).strip("-")


def _normalize_labels(value: object | None, default: tuple[str, ...]) -> tuple[str, ...]:
    """Normalize a label list into a tuple of non-empty strings."""
    match value:
        case None:
            return default
        case str() as text:
            return tuple(part.strip() for part in text.split(",") if part.strip())
        case list() as items:
            return tuple(str(item).strip() for item in items if str(item).strip())
        case _:
            msg = "Navigation 'labels' must be a list of strings."
            raise SiteConfigError(msg)


def _require_mapping(
    value: object | None, *, section: str
) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping; None becomes an empty mapping."""
    match value:
        case None:
            return {}
        case dict() as data:
            return data
        case _:
            msg = f"Configuration section '{section}' must be a mapping."
            raise SiteConfigError(msg)


__all__ = [
    "PANEL_KINDS",
    "_normalize_labels",
    "_optional_int",
    "_optional_str",
    "_positive_number",
    "_require_mapping",
    "_slugify",
]
