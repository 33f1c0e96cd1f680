"""Homepage panel and navigation configuration builders."""

from __future__ import annotations

import typing as typ

from .helpers import (
    PANEL_KINDS,
    _normalize_labels,
    _optional_int,
    _optional_str,
    _positive_number,
    _require_mapping,
    _slugify,
)
from .models import NavigationConfig, NavLinkConfig, PanelConfig, SiteConfigError


def _build_panels(entries: object | None) -> list[PanelConfig]:
    """Build the ordered panel list for the horizontally scrolling homepage."""
    match entries:
        case list() as items:
            iterable = items
        case _:
            msg = "Configuration requires a 'panels' list."
            raise SiteConfigError(msg)

    panels: list[PanelConfig] = []
    seen: set[str] = set()
    for entry in iterable:
        match entry:
            case {"label": label, **rest}:
                pass
            case _:
                msg = "Panel entries must be mappings with a 'label'."
                raise SiteConfigError(msg)
        label_text = _optional_str(label)
        if not label_text:
            msg = "Panel entries require a non-empty 'label'."
            raise SiteConfigError(msg)
        panel_id = _optional_str(rest.get("id")) or _slugify(label_text)
        if panel_id in seen:
            msg = f"Duplicate panel id '{panel_id}'."
            raise SiteConfigError(msg)
        seen.add(panel_id)
        kind = _optional_str(rest.get("kind")) or "markdown"
        if kind not in PANEL_KINDS:
            known = ", ".join(sorted(PANEL_KINDS))
            msg = f"Panel '{panel_id}' has unknown kind '{kind}'. Known kinds: {known}"
            raise SiteConfigError(msg)
        panels.append(
            PanelConfig(
                id=panel_id,
                label=label_text,
                kind=kind,
                heading=_optional_str(rest.get("heading")),
                kicker=_optional_str(rest.get("kicker")),
                body=_optional_str(rest.get("body")),
                limit=_optional_int(rest.get("limit"), field=f"{panel_id}.limit"),
            )
        )
    if not panels:
        msg = "Configuration requires at least one panel."
        raise SiteConfigError(msg)
    return panels


def _build_navigation_config(payload: object | None) -> NavigationConfig:
    """Build navigation tuning values, falling back to the package defaults."""
    data = _require_mapping(payload, section="navigation")
    base = NavigationConfig()
    viewport_width = data.get("viewport_width", base.viewport_width)
    breakpoint_px = data.get("mobile_breakpoint", base.mobile_breakpoint)
    ease = data.get("ease", base.ease)
    debounce = data.get("resize_debounce", base.resize_debounce)
    ease_value = _positive_number(ease, field="navigation.ease")
    if ease_value > 1:
        msg = "Configuration field 'navigation.ease' must be at most 1."
        raise SiteConfigError(msg)
    return NavigationConfig(
        viewport_width=int(_positive_number(viewport_width, field="navigation.viewport_width")),
        mobile_breakpoint=int(
            _positive_number(breakpoint_px, field="navigation.mobile_breakpoint")
        ),
        momentum=bool(data.get("momentum", base.momentum)),
        ease=ease_value,
        resize_debounce=_positive_number(debounce, field="navigation.resize_debounce"),
        labels=_normalize_labels(data.get("labels"), base.labels),
    )


def _build_nav_links(
    entries: list[typ.Mapping[str, object]] | None,
) -> list[NavLinkConfig]:
    """Build top navigation link configurations."""
    links: list[NavLinkConfig] = []
    match entries:
        case list() as items:
            iterable = items
        case _:
            return links
    for entry in iterable:
        match entry:
            case {"label": label, "href": href, **rest}:
                pass
            case _:
                continue
        if not label or not href:
            msg = "Navigation links require 'label' and 'href'."
            raise SiteConfigError(msg)
        links.append(
            NavLinkConfig(
                label=str(label),
                href=str(href),
                external=bool(rest.get("external", False)),
            )
        )
    return links


__all__ = ["_build_nav_links", "_build_navigation_config", "_build_panels"]
