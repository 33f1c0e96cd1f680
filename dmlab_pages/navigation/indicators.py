"""Navigation dots and sidebar link synchronisation."""

from __future__ import annotations

import typing as typ

from .models import NavigationIndicator

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Panel
    from .surface import SidebarLink


def indicator_label(panel: Panel, fallback_labels: cabc.Sequence[str]) -> str:
    """Return the panel label, the positional fallback, or ``Section N``.

    >>> from dmlab_pages.navigation.models import Panel
    >>> indicator_label(Panel(index=9, id="extra"), ["Home"])
    'Section 10'
    """
    if panel.label:
        return panel.label
    if panel.index < len(fallback_labels):
        return fallback_labels[panel.index]
    return f"Section {panel.index + 1}"


def build_indicators(
    panels: cabc.Sequence[Panel],
    fallback_labels: cabc.Sequence[str],
    on_click: typ.Callable[[int], None],
) -> list[NavigationIndicator]:
    """Create one indicator per panel, wired to ``on_click``."""
    return [
        NavigationIndicator(
            index=panel.index,
            panel_id=panel.id,
            label=indicator_label(panel, fallback_labels),
            on_click=on_click,
        )
        for panel in panels
    ]


def sync_indicators(
    indicators: cabc.Iterable[NavigationIndicator], current_index: int
) -> None:
    for indicator in indicators:
        indicator.active = indicator.index == current_index


def sync_sidebar_links(
    links: cabc.Iterable[SidebarLink], current_panel_id: str | None
) -> None:
    """Mark the links pointing at ``current_panel_id`` active, all others not."""
    for link in links:
        link.active = current_panel_id is not None and link.panel_id == current_panel_id


__all__ = [
    "build_indicators",
    "indicator_label",
    "sync_indicators",
    "sync_sidebar_links",
]
