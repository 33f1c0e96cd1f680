"""Horizontally scrolling homepage built from the configured panels.

The homepage is a row of full-viewport panels (hero, about, research, team,
and so on) in the order given by ``panels`` in ``config/site.yaml``. Besides
the panel bodies, the builder pre-renders the navigation chrome: sidebar
links, navigation dots, and the progress bar. Their initial state comes from
a :class:`~dmlab_pages.navigation.PanelNavigationController` running over a
virtual scroll surface at offset zero, so the static HTML matches what the
live controller would show before the first scroll. A JSON manifest of the
panels and tuning values is embedded for client scripts.

Typical usage mirrors the build pipeline:

>>> from dmlab_pages.config import load_site_config
>>> builder = HomePageBuilder(load_site_config(path), content)  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('public/index.html')
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import json
import typing as typ

from markupsafe import Markup

from ..content.queries import (
    sort_news,
    sort_projects_chronologically,
    upcoming_events,
)
from ..navigation import (
    NavigationOptions,
    Panel,
    PanelNavigationController,
    VirtualChrome,
    VirtualIndicatorHost,
    VirtualProgressBar,
    VirtualScrollContainer,
    VirtualSidebarLink,
    VirtualWindow,
)
from ..render import (
    render_event_list,
    render_markdown,
    render_news_list,
    render_person_list,
    render_project_list,
    render_publication_list,
    render_research_area_list,
)
from .base import PageBuilder

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from ..config import PanelConfig, SiteConfig
    from ..content import LabContent, Partner
    from ..navigation import NavigationIndicator

PUBLICATIONS_PANEL_LIMIT = 5
NEWS_PANEL_LIMIT = 3


@dc.dataclass(slots=True)
class NavigationSnapshot:
    """Initial navigation state read from a controller at offset zero."""

    indicators: list[NavigationIndicator]
    sidebar_links: list[VirtualSidebarLink]
    progress_percent: float
    scroll_hint_hidden: bool
    navbar_scrolled: bool
    current_panel_index: int


@dc.dataclass(slots=True)
class RenderedPanel:
    config: PanelConfig
    index: int
    body: Markup
    cards: Markup
    extra: dict[str, object] = dc.field(default_factory=dict)


def navigation_panels(panels: cabc.Sequence[PanelConfig]) -> list[Panel]:
    """Return navigation panels sharing ids with the configured panels."""
    return [
        Panel(index=index, id=panel.id, label=panel.label)
        for index, panel in enumerate(panels)
    ]


class HomePageBuilder(PageBuilder):
    """Render ``index.html`` with one section per configured panel."""

    template_name = "home_page.jinja"
    page = "home"

    def __init__(
        self,
        site_config: SiteConfig,
        content: LabContent,
        *,
        templates_dir: Path | None = None,
        today: dt.date | None = None,
    ) -> None:
        super().__init__(site_config, content, templates_dir=templates_dir)
        self.today = today or dt.datetime.now(dt.UTC).date()

    @property
    def options(self) -> NavigationOptions:
        return NavigationOptions.from_config(self.site_config.navigation)

    def snapshot_navigation(self) -> NavigationSnapshot:
        """Run a controller over a virtual surface and capture its state."""
        panels = navigation_panels(self.site_config.panels)
        window = VirtualWindow(self.site_config.navigation.viewport_width)
        container = VirtualScrollContainer(window, panel_count=len(panels))
        host = VirtualIndicatorHost()
        progress = VirtualProgressBar()
        chrome = VirtualChrome()
        links = [VirtualSidebarLink(panel.id, panel.label or "") for panel in panels]
        controller = PanelNavigationController(
            container,
            panels,
            window=window,
            progress_bar=progress,
            sidebar_links=links,
            indicator_host=host,
            chrome=chrome,
            options=dc.replace(self.options, momentum=False),
        )
        try:
            state = controller.update_progress()
        finally:
            controller.destroy()
        return NavigationSnapshot(
            indicators=host.indicators,
            sidebar_links=links,
            progress_percent=progress.width_percent,
            scroll_hint_hidden=chrome.scroll_hint_hidden,
            navbar_scrolled=chrome.navbar_scrolled,
            current_panel_index=state.current_panel_index,
        )

    def manifest(self) -> dict[str, object]:
        """Return the JSON-serialisable panel manifest for client scripts."""
        options = self.options
        return {
            "panels": [
                {"index": panel.index, "id": panel.id, "label": panel.label}
                for panel in navigation_panels(self.site_config.panels)
            ],
            "mobileBreakpoint": options.mobile_breakpoint,
            "momentum": options.momentum,
            "ease": options.ease,
            "resizeDebounceMs": round(options.resize_debounce * 1000),
            "fallbackLabels": list(options.fallback_labels),
        }

    def _partners(self) -> list[Partner]:
        seen: dict[str, Partner] = {}
        for project in self.content.projects:
            for partner in project.partners:
                seen.setdefault(partner.name, partner)
        return list(seen.values())

    def _render_cards(self, panel: PanelConfig) -> tuple[Markup, dict[str, object]]:
        content = self.content
        limit = panel.limit
        match panel.kind:
            case "research":
                areas = content.research_areas[:limit]
                return Markup(render_research_area_list(areas, compact=True)), {}
            case "projects":
                projects = sort_projects_chronologically(content.projects)[:limit]
                return Markup(render_project_list(projects)), {}
            case "team":
                people = content.people[:limit]
                return Markup(render_person_list(people, compact=True)), {}
            case "publications":
                recent = sorted(
                    content.publications, key=lambda pub: pub.year, reverse=True
                )[: limit or PUBLICATIONS_PANEL_LIMIT]
                return Markup(render_publication_list(recent, show_tags=False)), {}
            case "news":
                news = sort_news(content.news)[: limit or NEWS_PANEL_LIMIT]
                events = upcoming_events(
                    content.events,
                    today=self.today,
                    limit=self.site_config.news.widget_limit,
                )
                return Markup(render_news_list(news, compact=True)), {
                    "events": Markup(render_event_list(events, today=self.today)),
                }
            case "partners":
                return Markup(""), {"partners": self._partners()[:limit]}
            case "contact":
                return Markup(""), {
                    "email": self.site_config.site.contact_email,
                    "address": self.site_config.site.address,
                }
            case _:
                return Markup(""), {}

    def render_panels(self) -> list[RenderedPanel]:
        rendered: list[RenderedPanel] = []
        for index, panel in enumerate(self.site_config.panels):
            cards, extra = self._render_cards(panel)
            rendered.append(
                RenderedPanel(
                    config=panel,
                    index=index,
                    body=render_markdown(panel.body),
                    cards=cards,
                    extra=extra,
                )
            )
        return rendered

    def page_context(self) -> dict[str, object]:
        return {
            "panels": self.render_panels(),
            "navigation": self.snapshot_navigation(),
            "manifest_json": Markup(
                json.dumps(self.manifest(), ensure_ascii=False).replace("</", "<\\/")
            ),
        }


__all__ = ["HomePageBuilder", "NavigationSnapshot", "navigation_panels"]
