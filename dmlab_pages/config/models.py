"""Typed dataclasses describing dmlab site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import (
    DEFAULT_NEWS_AUTHOR,
    DEFAULT_PANEL_LABELS,
    DEFAULT_VIEWPORT_WIDTH,
    MOBILE_BREAKPOINT,
    MOMENTUM_EASE,
    RESIZE_DEBOUNCE_SECONDS,
    WIDGET_LIMIT,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteMetaConfig:
    """Identity and contact copy shared by every rendered page."""

    name: str
    short_name: str
    tagline: str = ""
    description: str = ""
    base_url: str | None = None
    copyright_year: int | None = None
    contact_email: str | None = None
    address: str | None = None


@dc.dataclass(slots=True)
class DataSourceConfig:
    """Where the JSON data files are read from.

    ``source`` is either a local directory or an HTTP(S) base URL; ``files``
    maps logical collection names (``team``, ``projects``...) to file stems.
    """

    source: Path | str
    files: dict[str, str]

    @property
    def is_remote(self) -> bool:
        """Return True when the data source is an HTTP(S) URL."""
        return isinstance(self.source, str) and self.source.startswith(
            ("http://", "https://")
        )


@dc.dataclass(slots=True)
class OutputConfig:
    """Output directory and per-page file names."""

    output_dir: Path = Path("public")
    home: str = "index.html"
    publications: str = "pages/publications.html"
    news: str = "pages/news.html"
    projects: str = "pages/projects.html"

    def path_for(self, page: str) -> Path:
        """Return the output path for ``page`` under ``output_dir``."""
        filename = getattr(self, page)
        return self.output_dir / filename


@dc.dataclass(slots=True)
class NavigationConfig:
    """Tuning values for the horizontal panel navigation."""

    viewport_width: int = DEFAULT_VIEWPORT_WIDTH
    mobile_breakpoint: int = MOBILE_BREAKPOINT
    momentum: bool = False
    ease: float = MOMENTUM_EASE
    resize_debounce: float = RESIZE_DEBOUNCE_SECONDS
    labels: tuple[str, ...] = DEFAULT_PANEL_LABELS


@dc.dataclass(slots=True)
class PanelConfig:
    """A full-viewport section of the homepage."""

    id: str
    label: str
    kind: str
    heading: str | None = None
    kicker: str | None = None
    body: str | None = None
    limit: int | None = None


@dc.dataclass(slots=True)
class NavLinkConfig:
    """Top navigation link metadata."""

    label: str
    href: str
    external: bool = False


@dc.dataclass(slots=True)
class NewsConfig:
    """Defaults applied while rendering news, events, and talks."""

    default_author: str = DEFAULT_NEWS_AUTHOR
    widget_limit: int = WIDGET_LIMIT


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site configuration sourced from YAML."""

    site: SiteMetaConfig
    data: DataSourceConfig
    output: OutputConfig
    navigation: NavigationConfig
    panels: list[PanelConfig]
    nav_links: list[NavLinkConfig] = dc.field(default_factory=list)
    news: NewsConfig = dc.field(default_factory=NewsConfig)
    pages: list[str] = dc.field(
        default_factory=lambda: ["publications", "news", "projects"]
    )

    def get_panel(self, panel_id: str) -> PanelConfig:
        """Return the panel with ``panel_id`` or raise ``KeyError``."""
        for panel in self.panels:
            if panel.id == panel_id:
                return panel
        available = ", ".join(panel.id for panel in self.panels)
        msg = f"Unknown panel '{panel_id}'. Known panels: {available}"
        raise KeyError(msg)


__all__ = [
    "DataSourceConfig",
    "NavLinkConfig",
    "NavigationConfig",
    "NewsConfig",
    "OutputConfig",
    "PanelConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetaConfig",
]
