"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DATA_FILES
from .helpers import _optional_int, _optional_str, _require_mapping
from .models import (
    DataSourceConfig,
    NewsConfig,
    OutputConfig,
    SiteConfig,
    SiteConfigError,
    SiteMetaConfig,
)
from .panels import _build_nav_links, _build_navigation_config, _build_panels

SUBPAGES = ("publications", "news", "projects")


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the lab site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed site configuration, including identity copy, the data source,
        output layout, navigation tuning, and the ordered homepage panels.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid (for example,
        no panels are defined).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from dmlab_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> [panel.id for panel in config.panels][:2]  # doctest: +SKIP
    ['home', 'about']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    site = _build_site_meta(raw.get("site"))
    data = _build_data_source(raw.get("data"))
    output = _build_output_config(raw.get("output"))
    navigation = _build_navigation_config(raw.get("navigation"))
    panels = _build_panels(raw.get("panels"))
    nav_links = _build_nav_links(raw.get("nav_links"))
    news = _build_news_config(raw.get("news"))
    pages = _build_page_selection(raw.get("pages"))

    return SiteConfig(
        site=site,
        data=data,
        output=output,
        navigation=navigation,
        panels=panels,
        nav_links=nav_links,
        news=news,
        pages=pages,
    )


def _build_site_meta(payload: object | None) -> SiteMetaConfig:
    """Build the site identity block; ``name`` is the only required field."""
    data = _require_mapping(payload, section="site")
    name = _optional_str(data.get("name"))
    if not name:
        msg = "Site configuration requires a 'name'."
        raise SiteConfigError(msg)
    return SiteMetaConfig(
        name=name,
        short_name=_optional_str(data.get("short_name")) or name,
        tagline=_optional_str(data.get("tagline")) or "",
        description=_optional_str(data.get("description")) or "",
        base_url=_optional_str(data.get("base_url")),
        copyright_year=_optional_int(
            data.get("copyright_year"), field="site.copyright_year"
        ),
        contact_email=_optional_str(data.get("contact_email")),
        address=_optional_str(data.get("address")),
    )


def _build_data_source(payload: object | None) -> DataSourceConfig:
    """Resolve the data directory or base URL and the file-name overrides."""
    data = _require_mapping(payload, section="data")
    source_text = _optional_str(data.get("source")) or "data"
    source: Path | str
    if source_text.startswith(("http://", "https://")):
        source = source_text.rstrip("/")
    else:
        source = Path(source_text)
    overrides = _require_mapping(data.get("files"), section="data.files")
    files = dict(DATA_FILES)
    for key, value in overrides.items():
        if key not in DATA_FILES:
            known = ", ".join(sorted(DATA_FILES))
            msg = f"Unknown data file '{key}'. Known files: {known}"
            raise SiteConfigError(msg)
        stem = _optional_str(value)
        if not stem:
            msg = f"Data file '{key}' requires a non-empty name."
            raise SiteConfigError(msg)
        files[key] = stem.removesuffix(".json")
    return DataSourceConfig(source=source, files=files)


def _build_output_config(payload: object | None) -> OutputConfig:
    """Build the output directory layout."""
    data = _require_mapping(payload, section="output")
    base = OutputConfig()
    return OutputConfig(
        output_dir=Path(data.get("output_dir", base.output_dir)),
        home=str(data.get("home", base.home)),
        publications=str(data.get("publications", base.publications)),
        news=str(data.get("news", base.news)),
        projects=str(data.get("projects", base.projects)),
    )


def _build_news_config(payload: object | None) -> NewsConfig:
    data = _require_mapping(payload, section="news")
    base = NewsConfig()
    limit = _optional_int(data.get("widget_limit"), field="news.widget_limit")
    return NewsConfig(
        default_author=_optional_str(data.get("default_author")) or base.default_author,
        widget_limit=base.widget_limit if limit is None else limit,
    )


def _build_page_selection(payload: object | None) -> list[str]:
    """Return the enabled subpages, preserving the canonical order."""
    if payload is None:
        return list(SUBPAGES)
    if not isinstance(payload, list):
        msg = "Configuration 'pages' must be a list of page names."
        raise SiteConfigError(msg)
    requested = {str(item).strip() for item in payload}
    unknown = requested.difference(SUBPAGES)
    if unknown:
        msg = f"Unknown pages: {', '.join(sorted(unknown))}"
        raise SiteConfigError(msg)
    return [page for page in SUBPAGES if page in requested]


__all__ = ["SUBPAGES", "load_site_config"]
