"""Load and validate site configuration YAML for dmlab site builds.

This subpackage parses the project's ``site.yaml`` file, applies package
defaults for navigation tuning and output layout, validates the ordered list
of homepage panels, and produces strongly typed dataclasses
(:class:`SiteConfig`, :class:`PanelConfig`, etc.) that the page builders and
the navigation controller consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from dmlab_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.navigation.mobile_breakpoint  # doctest: +SKIP
768
"""

from .loader import load_site_config
from .models import (
    DataSourceConfig,
    NavigationConfig,
    NavLinkConfig,
    NewsConfig,
    OutputConfig,
    PanelConfig,
    SiteConfig,
    SiteConfigError,
    SiteMetaConfig,
)

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
    "load_site_config",
]
