"""Tests for loading ``site.yaml`` into typed configuration objects."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

from dmlab_pages._constants import DEFAULT_PANEL_LABELS, MOBILE_BREAKPOINT
from dmlab_pages.config import SiteConfigError, load_site_config
from dmlab_pages.navigation import NavigationOptions

if typ.TYPE_CHECKING:
    from dmlab_pages.config import SiteConfig

MINIMAL = """
site:
  name: Data & Media Laboratory
panels:
  - label: Home
    kind: hero
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_fixture_config_is_loaded(site_config: SiteConfig, site_paths: dict[str, Path]) -> None:
    assert site_config.site.short_name == "DM Lab"
    assert site_config.data.source == site_paths["data"]
    assert not site_config.data.is_remote
    assert site_config.navigation.viewport_width == 1000
    assert [panel.id for panel in site_config.panels][:3] == ["home", "about", "research"]
    assert site_config.output.path_for("news") == site_paths["output"] / "pages/news.html"


def test_minimal_config_uses_defaults(tmp_path: Path) -> None:
    config = load_site_config(_write(tmp_path, MINIMAL))
    assert config.site.short_name == "Data & Media Laboratory"
    assert config.data.source == Path("data")
    assert config.data.files["publications"] == "publications"
    assert config.navigation.mobile_breakpoint == MOBILE_BREAKPOINT
    assert config.navigation.labels == DEFAULT_PANEL_LABELS
    assert config.pages == ["publications", "news", "projects"]
    assert config.panels[0].id == "home"


def test_remote_source_and_file_overrides(tmp_path: Path) -> None:
    text = MINIMAL + (
        "data:\n"
        "  source: https://cdn.example.org/dmlab/\n"
        "  files: {news: news-2024.json}\n"
    )
    config = load_site_config(_write(tmp_path, text))
    assert config.data.source == "https://cdn.example.org/dmlab"
    assert config.data.is_remote
    assert config.data.files["news"] == "news-2024"


def test_navigation_section_feeds_controller_options(tmp_path: Path) -> None:
    text = MINIMAL + (
        "navigation:\n"
        "  mobile_breakpoint: 900\n"
        "  momentum: true\n"
        "  ease: 0.2\n"
        "  labels: [Start, Next]\n"
    )
    config = load_site_config(_write(tmp_path, text))
    options = NavigationOptions.from_config(config.navigation)
    assert options.mobile_breakpoint == 900
    assert options.momentum
    assert options.ease == pytest.approx(0.2)
    assert options.fallback_labels == ("Start", "Next")
    forced = NavigationOptions.from_config(config.navigation, momentum=False)
    assert not forced.momentum


def test_panel_ids_default_to_slugified_labels(tmp_path: Path) -> None:
    text = MINIMAL + "  - label: About Us\n    kind: about\n"
    config = load_site_config(_write(tmp_path, text))
    assert config.get_panel("about-us").label == "About Us"
    with pytest.raises(KeyError, match="Unknown panel 'missing'"):
        config.get_panel("missing")


def test_page_selection_keeps_canonical_order(tmp_path: Path) -> None:
    config = load_site_config(_write(tmp_path, MINIMAL + "pages: [projects, news]\n"))
    assert config.pages == ["news", "projects"]


@pytest.mark.parametrize(
    ("extra", "message"),
    [
        ("  - label: Home\n", "Duplicate panel id 'home'"),
        ("  - label: Odd\n    kind: carousel\n", "unknown kind 'carousel'"),
        ("  - kind: team\n", "with a 'label'"),
        ("navigation:\n  ease: 2\n", "at most 1"),
        ("navigation:\n  resize_debounce: -1\n", "must be positive"),
        ("data:\n  files: {slides: x}\n", "Unknown data file 'slides'"),
        ("pages: [blog]\n", "Unknown pages: blog"),
        ("news:\n  widget_limit: many\n", "must be numeric"),
    ],
)
def test_invalid_configs_are_rejected(tmp_path: Path, extra: str, message: str) -> None:
    with pytest.raises(SiteConfigError, match=message):
        load_site_config(_write(tmp_path, MINIMAL + extra))


def test_missing_name_and_panels(tmp_path: Path) -> None:
    with pytest.raises(SiteConfigError, match="requires a 'name'"):
        load_site_config(_write(tmp_path, "panels:\n  - label: Home\n"))
    with pytest.raises(SiteConfigError, match="'panels' list"):
        load_site_config(_write(tmp_path, "site:\n  name: Lab\n"))


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_site_config(tmp_path / "absent.yaml")
