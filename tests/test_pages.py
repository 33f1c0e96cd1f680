"""Tests for the page builders and the site orchestration.

The fixture site from ``conftest`` is rendered into ``tmp_path`` and the
written HTML is inspected with BeautifulSoup. Builds pass a fixed ``today``
so the upcoming-events widgets are deterministic.
"""

from __future__ import annotations

import json
import typing as typ

import pytest
from bs4 import BeautifulSoup

from dmlab_pages.config import NavLinkConfig
from dmlab_pages.content import LabContent
from dmlab_pages.pages import (
    HomePageBuilder,
    NewsPageBuilder,
    ProjectsPageBuilder,
    PublicationsPageBuilder,
)
from dmlab_pages.publications import PublicationFilters
from dmlab_pages.site import SiteBuilder

if typ.TYPE_CHECKING:
    import datetime as dt
    from pathlib import Path

    from dmlab_pages.config import SiteConfig


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def _texts(soup: BeautifulSoup, selector: str) -> list[str]:
    return [node.get_text(strip=True) for node in soup.select(selector)]


def test_site_builder_writes_every_page(
    site_config: SiteConfig, site_paths: dict[str, Path], today: dt.date
) -> None:
    written = SiteBuilder(site_config, today=today).run()
    output = site_paths["output"]
    assert written == [
        output / "index.html",
        output / "pages/publications.html",
        output / "pages/news.html",
        output / "pages/projects.html",
    ]
    for path in written:
        text = path.read_text(encoding="utf-8")
        assert text.startswith("<!DOCTYPE html>"), f"{path.name} is not an HTML page"
        assert text.endswith("\n")


def test_site_builder_respects_page_selection(
    site_config: SiteConfig, lab_content: LabContent, today: dt.date
) -> None:
    site_config.pages = ["news"]
    builders = SiteBuilder(site_config, today=today).builders(lab_content)
    assert [type(builder) for builder in builders] == [HomePageBuilder, NewsPageBuilder]
    home = _soup(builders[0].render())
    assert home.select_one("a.panel-more[href='pages/news.html']") is not None
    assert "View all publications" not in home.get_text()
    site_config.pages = ["blog"]
    with pytest.raises(ValueError, match="Unknown page 'blog'"):
        SiteBuilder(site_config, today=today).builders(lab_content)


def test_home_page_panels_follow_config_order(
    site_config: SiteConfig, lab_content: LabContent, today: dt.date
) -> None:
    html = HomePageBuilder(site_config, lab_content, today=today).render()
    soup = _soup(html)
    sections = soup.select("main#scrollContainer section.panel")
    assert [s["id"] for s in sections] == [p.id for p in site_config.panels]
    assert [s["data-panel-index"] for s in sections] == [str(i) for i in range(8)]
    assert sections[0].select_one("h1").get_text() == "Data & Media Laboratory"
    assert sections[0].select_one(".panel-body strong").get_text() == "lab"
    assert "panel-research" in sections[2]["class"]
    assert len(sections[2].select("article.research-card-compact")) == 1
    assert [a["data-project-id"] for a in sections[3].select("article.project-card")] == [
        "newer",
        "older",
    ]
    assert len(sections[4].select("article.person-card-compact")) == 2
    assert len(sections[5].select("article.publication-item")) == 3
    assert sections[5].select_one(".publication-tags") is None


def test_home_page_news_panel_lists_upcoming_events(
    site_config: SiteConfig, lab_content: LabContent, today: dt.date
) -> None:
    soup = _soup(HomePageBuilder(site_config, lab_content, today=today).render())
    news = soup.select_one("section#news")
    assert len(news.select(".panel-cards article.news-card-compact")) == 3
    events = [e["data-event-id"] for e in news.select(".panel-events article")]
    assert events == ["soon-event", "later-event"]
    contact = soup.select_one("section#contact address")
    assert contact.select_one("a")["href"] == "mailto:info@dmlab.example.org"


def test_home_page_navigation_initial_state(
    site_config: SiteConfig, lab_content: LabContent, today: dt.date
) -> None:
    soup = _soup(HomePageBuilder(site_config, lab_content, today=today).render())
    dots = soup.select(".scroll-dots button.scroll-dot")
    assert [d["data-panel-id"] for d in dots] == [p.id for p in site_config.panels]
    assert [d["data-label"] for d in dots][:2] == ["Home", "About Us"]
    assert [d["data-index"] for d in dots if "active" in d["class"]] == ["0"]
    links = soup.select("aside.sidebar a.sidebar-link")
    assert [a["data-panel-id"] for a in links if "active" in a["class"]] == ["home"]
    assert links[1]["href"] == "#about"
    bar = soup.select_one("#scrollProgressBar")
    assert bar["style"] == "width: 0.00%"
    assert "hidden" not in soup.select_one(".scroll-hint")["class"]
    assert "scrolled" not in soup.select_one("nav#navbar")["class"]


def test_home_page_embeds_panel_manifest(
    site_config: SiteConfig, lab_content: LabContent, today: dt.date
) -> None:
    soup = _soup(HomePageBuilder(site_config, lab_content, today=today).render())
    manifest = json.loads(soup.select_one("script#panelManifest").string)
    assert [panel["id"] for panel in manifest["panels"]][:3] == [
        "home",
        "about",
        "research",
    ]
    assert manifest["mobileBreakpoint"] == 768
    assert manifest["resizeDebounceMs"] == 250
    assert manifest["momentum"] is False


def test_home_page_has_no_dots_at_mobile_width(
    site_config: SiteConfig, lab_content: LabContent, today: dt.date
) -> None:
    site_config.navigation.viewport_width = 700
    builder = HomePageBuilder(site_config, lab_content, today=today)
    snapshot = builder.snapshot_navigation()
    assert snapshot.indicators == []
    assert snapshot.current_panel_index == 0
    assert [link.active for link in snapshot.sidebar_links][:2] == [True, False]
    assert _soup(builder.render()).select_one(".scroll-dots") is None


def test_publications_page_groups_and_filters(
    site_config: SiteConfig, lab_content: LabContent
) -> None:
    soup = _soup(PublicationsPageBuilder(site_config, lab_content).render())
    assert soup.select_one("#resultsCount").get_text() == "Showing 3 of 3 publications"
    assert [g["data-year"] for g in soup.select("section.year-group")] == ["2024", "2023"]
    years = [o["value"] for o in soup.select("#yearFilter option")]
    assert years == ["all", "2024", "2023"]
    types = [o["value"] for o in soup.select("#typeFilter option")]
    assert types == ["all", "Journal Article", "Conference Paper"]
    active = soup.select_one("nav#navbar a.active")
    assert active is not None
    assert active["href"] == "publications.html"
    assert soup.select_one("a.navbar-brand")["href"] == "../index.html"
    assert soup.select_one("link[rel=stylesheet]")["href"] == "../css/main.css"


def test_publications_page_build_time_filters(
    site_config: SiteConfig, lab_content: LabContent
) -> None:
    builder = PublicationsPageBuilder(
        site_config, lab_content, filters=PublicationFilters(year=2023, search="survey")
    )
    soup = _soup(builder.render())
    assert soup.select_one("#resultsCount").get_text() == "Showing 1 of 3 publications"
    selected = soup.select_one("#yearFilter option[selected]")
    assert selected["value"] == "2023"
    assert soup.select_one("#searchInput")["value"] == "survey"
    empty = PublicationsPageBuilder(
        site_config, lab_content, filters=PublicationFilters(year=1990)
    )
    assert "No publications found" in _soup(empty.render()).select_one(
        "#publicationsList"
    ).get_text()


def test_news_page_widgets(
    site_config: SiteConfig, lab_content: LabContent, today: dt.date
) -> None:
    soup = _soup(NewsPageBuilder(site_config, lab_content, today=today).render())
    latest = soup.select("#latestNews article.news-card")
    assert [a["data-news-id"] for a in latest] == ["award", "launch", "older-news"]
    assert _texts(soup, "#latestNews .news-author")[0] == "By DM Lab"
    upcoming = [a["data-event-id"] for a in soup.select("#upcomingEvents article")]
    assert upcoming == ["soon-event", "later-event"]
    talks = [a["data-talk-id"] for a in soup.select("#recentTalks article")]
    assert talks == ["t2", "t1"]
    months = [g["data-month"] for g in soup.select("#newsTimeline section.timeline-group")]
    assert months == ["2024-08", "2023-01"]
    events = soup.select("#allEvents article")
    assert [a["data-event-id"] for a in events] == [
        "past-event",
        "soon-event",
        "later-event",
    ]
    assert "event-past" in events[0]["class"]


def test_news_page_empty_widgets(site_config: SiteConfig, today: dt.date) -> None:
    soup = _soup(NewsPageBuilder(site_config, LabContent(), today=today).render())
    assert soup.select_one("#upcomingEvents .empty-state").get_text() == "No upcoming events."
    assert soup.select_one("#recentTalks .empty-state").get_text() == "No recent talks."


def test_projects_page_lists_details(
    site_config: SiteConfig, lab_content: LabContent
) -> None:
    soup = _soup(ProjectsPageBuilder(site_config, lab_content).render())
    assert soup.select_one(".project-count").get_text() == "2 projects"
    assert _texts(soup, ".status-summary li") == ["Active: 1", "Completed: 1"]
    ids = [a["id"] for a in soup.select("#projectsList article.project-detail")]
    assert ids == ["project-older", "project-newer"]


def test_nav_links_are_relative_to_each_page(
    site_config: SiteConfig, lab_content: LabContent
) -> None:
    site_config.nav_links = [
        NavLinkConfig(label="Blog", href="blog/index.html"),
        NavLinkConfig(label="GitHub", href="https://github.com/dmlab", external=True),
    ]
    soup = _soup(ProjectsPageBuilder(site_config, lab_content).render())
    blog, github = soup.select("ul.navbar-links a")[:2]
    assert blog["href"] == "../blog/index.html"
    assert github["target"] == "_blank"
    assert github["href"] == "https://github.com/dmlab"


def test_builder_run_creates_parent_directories(
    site_config: SiteConfig, lab_content: LabContent, site_paths: dict[str, Path]
) -> None:
    path = ProjectsPageBuilder(site_config, lab_content).run()
    assert path == site_paths["output"] / "pages/projects.html"
    assert path.is_file()
