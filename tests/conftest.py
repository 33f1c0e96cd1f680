"""Shared fixtures for the dmlab_pages test suite.

The fixtures build a small but complete site on disk (``site.yaml`` plus the
five JSON data files) and provide :class:`ManualScheduler`, a fake clock that
implements the navigation controller's ``call_later`` protocol so tests can
step through debounce and animation-frame timing deterministically.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import json
import typing as typ

import pytest

from dmlab_pages.config import load_site_config
from dmlab_pages.content import build_lab_content
from dmlab_pages.navigation import (
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

if typ.TYPE_CHECKING:
    from pathlib import Path

    from dmlab_pages.config import SiteConfig
    from dmlab_pages.content import LabContent

TODAY = dt.date(2024, 9, 1)


@dc.dataclass
class ManualHandle:
    when: float
    seq: int
    callback: typ.Callable[[], object]
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic stand-in for an event loop's ``call_later``."""

    def __init__(self) -> None:
        self.now = 0.0
        self._seq = 0
        self._handles: list[ManualHandle] = []

    def call_later(
        self, delay: float, callback: typ.Callable[[], object]
    ) -> ManualHandle:
        self._seq += 1
        handle = ManualHandle(self.now + delay, self._seq, callback)
        self._handles.append(handle)
        return handle

    @property
    def pending(self) -> list[ManualHandle]:
        return [handle for handle in self._handles if not handle.cancelled]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running every callback that falls due."""
        target = self.now + seconds
        while True:
            due = [handle for handle in self.pending if handle.when <= target]
            if not due:
                break
            handle = min(due, key=lambda item: (item.when, item.seq))
            self._handles.remove(handle)
            self.now = handle.when
            handle.callback()
        self.now = target

    def run_until_idle(self, *, max_callbacks: int = 10_000) -> int:
        """Run callbacks in time order until nothing is pending."""
        ran = 0
        while self.pending:
            handle = min(self.pending, key=lambda item: (item.when, item.seq))
            self._handles.remove(handle)
            self.now = handle.when
            handle.callback()
            ran += 1
            if ran >= max_callbacks:
                msg = "Scheduler did not become idle."
                raise AssertionError(msg)
        return ran


@dc.dataclass
class Surface:
    """A controller wired to virtual collaborators."""

    window: VirtualWindow
    container: VirtualScrollContainer
    controller: PanelNavigationController
    host: VirtualIndicatorHost
    progress: VirtualProgressBar
    chrome: VirtualChrome
    links: list[VirtualSidebarLink]


SurfaceFactory = typ.Callable[..., Surface]


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def make_surface(scheduler: ManualScheduler) -> typ.Iterator[SurfaceFactory]:
    """Return a factory building a controller over a virtual surface."""
    created: list[PanelNavigationController] = []

    def factory(
        *,
        panel_count: int = 8,
        width: float = 1000,
        labels: list[str | None] | None = None,
        momentum: bool = False,
        with_scheduler: bool = True,
    ) -> Surface:
        window = VirtualWindow(width)
        container = VirtualScrollContainer(window, panel_count=panel_count)
        panels = [
            Panel(
                index=index,
                id=f"panel-{index}",
                label=labels[index] if labels and index < len(labels) else None,
            )
            for index in range(panel_count)
        ]
        host = VirtualIndicatorHost()
        progress = VirtualProgressBar()
        chrome = VirtualChrome()
        links = [VirtualSidebarLink(panel.id) for panel in panels]
        controller = PanelNavigationController(
            container,
            panels,
            window=window,
            scheduler=scheduler if with_scheduler else None,
            progress_bar=progress,
            sidebar_links=links,
            indicator_host=host,
            chrome=chrome,
            options=NavigationOptions(momentum=momentum),
        )
        created.append(controller)
        return Surface(window, container, controller, host, progress, chrome, links)

    yield factory
    for controller in created:
        controller.destroy()


TEAM = {
    "members": [
        {
            "id": "maria",
            "name": "Maria Papadopoulou",
            "title": "Professor",
            "role": "faculty",
            "bio": "Leads graph mining research.",
            "researchInterests": ["Graphs", "Streams", "Databases", "Ethics"],
            "links": {"orcid": "https://orcid.org/0000-0000-0000-0001"},
        },
        {
            "id": "nikos",
            "name": "Nikos Georgiou",
            "title": "PhD Candidate",
            "role": "phd",
        },
    ]
}

PROJECTS = {
    "projects": [
        {
            "id": "older",
            "title": "Older Project",
            "status": "completed",
            "type": "EU-funded",
            "duration": {"start": "2019-01", "end": "2021-12"},
            "description": "An older project.",
            "partners": [{"name": "Partner A", "url": "https://a.example"}],
        },
        {
            "id": "newer",
            "title": "Newer Project",
            "status": "active",
            "type": "National",
            "duration": {"start": "2023-03", "ongoing": True},
            "description": "A newer project.",
            "keyInnovations": ["Streaming graph index"],
            "website": "https://newer.example",
            "partners": [{"name": "Partner A"}, {"name": "Partner B"}],
        },
    ]
}

PUBLICATIONS = {
    "publications": [
        {
            "id": "pap2024graph",
            "title": "Scalable Graph Mining",
            "authors": ["M. Papadopoulou", "N. Georgiou"],
            "year": 2024,
            "venue": "TKDE",
            "type": "Journal Article",
            "abstract": "Incremental mining of evolving graphs.",
            "keywords": ["streaming"],
            "doi": "10.1109/TKDE.2024.0001",
        },
        {
            "id": "geo2023media",
            "title": "Multimodal Retrieval",
            "authors": ["N. Georgiou"],
            "year": 2023,
            "venue": "ACM Multimedia",
            "type": "Conference Paper",
        },
        {
            "id": "pap2023survey",
            "title": "A Survey of Stream Processing",
            "authors": ["M. Papadopoulou", "A. B", "C. D", "E. F"],
            "year": 2023,
            "venue": "ACM Computing Surveys",
            "type": "Journal Article",
        },
    ]
}

NEWS = {
    "news": [
        {
            "id": "award",
            "title": "Best Paper Award",
            "date": "2024-08-28",
            "category": "award",
            "summary": "Our paper won.",
        },
        {
            "id": "launch",
            "title": "Project Launch",
            "date": "2024-08-02",
            "category": "announcement",
            "summary": "A new project starts.",
        },
        {
            "id": "older-news",
            "title": "Lab Founded",
            "date": "2023-01-15",
            "summary": "The lab opens.",
        },
    ],
    "events": [
        {"id": "past-event", "title": "Past Workshop", "date": "2024-05-01"},
        {"id": "later-event", "title": "Winter Seminar", "date": "2024-12-10"},
        {"id": "soon-event", "title": "Autumn Seminar", "date": "2024-10-01"},
    ],
    "pastTalks": [
        {"id": "t1", "title": "Talk One", "date": "2024-01-10", "speaker": "Maria"},
        {"id": "t2", "title": "Talk Two", "date": "2024-06-10", "speaker": "Nikos"},
    ],
}

RESEARCH = {
    "researchAreas": [
        {
            "id": "data-mining",
            "title": "Data Mining",
            "icon": "database",
            "shortDescription": "Patterns in data.",
            "topics": ["Graphs", "Streams"],
        }
    ]
}

SITE_YAML = """
site:
  name: Data & Media Laboratory
  short_name: DM Lab
  tagline: Data science and media analytics.
  contact_email: info@dmlab.example.org
data:
  source: {data_dir}
output:
  output_dir: {output_dir}
navigation:
  viewport_width: 1000
panels:
  - {{id: home, label: Home, kind: hero, body: "Welcome to the **lab**."}}
  - {{id: about, label: About Us, kind: about, body: About text.}}
  - {{id: research, label: Research, kind: research}}
  - {{id: projects, label: Projects, kind: projects}}
  - {{id: team, label: Team, kind: team}}
  - {{id: publications, label: Publications, kind: publications}}
  - {{id: news, label: News, kind: news}}
  - {{id: contact, label: Contact, kind: contact}}
"""


def write_data_files(data_dir: Path) -> None:
    data_dir.mkdir(parents=True, exist_ok=True)
    payloads = {
        "team": TEAM,
        "projects": PROJECTS,
        "publications": PUBLICATIONS,
        "news": NEWS,
        "research": RESEARCH,
    }
    for name, payload in payloads.items():
        (data_dir / f"{name}.json").write_text(json.dumps(payload), encoding="utf-8")


@pytest.fixture
def site_paths(tmp_path: Path) -> dict[str, Path]:
    """Write a site config and data files under ``tmp_path``."""
    data_dir = tmp_path / "data"
    output_dir = tmp_path / "public"
    write_data_files(data_dir)
    config_path = tmp_path / "site.yaml"
    config_path.write_text(
        SITE_YAML.format(data_dir=data_dir.as_posix(), output_dir=output_dir.as_posix()),
        encoding="utf-8",
    )
    return {"config": config_path, "data": data_dir, "output": output_dir}


@pytest.fixture
def site_config(site_paths: dict[str, Path]) -> SiteConfig:
    return load_site_config(site_paths["config"])


@pytest.fixture
def lab_content() -> LabContent:
    return build_lab_content(
        {
            "team": TEAM,
            "projects": PROJECTS,
            "publications": PUBLICATIONS,
            "news": NEWS,
            "research": RESEARCH,
        }
    )


@pytest.fixture
def today() -> dt.date:
    return TODAY
