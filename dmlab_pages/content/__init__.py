"""Typed lab content: data models, the JSON data loader, and list queries.

The data files behind the site (``team.json``, ``projects.json``,
``publications.json``, ``news.json`` and ``research.json``) are fetched by
:class:`DataLoader`, decoded into dataclasses by :func:`build_lab_content`,
and sliced for display with the helpers in :mod:`dmlab_pages.content.queries`.
"""

from .loader import DataLoader, DataLoadError
from .models import (
    ContentError,
    Duration,
    Event,
    LabContent,
    NewsItem,
    Partner,
    Person,
    PersonLinks,
    Project,
    Publication,
    ResearchArea,
    Speaker,
    Talk,
)
from .parsing import build_lab_content, parse_date

__all__ = [
    "ContentError",
    "DataLoadError",
    "DataLoader",
    "Duration",
    "Event",
    "LabContent",
    "NewsItem",
    "Partner",
    "Person",
    "PersonLinks",
    "Project",
    "Publication",
    "ResearchArea",
    "Speaker",
    "Talk",
    "build_lab_content",
    "parse_date",
]
