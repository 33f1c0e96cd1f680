"""Typed dataclasses describing the lab's JSON content records."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata


class ContentError(ValueError):
    """Raised when a data record is malformed or missing required fields."""


@dc.dataclass(slots=True)
class PersonLinks:
    """Academic and social profile links for a team member."""

    google_scholar: str | None = None
    orcid: str | None = None
    linkedin: str | None = None
    github: str | None = None
    personal_website: str | None = None

    def items(self) -> list[tuple[str, str]]:
        """Return ``(label, href)`` pairs for every link that is set."""
        labelled = [
            ("Google Scholar", self.google_scholar),
            ("ORCID", self.orcid),
            ("LinkedIn", self.linkedin),
            ("GitHub", self.github),
            ("Website", self.personal_website),
        ]
        return [(label, href) for label, href in labelled if href]


@dc.dataclass(slots=True)
class Person:
    """A lab team member."""

    id: str
    name: str
    title: str
    role: str = "member"
    image: str | None = None
    bio: str | None = None
    email: str | None = None
    research_interests: list[str] = dc.field(default_factory=list)
    links: PersonLinks = dc.field(default_factory=PersonLinks)


@dc.dataclass(slots=True)
class Duration:
    """Project start and end dates; ``ongoing`` projects have no fixed end."""

    start: dt.date | None = None
    end: dt.date | None = None
    ongoing: bool = False


@dc.dataclass(slots=True)
class Partner:
    name: str
    logo: str | None = None
    url: str | None = None


@dc.dataclass(slots=True)
class Project:
    """A funded or internal research project."""

    id: str
    title: str
    description: str = ""
    full_title: str | None = None
    status: str = "active"
    type: str | None = None
    program: str | None = None
    funding: str | None = None
    role: str | None = None
    duration: Duration | None = None
    objectives: list[str] = dc.field(default_factory=list)
    key_innovations: list[str] = dc.field(default_factory=list)
    partners: list[Partner] = dc.field(default_factory=list)
    tags: list[str] = dc.field(default_factory=list)
    image: str | None = None
    logo: str | None = None
    website: str | None = None


@dc.dataclass(slots=True)
class Publication:
    """A journal article, conference paper, chapter, or preprint."""

    id: str
    title: str
    authors: list[str]
    year: int
    venue: str = ""
    type: str = "journal"
    abstract: str | None = None
    keywords: list[str] = dc.field(default_factory=list)
    tags: list[str] = dc.field(default_factory=list)
    pdf: str | None = None
    doi: str | None = None
    bibtex: str | None = None

    @property
    def doi_url(self) -> str | None:
        """Return a resolvable DOI URL, accepting bare DOIs and full URLs."""
        if not self.doi:
            return None
        if self.doi.startswith(("http://", "https://")):
            return self.doi
        return f"https://doi.org/{self.doi}"


@dc.dataclass(slots=True)
class NewsItem:
    """An announcement, award, or other news entry."""

    id: str
    title: str
    date: dt.date
    category: str | None = None
    summary: str | None = None
    content: str | None = None
    author: str | None = None
    image: str | None = None
    tags: list[str] = dc.field(default_factory=list)
    featured: bool = False


@dc.dataclass(slots=True)
class Speaker:
    name: str
    affiliation: str | None = None


@dc.dataclass(slots=True)
class Event:
    """A seminar, workshop, or conference the lab hosts or attends."""

    id: str
    title: str
    date: dt.date
    end_date: dt.date | None = None
    time: str | None = None
    type: str | None = None
    location: str | None = None
    description: str | None = None
    speaker: Speaker | None = None
    registration_required: bool = False
    registration_url: str | None = None
    website: str | None = None


@dc.dataclass(slots=True)
class Talk:
    """A past talk given by a lab member."""

    id: str
    title: str
    date: dt.date
    speaker: str
    event: str | None = None
    type: str | None = None
    location: str | None = None
    slides_url: str | None = None
    video_url: str | None = None


@dc.dataclass(slots=True)
class ResearchArea:
    """A research theme shown on the homepage."""

    id: str
    title: str
    icon: str | None = None
    short_description: str | None = None
    full_description: str | None = None
    topics: list[str] = dc.field(default_factory=list)
    related_publications: list[str] = dc.field(default_factory=list)
    related_projects: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class LabContent:
    """Every content collection the site builder renders."""

    people: list[Person] = dc.field(default_factory=list)
    projects: list[Project] = dc.field(default_factory=list)
    publications: list[Publication] = dc.field(default_factory=list)
    news: list[NewsItem] = dc.field(default_factory=list)
    events: list[Event] = dc.field(default_factory=list)
    talks: list[Talk] = dc.field(default_factory=list)
    research_areas: list[ResearchArea] = dc.field(default_factory=list)


__all__ = [
    "ContentError",
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
]
