"""Builders that turn decoded JSON payloads into content dataclasses.

Each ``_build_*`` function accepts one decoded record (a mapping using the
camelCase keys of the lab's data files) and returns the matching dataclass,
raising :class:`ContentError` when a required field is missing. The
``parse_*`` functions accept a whole data file payload and return the list of
records stored under its collection key.
"""

from __future__ import annotations

import datetime as dt
import typing as typ

from ..config.helpers import _optional_str, _slugify
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

T = typ.TypeVar("T")


def parse_date(value: object | None, *, field: str) -> dt.date | None:
    """Return a date parsed from ISO text (``YYYY``, ``YYYY-MM`` or full)."""
    match value:
        case None:
            return None
        case dt.datetime():
            return value.date()
        case dt.date():
            return value
        case str() as text:
            sanitized = text.strip()
        case _:
            msg = f"Field '{field}' must be an ISO date string."
            raise ContentError(msg)
    if not sanitized:
        return None
    if sanitized.endswith("Z"):
        sanitized = sanitized[:-1] + "+00:00"
    try:
        if len(sanitized) == 4:
            return dt.date(int(sanitized), 1, 1)
        if len(sanitized) == 7:
            year, month = sanitized.split("-")
            return dt.date(int(year), int(month), 1)
        if len(sanitized) == 10:
            return dt.date.fromisoformat(sanitized)
        return dt.datetime.fromisoformat(sanitized).date()
    except ValueError as exc:
        msg = f"Field '{field}' has an invalid date: {text!r}"
        raise ContentError(msg) from exc


def _required_date(value: object | None, *, field: str) -> dt.date:
    parsed = parse_date(value, field=field)
    if parsed is None:
        msg = f"Field '{field}' is required."
        raise ContentError(msg)
    return parsed


def _string_list(value: object | None, *, field: str) -> list[str]:
    """Return a list of non-empty strings from a JSON array (or None)."""
    match value:
        case None:
            return []
        case list() as items:
            return [str(item).strip() for item in items if str(item).strip()]
        case _:
            msg = f"Field '{field}' must be a list."
            raise ContentError(msg)


def _record_id(entry: typ.Mapping[str, object], fallback: str) -> str:
    return _optional_str(entry.get("id")) or _slugify(fallback)


def _require_text(entry: typ.Mapping[str, object], key: str, *, kind: str) -> str:
    text = _optional_str(entry.get(key))
    if not text:
        msg = f"{kind} records require '{key}'."
        raise ContentError(msg)
    return text


def _build_links(payload: object | None) -> PersonLinks:
    match payload:
        case dict() as data:
            return PersonLinks(
                google_scholar=_optional_str(data.get("googleScholar")),
                orcid=_optional_str(data.get("orcid")),
                linkedin=_optional_str(data.get("linkedin")),
                github=_optional_str(data.get("github")),
                personal_website=_optional_str(data.get("personalWebsite")),
            )
        case _:
            return PersonLinks()


def _build_person(entry: typ.Mapping[str, object]) -> Person:
    name = _require_text(entry, "name", kind="Person")
    return Person(
        id=_record_id(entry, name),
        name=name,
        title=_optional_str(entry.get("title")) or "",
        role=_optional_str(entry.get("role")) or "member",
        image=_optional_str(entry.get("image")),
        bio=_optional_str(entry.get("bio")),
        email=_optional_str(entry.get("email")),
        research_interests=_string_list(
            entry.get("researchInterests"), field="researchInterests"
        ),
        links=_build_links(entry.get("links")),
    )


def _build_duration(payload: object | None) -> Duration | None:
    match payload:
        case dict() as data:
            return Duration(
                start=parse_date(data.get("start"), field="duration.start"),
                end=parse_date(data.get("end"), field="duration.end"),
                ongoing=bool(data.get("ongoing", False)),
            )
        case _:
            return None


def _build_partners(payload: object | None) -> list[Partner]:
    partners: list[Partner] = []
    match payload:
        case list() as items:
            iterable = items
        case _:
            return partners
    for entry in iterable:
        match entry:
            case {"name": name, **rest} if name:
                partners.append(
                    Partner(
                        name=str(name),
                        logo=_optional_str(rest.get("logo")),
                        url=_optional_str(rest.get("url") or rest.get("website")),
                    )
                )
            case str() as name if name.strip():
                partners.append(Partner(name=name.strip()))
            case _:
                continue
    return partners


def _build_project(entry: typ.Mapping[str, object]) -> Project:
    title = _require_text(entry, "title", kind="Project")
    return Project(
        id=_record_id(entry, title),
        title=title,
        description=_optional_str(entry.get("description")) or "",
        full_title=_optional_str(entry.get("fullTitle")),
        status=_optional_str(entry.get("status")) or "active",
        type=_optional_str(entry.get("type")),
        program=_optional_str(entry.get("program")),
        funding=_optional_str(entry.get("funding")),
        role=_optional_str(entry.get("role")),
        duration=_build_duration(entry.get("duration")),
        objectives=_string_list(entry.get("objectives"), field="objectives"),
        key_innovations=_string_list(
            entry.get("keyInnovations"), field="keyInnovations"
        ),
        partners=_build_partners(entry.get("partners")),
        tags=_string_list(entry.get("tags"), field="tags"),
        image=_optional_str(entry.get("image")),
        logo=_optional_str(entry.get("logo")),
        website=_optional_str(entry.get("website")),
    )


def _build_publication(entry: typ.Mapping[str, object]) -> Publication:
    title = _require_text(entry, "title", kind="Publication")
    authors = _string_list(entry.get("authors"), field="authors")
    if not authors:
        msg = f"Publication '{title}' requires at least one author."
        raise ContentError(msg)
    try:
        year = int(entry.get("year"))  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"Publication '{title}' requires a numeric 'year'."
        raise ContentError(msg) from exc
    return Publication(
        id=_record_id(entry, title),
        title=title,
        authors=authors,
        year=year,
        venue=_optional_str(entry.get("venue")) or "",
        type=_optional_str(entry.get("type")) or "journal",
        abstract=_optional_str(entry.get("abstract")),
        keywords=_string_list(entry.get("keywords"), field="keywords"),
        tags=_string_list(entry.get("tags"), field="tags"),
        pdf=_optional_str(entry.get("pdf")),
        doi=_optional_str(entry.get("doi")),
        bibtex=_optional_str(entry.get("bibtex")),
    )


def _build_news_item(entry: typ.Mapping[str, object]) -> NewsItem:
    title = _require_text(entry, "title", kind="News")
    return NewsItem(
        id=_record_id(entry, title),
        title=title,
        date=_required_date(entry.get("date"), field="news.date"),
        category=_optional_str(entry.get("category") or entry.get("type")),
        summary=_optional_str(entry.get("summary")),
        content=_optional_str(entry.get("content")),
        author=_optional_str(entry.get("author")),
        image=_optional_str(entry.get("image")),
        tags=_string_list(entry.get("tags"), field="tags"),
        featured=bool(entry.get("featured", False)),
    )


def _build_speaker(payload: object | None) -> Speaker | None:
    match payload:
        case {"name": name, **rest} if name:
            return Speaker(
                name=str(name), affiliation=_optional_str(rest.get("affiliation"))
            )
        case str() as name if name.strip():
            return Speaker(name=name.strip())
        case _:
            return None


def _build_event(entry: typ.Mapping[str, object]) -> Event:
    title = _require_text(entry, "title", kind="Event")
    return Event(
        id=_record_id(entry, title),
        title=title,
        date=_required_date(entry.get("date"), field="events.date"),
        end_date=parse_date(entry.get("endDate"), field="events.endDate"),
        time=_optional_str(entry.get("time")),
        type=_optional_str(entry.get("type")),
        location=_optional_str(entry.get("location")),
        description=_optional_str(entry.get("description")),
        speaker=_build_speaker(entry.get("speaker")),
        registration_required=bool(entry.get("registrationRequired", False)),
        registration_url=_optional_str(entry.get("registrationUrl")),
        website=_optional_str(entry.get("website")),
    )


def _build_talk(entry: typ.Mapping[str, object]) -> Talk:
    title = _require_text(entry, "title", kind="Talk")
    return Talk(
        id=_record_id(entry, title),
        title=title,
        date=_required_date(entry.get("date"), field="pastTalks.date"),
        speaker=_optional_str(entry.get("speaker")) or "",
        event=_optional_str(entry.get("event")),
        type=_optional_str(entry.get("type")),
        location=_optional_str(entry.get("location")),
        slides_url=_optional_str(entry.get("slidesUrl")),
        video_url=_optional_str(entry.get("videoUrl")),
    )


def _build_research_area(entry: typ.Mapping[str, object]) -> ResearchArea:
    title = _require_text(entry, "title", kind="Research area")
    return ResearchArea(
        id=_record_id(entry, title),
        title=title,
        icon=_optional_str(entry.get("icon")),
        short_description=_optional_str(entry.get("shortDescription")),
        full_description=_optional_str(entry.get("fullDescription")),
        topics=_string_list(entry.get("topics"), field="topics"),
        related_publications=_string_list(
            entry.get("relatedPublications"), field="relatedPublications"
        ),
        related_projects=_string_list(
            entry.get("relatedProjects"), field="relatedProjects"
        ),
    )


def _collection(
    payload: object | None,
    key: str,
    builder: typ.Callable[[typ.Mapping[str, object]], T],
) -> list[T]:
    """Return ``builder`` applied to every record under ``payload[key]``."""
    match payload:
        case None:
            return []
        case dict() as data:
            entries = data.get(key)
        case list() as items:
            entries = items
        case _:
            msg = f"Data for '{key}' must be a mapping or a list."
            raise ContentError(msg)
    if entries is None:
        return []
    if not isinstance(entries, list):
        msg = f"Collection '{key}' must be a list."
        raise ContentError(msg)
    records: list[T] = []
    for entry in entries:
        if not isinstance(entry, dict):
            msg = f"Entries in '{key}' must be mappings."
            raise ContentError(msg)
        records.append(builder(entry))
    return records


def parse_people(payload: object | None) -> list[Person]:
    return _collection(payload, "members", _build_person)


def parse_projects(payload: object | None) -> list[Project]:
    return _collection(payload, "projects", _build_project)


def parse_publications(payload: object | None) -> list[Publication]:
    return _collection(payload, "publications", _build_publication)


def parse_research_areas(payload: object | None) -> list[ResearchArea]:
    return _collection(payload, "researchAreas", _build_research_area)


def parse_news(
    payload: object | None,
) -> tuple[list[NewsItem], list[Event], list[Talk]]:
    """Return the news, events, and past talks stored in ``news.json``."""
    if payload is not None and not isinstance(payload, dict):
        msg = "News data must be a mapping with 'news', 'events' and 'pastTalks'."
        raise ContentError(msg)
    return (
        _collection(payload, "news", _build_news_item),
        _collection(payload, "events", _build_event),
        _collection(payload, "pastTalks", _build_talk),
    )


def build_lab_content(raw: typ.Mapping[str, object | None]) -> LabContent:
    """Assemble :class:`LabContent` from decoded data keyed by collection name."""
    news, events, talks = parse_news(raw.get("news"))
    return LabContent(
        people=parse_people(raw.get("team")),
        projects=parse_projects(raw.get("projects")),
        publications=parse_publications(raw.get("publications")),
        news=news,
        events=events,
        talks=talks,
        research_areas=parse_research_areas(raw.get("research")),
    )


__all__ = [
    "build_lab_content",
    "parse_date",
    "parse_news",
    "parse_people",
    "parse_projects",
    "parse_publications",
    "parse_research_areas",
]
