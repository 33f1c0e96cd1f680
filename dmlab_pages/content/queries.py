"""Filtering, sorting, and grouping helpers for content collections."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ

from .._constants import WIDGET_LIMIT

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Event, NewsItem, Person, Project, Talk


def _matches(value: str | None, wanted: str | None) -> bool:
    if not wanted or wanted == "all":
        return True
    return value == wanted


def filter_by_role(people: cabc.Sequence[Person], role: str | None) -> list[Person]:
    """Return people with ``role``; ``None`` or ``"all"`` keeps everyone."""
    return [person for person in people if _matches(person.role, role)]


def filter_projects_by_status(
    projects: cabc.Sequence[Project], status: str | None
) -> list[Project]:
    return [project for project in projects if _matches(project.status, status)]


def filter_projects_by_type(
    projects: cabc.Sequence[Project], project_type: str | None
) -> list[Project]:
    return [project for project in projects if _matches(project.type, project_type)]


def sort_projects_chronologically(projects: cabc.Sequence[Project]) -> list[Project]:
    """Return projects ordered by start date, newest first; undated ones last."""

    def _start(project: Project) -> dt.date:
        if project.duration and project.duration.start:
            return project.duration.start
        return dt.date.min

    return sorted(projects, key=_start, reverse=True)


def sort_news(items: cabc.Sequence[NewsItem]) -> list[NewsItem]:
    """Return news items newest first."""
    return sorted(items, key=lambda item: item.date, reverse=True)


def upcoming_events(
    events: cabc.Sequence[Event],
    *,
    today: dt.date,
    limit: int | None = WIDGET_LIMIT,
) -> list[Event]:
    """Return events on or after ``today``, soonest first, capped at ``limit``."""
    upcoming = sorted(
        (event for event in events if event.date >= today),
        key=lambda event: event.date,
    )
    return upcoming if limit is None else upcoming[:limit]


def recent_talks(
    talks: cabc.Sequence[Talk], *, limit: int | None = WIDGET_LIMIT
) -> list[Talk]:
    """Return talks newest first, capped at ``limit``."""
    ordered = sorted(talks, key=lambda talk: talk.date, reverse=True)
    return ordered if limit is None else ordered[:limit]


def events_in_date_order(events: cabc.Sequence[Event]) -> list[Event]:
    return sorted(events, key=lambda event: event.date)


@dc.dataclass(slots=True)
class TimelineGroup:
    """News items published within one calendar month."""

    key: str
    month: dt.date
    items: list[NewsItem]


def news_timeline(items: cabc.Sequence[NewsItem]) -> list[TimelineGroup]:
    """Group news items by ``YYYY-MM``, newest month and newest item first."""
    groups: dict[str, TimelineGroup] = {}
    for item in sort_news(items):
        key = f"{item.date.year}-{item.date.month:02d}"
        group = groups.get(key)
        if group is None:
            group = TimelineGroup(key=key, month=item.date.replace(day=1), items=[])
            groups[key] = group
        group.items.append(item)
    return list(groups.values())


__all__ = [
    "TimelineGroup",
    "events_in_date_order",
    "filter_by_role",
    "filter_projects_by_status",
    "filter_projects_by_type",
    "news_timeline",
    "recent_talks",
    "sort_news",
    "sort_projects_chronologically",
    "upcoming_events",
]
