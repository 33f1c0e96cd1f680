"""Card and list renderers for people, projects, publications, news, and research.

Every renderer is a pure function ``(item, **options) -> str`` backed by a Jinja
template under ``templates/cards``. Autoescaping covers every user-visible text
field and attribute, so data files cannot inject markup.

Examples
--------
>>> from dmlab_pages.content import Person
>>> html = render_person_card(Person(id="mk", name="Maria K", title="PhD <b>"))
>>> "PhD &lt;b&gt;" in html
True
"""

from __future__ import annotations

import datetime as dt
import typing as typ

from ..content.queries import news_timeline
from .environment import default_environment
from .helpers import render_list, truncate

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from ..content.models import (
        Event,
        NewsItem,
        Person,
        Project,
        Publication,
        ResearchArea,
        Talk,
    )


def _render(template: str, **context: object) -> str:
    return default_environment().get_template(f"cards/{template}.jinja").render(
        **context
    )


def render_person_card(
    person: Person,
    *,
    show_bio: bool = True,
    show_links: bool = True,
    compact: bool = False,
) -> str:
    """Render a team member with photo, interests, bio, and profile links."""
    return _render(
        "person_card",
        person=person,
        interests=", ".join(person.research_interests[:3]),
        show_bio=show_bio,
        show_links=show_links,
        compact=compact,
    )


def render_person_list(people: cabc.Sequence[Person], **options: typ.Any) -> str:
    return str(
        render_list(
            people,
            lambda person: render_person_card(person, **options),
            empty_message="No team members found",
        )
    )


def render_project_card(
    project: Project,
    *,
    show_full_description: bool = False,
    show_partners: bool = True,
) -> str:
    """Render a compact project card with badges, meta items, and partners."""
    return _render(
        "project_card",
        project=project,
        show_full_description=show_full_description,
        show_partners=show_partners,
    )


def render_project_detail(project: Project) -> str:
    """Render the full project entry used on the projects page."""
    return _render("project_detail", project=project)


def render_project_list(
    projects: cabc.Sequence[Project], *, detail: bool = False, **options: typ.Any
) -> str:
    if detail:
        return str(
            render_list(
                projects, render_project_detail, empty_message="No projects found"
            )
        )
    return str(
        render_list(
            projects,
            lambda project: render_project_card(project, **options),
            empty_message="No projects found",
        )
    )


def render_publication_item(
    publication: Publication,
    *,
    show_abstract: bool = False,
    show_tags: bool = True,
) -> str:
    """Render a publication with citation metadata, links, and BibTeX."""
    return _render(
        "publication_item",
        publication=publication,
        show_abstract=show_abstract,
        show_tags=show_tags,
    )


def render_publication_list(
    publications: cabc.Sequence[Publication], **options: typ.Any
) -> str:
    return str(
        render_list(
            publications,
            lambda pub: render_publication_item(pub, **options),
            empty_message="No publications found",
        )
    )


def render_news_card(
    item: NewsItem,
    *,
    compact: bool = False,
    show_image: bool = True,
    default_author: str | None = None,
) -> str:
    """Render a news entry; compact cards truncate the summary to 100 chars."""
    summary = item.summary
    if compact:
        summary = item.summary or item.content
    return _render(
        "news_card",
        item=item,
        summary=summary,
        compact=compact,
        show_image=show_image,
        author=item.author or default_author,
    )


def render_news_list(items: cabc.Sequence[NewsItem], **options: typ.Any) -> str:
    return str(
        render_list(
            items,
            lambda item: render_news_card(item, **options),
            empty_message="No news items available.",
        )
    )


def render_event_card(event: Event, *, today: dt.date | None = None) -> str:
    """Render an event, flagged upcoming when it falls on or after ``today``."""
    reference = today or dt.datetime.now(dt.UTC).date()
    return _render("event_card", event=event, upcoming=event.date >= reference)


def render_event_list(
    events: cabc.Sequence[Event],
    *,
    today: dt.date | None = None,
    empty_message: str = "No events available.",
) -> str:
    return str(
        render_list(
            events,
            lambda event: render_event_card(event, today=today),
            empty_message=empty_message,
        )
    )


def render_talk_item(talk: Talk) -> str:
    return _render("talk_item", talk=talk)


def render_talk_list(
    talks: cabc.Sequence[Talk], *, empty_message: str = "No talks available."
) -> str:
    return str(render_list(talks, render_talk_item, empty_message=empty_message))


def render_news_timeline(items: cabc.Sequence[NewsItem], **options: typ.Any) -> str:
    """Render news grouped by month, newest month first."""
    groups = news_timeline(items)
    return _render(
        "news_timeline",
        groups=[
            (group, [render_news_card(item, **options) for item in group.items])
            for group in groups
        ],
    )


def render_research_area_card(
    area: ResearchArea,
    *,
    compact: bool = False,
    show_topics: bool = True,
) -> str:
    """Render a research area with icon, description, topics, and counts."""
    if compact:
        description = area.short_description or truncate(area.full_description, 120)
    else:
        description = area.full_description or area.short_description
    return _render(
        "research_area_card",
        area=area,
        description=description or "",
        compact=compact,
        show_topics=show_topics,
        topics=area.topics[: 4 if compact else 8],
    )


def render_research_area_list(
    areas: cabc.Sequence[ResearchArea], **options: typ.Any
) -> str:
    return str(
        render_list(
            areas,
            lambda area: render_research_area_card(area, **options),
            empty_message="No research areas found",
        )
    )


__all__ = [
    "render_event_card",
    "render_event_list",
    "render_news_card",
    "render_news_list",
    "render_news_timeline",
    "render_person_card",
    "render_person_list",
    "render_project_card",
    "render_project_detail",
    "render_project_list",
    "render_publication_item",
    "render_publication_list",
    "render_research_area_card",
    "render_research_area_list",
    "render_talk_item",
    "render_talk_list",
]
