"""HTML rendering: the shared Jinja environment and card/list renderers."""

from .cards import (
    render_event_card,
    render_event_list,
    render_news_card,
    render_news_list,
    render_news_timeline,
    render_person_card,
    render_person_list,
    render_project_card,
    render_project_detail,
    render_project_list,
    render_publication_item,
    render_publication_list,
    render_research_area_card,
    render_research_area_list,
    render_talk_item,
    render_talk_list,
)
from .environment import (
    build_environment,
    default_environment,
    render_escaped_markdown,
    render_markdown,
)
from .helpers import (
    filter_by_query,
    format_date,
    get_nested_value,
    group_by,
    initials,
    render_list,
    sort_by,
    truncate,
)

__all__ = [
    "build_environment",
    "default_environment",
    "filter_by_query",
    "format_date",
    "get_nested_value",
    "group_by",
    "initials",
    "render_event_card",
    "render_event_list",
    "render_escaped_markdown",
    "render_list",
    "render_markdown",
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
    "sort_by",
    "truncate",
]
