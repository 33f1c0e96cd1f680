"""News page: latest news, events and talks widgets, and a monthly timeline."""

from __future__ import annotations

import datetime as dt
import typing as typ

from markupsafe import Markup

from ..content.queries import (
    events_in_date_order,
    recent_talks,
    sort_news,
    upcoming_events,
)
from ..render import (
    render_event_list,
    render_news_list,
    render_news_timeline,
    render_talk_list,
)
from .base import PageBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path

    from ..config import SiteConfig
    from ..content import LabContent


class NewsPageBuilder(PageBuilder):
    """Render the news page.

    ``today`` decides which events count as upcoming; it defaults to the
    current UTC date and is injectable so builds are reproducible.
    """

    template_name = "news_page.jinja"
    page = "news"

    def __init__(
        self,
        site_config: SiteConfig,
        content: LabContent,
        *,
        templates_dir: Path | None = None,
        today: dt.date | None = None,
    ) -> None:
        super().__init__(site_config, content, templates_dir=templates_dir)
        self.today = today or dt.datetime.now(dt.UTC).date()

    def page_context(self) -> dict[str, object]:
        content = self.content
        limit = self.site_config.news.widget_limit
        author = self.site_config.news.default_author
        news = sort_news(content.news)
        return {
            "news_html": Markup(render_news_list(news, default_author=author)),
            "timeline_html": Markup(
                render_news_timeline(news, compact=True, default_author=author)
            ),
            "upcoming_html": Markup(
                render_event_list(
                    upcoming_events(content.events, today=self.today, limit=limit),
                    today=self.today,
                    empty_message="No upcoming events.",
                )
            ),
            "recent_talks_html": Markup(
                render_talk_list(
                    recent_talks(content.talks, limit=limit),
                    empty_message="No recent talks.",
                )
            ),
            "events_html": Markup(
                render_event_list(
                    events_in_date_order(content.events), today=self.today
                )
            ),
            "talks_html": Markup(
                render_talk_list(recent_talks(content.talks, limit=None))
            ),
        }


__all__ = ["NewsPageBuilder"]
