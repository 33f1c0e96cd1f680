"""Shared plumbing for the page builders.

Each builder renders one Jinja template into one HTML file under the
configured output directory. Subclasses name the template and output page
and supply the page-specific context; this base adds the site metadata,
navigation links, and relative URLs every page needs.
"""

from __future__ import annotations

import datetime as dt
import os
import typing as typ
from pathlib import Path

from ..render.environment import build_environment, default_environment

if typ.TYPE_CHECKING:
    from jinja2 import Environment

    from ..config import NavLinkConfig, SiteConfig
    from ..content import LabContent

PAGE_KEYS = ("home", "publications", "news", "projects")


def relative_href(from_page: Path, to_page: Path) -> str:
    """Return a POSIX href from the file ``from_page`` to ``to_page``.

    >>> relative_href(Path("public/pages/news.html"), Path("public/index.html"))
    '../index.html'
    """
    return Path(os.path.relpath(to_page, from_page.parent)).as_posix()


class PageBuilder:
    """Render one page of the site from configuration and content."""

    template_name: typ.ClassVar[str]
    page: typ.ClassVar[str]

    def __init__(
        self,
        site_config: SiteConfig,
        content: LabContent,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        self.site_config = site_config
        self.content = content
        self.env: Environment = (
            default_environment()
            if templates_dir is None
            else build_environment(templates_dir)
        )
        self.template = self.env.get_template(self.template_name)

    @property
    def output_path(self) -> Path:
        return self.site_config.output.path_for(self.page)

    def href_to(self, page: str) -> str:
        """Return the relative link from this page to another site page."""
        return relative_href(
            self.output_path, self.site_config.output.path_for(page)
        )

    def asset_root(self) -> str:
        """Return the prefix that reaches the output root from this page."""
        depth = len(
            self.output_path.relative_to(self.site_config.output.output_dir).parts
        )
        return "../" * (depth - 1)

    def nav_link_href(self, link: NavLinkConfig) -> str:
        if link.external or link.href.startswith(("#", "mailto:", "http")):
            return link.href
        return self.asset_root() + link.href

    def page_context(self) -> dict[str, object]:
        """Return the template variables specific to this page."""
        raise NotImplementedError

    def render(self) -> str:
        context: dict[str, object] = {
            "site": self.site_config.site,
            "nav_links": [
                (link, self.nav_link_href(link))
                for link in self.site_config.nav_links
            ],
            "page_links": self._page_links(),
            "asset_root": self.asset_root(),
            "current_page": self.page,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        context.update(self.page_context())
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def _page_links(self) -> dict[str, str]:
        enabled = {"home", *self.site_config.pages}
        return {page: self.href_to(page) for page in PAGE_KEYS if page in enabled}

    def run(self) -> Path:
        """Render the page and write it as UTF-8, returning the output path."""
        output_path = self.output_path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = ["PAGE_KEYS", "PageBuilder", "relative_href"]
