"""Publications page: year and type filters over a list grouped by year."""

from __future__ import annotations

import typing as typ

from markupsafe import Markup

from ..publications import (
    PublicationFilters,
    apply_filters,
    group_by_year,
    type_options,
    year_options,
)
from ..render import render_publication_list
from .base import PageBuilder

if typ.TYPE_CHECKING:
    from pathlib import Path

    from ..config import SiteConfig
    from ..content import LabContent


class PublicationsPageBuilder(PageBuilder):
    """Render the publications page.

    Every publication is rendered, grouped by year with the newest year
    first; the year and type ``<select>`` options cover the full list so a
    client script can filter the cards through their ``data-*`` attributes.
    ``filters`` narrows the rendered list at build time.
    """

    template_name = "publications_page.jinja"
    page = "publications"

    def __init__(
        self,
        site_config: SiteConfig,
        content: LabContent,
        *,
        templates_dir: Path | None = None,
        filters: PublicationFilters | None = None,
    ) -> None:
        super().__init__(site_config, content, templates_dir=templates_dir)
        self.filters = filters or PublicationFilters()

    def page_context(self) -> dict[str, object]:
        publications = self.content.publications
        selected = apply_filters(publications, self.filters)
        groups = [
            (year, Markup(render_publication_list(items)))
            for year, items in group_by_year(selected).items()
        ]
        return {
            "filters": self.filters,
            "years": year_options(publications),
            "types": type_options(publications),
            "groups": groups,
            "shown_count": len(selected),
            "total_count": len(publications),
        }


__all__ = ["PublicationsPageBuilder"]
