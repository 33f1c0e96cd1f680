"""Build the whole site: load the data files, then run every page builder.

:class:`SiteBuilder` is the orchestration point used by ``pages generate``.
It fetches the configured data files through :class:`DataLoader` (in
parallel, on a fresh event loop), decodes them into :class:`LabContent`, and
writes the homepage plus the enabled subpages.

Example
-------
>>> from pathlib import Path
>>> from dmlab_pages.config import load_site_config
>>> builder = SiteBuilder(load_site_config(Path("config/site.yaml")))  # doctest: +SKIP
>>> [path.name for path in builder.run()]  # doctest: +SKIP
['index.html', 'publications.html', 'news.html', 'projects.html']
"""

from __future__ import annotations

import asyncio
import datetime as dt
import typing as typ

from .content import DataLoader, build_lab_content
from .pages import (
    HomePageBuilder,
    NewsPageBuilder,
    PageBuilder,
    ProjectsPageBuilder,
    PublicationsPageBuilder,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import SiteConfig
    from .content import LabContent


class SiteBuilder:
    """Render every configured page of the lab site."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        loader: DataLoader | None = None,
        today: dt.date | None = None,
    ) -> None:
        self.site_config = site_config
        self.templates_dir = templates_dir
        self.loader = loader or DataLoader(site_config.data.source)
        self.today = today or dt.datetime.now(dt.UTC).date()

    async def load_content(self) -> LabContent:
        """Fetch every data file in parallel and decode the collections."""
        files = self.site_config.data.files
        payloads = await self.loader.load_multiple(files.values())
        return build_lab_content(
            {collection: payloads[stem] for collection, stem in files.items()}
        )

    def builders(self, content: LabContent) -> list[PageBuilder]:
        """Return the homepage builder followed by the enabled subpages."""
        config = self.site_config
        templates_dir = self.templates_dir
        selected: list[PageBuilder] = [
            HomePageBuilder(
                config, content, templates_dir=templates_dir, today=self.today
            )
        ]
        for page in config.pages:
            match page:
                case "publications":
                    selected.append(
                        PublicationsPageBuilder(
                            config, content, templates_dir=templates_dir
                        )
                    )
                case "news":
                    selected.append(
                        NewsPageBuilder(
                            config, content, templates_dir=templates_dir, today=self.today
                        )
                    )
                case "projects":
                    selected.append(
                        ProjectsPageBuilder(config, content, templates_dir=templates_dir)
                    )
                case _:
                    msg = f"Unknown page '{page}'."
                    raise ValueError(msg)
        return selected

    def run(self) -> list[Path]:
        """Build the site and return the written paths in build order."""
        content = asyncio.run(self.load_content())
        return [builder.run() for builder in self.builders(content)]


__all__ = ["SiteBuilder"]
