"""Projects page: detail entries for every project in curated order."""

from __future__ import annotations

from markupsafe import Markup

from ..render import render_project_list
from ..render.icons import PROJECT_STATUS_BADGES
from .base import PageBuilder


class ProjectsPageBuilder(PageBuilder):
    """Render the projects page, keeping the order of ``projects.json``."""

    template_name = "projects_page.jinja"
    page = "projects"

    def page_context(self) -> dict[str, object]:
        projects = self.content.projects
        counts = {
            status: sum(1 for project in projects if project.status == status)
            for status in PROJECT_STATUS_BADGES
        }
        return {
            "projects_html": Markup(render_project_list(projects, detail=True)),
            "status_counts": {
                PROJECT_STATUS_BADGES[status].label: count
                for status, count in counts.items()
                if count
            },
            "project_count": len(projects),
        }


__all__ = ["ProjectsPageBuilder"]
