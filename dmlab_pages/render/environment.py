"""Jinja environment shared by the card renderers and page builders."""

from __future__ import annotations

import functools
import json
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import markdown
from markupsafe import Markup, escape

from ..publications import generate_bibtex, publication_kind, search_text
from .helpers import format_date, initials, truncate
from .icons import (
    icon,
    news_badge,
    project_type_badge,
    publication_badge,
    status_badge,
)

TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"
_MARKDOWN_EXTENSIONS = ["sane_lists", "tables", "fenced_code"]


def render_markdown(text: str | None) -> Markup:
    """Render trusted Markdown copy from the site config."""
    normalized = (text or "").strip()
    if not normalized:
        return Markup("")
    return Markup(
        markdown(normalized, extensions=_MARKDOWN_EXTENSIONS, output_format="html5")
    )


def render_escaped_markdown(text: str | None) -> Markup:
    """Render Markdown from the data files with any raw HTML escaped first."""
    return render_markdown(str(escape(text or "")))


def _to_json(value: object) -> str:
    return json.dumps(value, ensure_ascii=False)


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return a Jinja environment with the site's filters and globals."""
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml", "jinja"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters.update(
        {
            "truncate_text": truncate,
            "format_date": format_date,
            "initials": initials,
            "markdown": render_markdown,
            "data_markdown": render_escaped_markdown,
            "bibtex": generate_bibtex,
            "publication_kind": publication_kind,
            "search_text": search_text,
            "to_json": _to_json,
        }
    )
    env.globals.update(
        {
            "icon": icon,
            "news_badge": news_badge,
            "status_badge": status_badge,
            "project_type_badge": project_type_badge,
            "publication_badge": publication_badge,
        }
    )
    return env


@functools.cache
def default_environment() -> Environment:
    """Return the process-wide environment for the packaged templates."""
    return build_environment()


__all__ = [
    "TEMPLATES_DIR",
    "build_environment",
    "default_environment",
    "render_escaped_markdown",
    "render_markdown",
]
