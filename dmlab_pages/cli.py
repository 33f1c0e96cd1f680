"""Cyclopts CLI entrypoint for building and exercising the lab website.

The ``pages`` console script renders the static site from
``config/site.yaml`` and the JSON data files, replays scripted input through
the homepage's panel navigation controller, and exports publications as
BibTeX. Typical usage runs ``pages generate`` locally or in CI and
``pages bibtex --year 2024`` when assembling reports.

Examples
--------
Build the full site with the default configuration:

>>> from dmlab_pages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory:

>>> from dmlab_pages.cli import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .content import DataLoader, parse_date
from .content.parsing import parse_publications
from .navigation import NavigationOptions
from .navigation.replay import load_script, replay_script
from .pages import navigation_panels
from .publications import PublicationFilters, apply_filters, export_bibtex
from .site import SiteBuilder

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate the static site from the site config and data files.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    data_source: typ.Annotated[
        str | None,
        Parameter(
            help="Override the data directory or base URL",
            env_var="INPUT_DATA_SOURCE",
        ),
    ] = None,
    today: typ.Annotated[
        str | None,
        Parameter(
            help="Reference date (YYYY-MM-DD) for upcoming events",
            env_var="INPUT_TODAY",
        ),
    ] = None,
) -> None:
    """Render the homepage and every enabled subpage.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Replace the configured output directory.
    data_source : str or None, optional
        Replace the configured data directory or ``http(s)://`` base URL.
    today : str or None, optional
        Date that splits upcoming from past events; defaults to today (UTC).

    Returns
    -------
    None
        Writes the rendered pages and prints one ``wrote <path>`` line each.
    """
    site_config = load_site_config(config)
    if output_dir is not None:
        site_config.output = dc.replace(site_config.output, output_dir=output_dir)
    if data_source:
        source: Path | str = (
            data_source
            if data_source.startswith(("http://", "https://"))
            else Path(data_source)
        )
        site_config.data = dc.replace(site_config.data, source=source)
    reference = parse_date(today, field="today") if today else None
    for path in SiteBuilder(site_config, today=reference).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Replay a scripted input sequence through the panel navigation.")
def navigate(
    *,
    script: typ.Annotated[
        Path, Parameter(help="YAML list of input steps", env_var="INPUT_SCRIPT")
    ],
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    viewport_width: typ.Annotated[
        int | None,
        Parameter(help="Window width in pixels", env_var="INPUT_VIEWPORT_WIDTH"),
    ] = None,
    momentum: typ.Annotated[
        bool | None,
        Parameter(help="Force momentum wheel scrolling on or off"),
    ] = None,
) -> None:
    """Replay ``script`` against the configured panels and print each state.

    The replay runs on an ``asyncio`` event loop that also schedules the
    resize debounce and momentum animation frames, so ``wait`` steps let
    pending timers fire.
    """
    site_config = load_site_config(config)
    options = NavigationOptions.from_config(site_config.navigation, momentum=momentum)
    width = viewport_width or site_config.navigation.viewport_width
    records = asyncio.run(
        replay_script(
            load_script(script),
            panels=navigation_panels(site_config.panels),
            viewport_width=width,
            options=options,
        )
    )
    for record in records:
        print(record.line())


@app.command(help="Export publications as BibTeX, optionally filtered.")
def bibtex(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    year: typ.Annotated[
        int | None, Parameter(help="Only this publication year")
    ] = None,
    type: typ.Annotated[  # noqa: A002
        str | None, Parameter(help="Only this publication type label")
    ] = None,
    search: typ.Annotated[
        str, Parameter(help="Case-insensitive text search")
    ] = "",
    output: typ.Annotated[
        Path | None, Parameter(help="Write to this file instead of stdout")
    ] = None,
) -> None:
    """Print or write the BibTeX entries of the matching publications."""
    site_config = load_site_config(config)
    loader = DataLoader(site_config.data.source)
    payload = asyncio.run(loader.load(site_config.data.files["publications"]))
    selected = apply_filters(
        parse_publications(payload),
        PublicationFilters(year=year, type=type, search=search),
    )
    text = export_bibtex(selected)
    if output is None:
        print(text, end="")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    print(f"wrote {_format_path(output)}")


def main() -> None:
    """Invoke the Cyclopts app when executed as a script."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
