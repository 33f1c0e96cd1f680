"""Static site generator for the Data & Media Laboratory website.

This package turns ``config/site.yaml`` and the lab's JSON data files into the
horizontally scrolling homepage and its publications, news, and projects
subpages, and models the homepage's panel navigation headlessly.

Exports
-------
- ``app``: Cyclopts application holding the ``pages`` subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from dmlab_pages import main
>>> callable(main)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
