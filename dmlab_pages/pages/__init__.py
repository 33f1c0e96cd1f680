"""Page builders that write the site's HTML files."""

from .base import PAGE_KEYS, PageBuilder, relative_href
from .home import HomePageBuilder, NavigationSnapshot, navigation_panels
from .news import NewsPageBuilder
from .projects import ProjectsPageBuilder
from .publications import PublicationsPageBuilder

__all__ = [
    "PAGE_KEYS",
    "HomePageBuilder",
    "NavigationSnapshot",
    "NewsPageBuilder",
    "PageBuilder",
    "ProjectsPageBuilder",
    "PublicationsPageBuilder",
    "navigation_panels",
    "relative_href",
]
