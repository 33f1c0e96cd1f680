"""Common literal values used across dmlab_pages.

These constants keep data filenames, navigation tuning values, and fallback
labels centralized so the config loader, page builders, the navigation
controller, and tests can import the same values without drifting. Intended
for internal use within the dmlab_pages package.

Examples
--------
>>> from dmlab_pages import _constants
>>> _constants.DATA_FILE_TEMPLATE.format(name="team")
'team.json'
>>> _constants.MOBILE_BREAKPOINT
768
"""

DATA_FILE_TEMPLATE = "{name}.json"

DATA_FILES = {
    "team": "team",
    "projects": "projects",
    "publications": "publications",
    "news": "news",
    "research": "research",
}

MOBILE_BREAKPOINT = 768
RESIZE_DEBOUNCE_SECONDS = 0.25
FRAME_INTERVAL_SECONDS = 1 / 60
MOMENTUM_EASE = 0.075
MOMENTUM_SETTLE_PX = 0.5
SCROLL_HINT_THRESHOLD_PX = 50
NAVBAR_SCROLLED_THRESHOLD_PX = 100
DEFAULT_VIEWPORT_WIDTH = 1440

DEFAULT_PANEL_LABELS = (
    "Home",
    "About Us",
    "Partners",
    "Research",
    "Projects",
    "Team",
    "Publications",
    "Contact",
)

DEFAULT_NEWS_AUTHOR = "DM Lab"
WIDGET_LIMIT = 3
