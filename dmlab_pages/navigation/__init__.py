"""Headless panel navigation for the horizontally scrolling homepage.

The subpackage models the homepage's panel navigation independently of any
rendering toolkit: a pure scroll-state reader, input adapters for wheel,
touch, and keyboard events, navigation indicators synchronised with sidebar
links, an optional momentum wheel strategy, and the
:class:`PanelNavigationController` that ties them together over an injected
scroll surface and scheduler.
"""

from .controller import PanelNavigationController
from .events import KeyEvent, TouchEvent, WheelEvent
from .indicators import indicator_label
from .models import NavigationIndicator, NavigationOptions, Panel, ScrollState
from .momentum import DirectWheel, MomentumWheel
from .scroll_state import read_scroll_state
from .surface import EventTarget, Scheduler, ScrollSurface, WindowSurface
from .timing import Debouncer
from .virtual import (
    VirtualChrome,
    VirtualIndicatorHost,
    VirtualProgressBar,
    VirtualScrollContainer,
    VirtualSidebarLink,
    VirtualWindow,
)

__all__ = [
    "Debouncer",
    "DirectWheel",
    "EventTarget",
    "KeyEvent",
    "MomentumWheel",
    "NavigationIndicator",
    "NavigationOptions",
    "Panel",
    "PanelNavigationController",
    "ScrollState",
    "ScrollSurface",
    "Scheduler",
    "TouchEvent",
    "VirtualChrome",
    "VirtualIndicatorHost",
    "VirtualProgressBar",
    "VirtualScrollContainer",
    "VirtualSidebarLink",
    "VirtualWindow",
    "WheelEvent",
    "WindowSurface",
    "indicator_label",
    "read_scroll_state",
]
