"""In-memory window and scroll container used for pre-rendering and replay.

The virtual container lays panels out side by side, each one window-width
wide, so ``scroll_width`` tracks the window as it resizes. Offsets are clamped
like a browser clamps ``scrollLeft``, and a ``scroll`` event is dispatched
synchronously whenever the offset actually changes. Smooth scrolling settles
immediately.

Examples
--------
>>> window = VirtualWindow(1000)
>>> container = VirtualScrollContainer(window, panel_count=8)
>>> container.scroll_left = 99999
>>> container.scroll_left
7000
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .surface import EventTarget

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import NavigationIndicator


class VirtualWindow(EventTarget):
    """Window stand-in with a mutable inner width."""

    def __init__(self, inner_width: float) -> None:
        super().__init__()
        self._inner_width = inner_width

    @property
    def inner_width(self) -> float:
        return self._inner_width

    def resize(self, inner_width: float) -> None:
        """Change the width and dispatch ``resize`` to listeners."""
        self._inner_width = inner_width
        self.dispatch("resize")


class VirtualScrollContainer(EventTarget):
    """Scroll container holding ``panel_count`` window-wide panels."""

    def __init__(self, window: VirtualWindow, panel_count: int) -> None:
        super().__init__()
        self.window = window
        self.panel_count = panel_count
        self._scroll_left: float = 0
        self.scroll_requests: list[float] = []

    @property
    def scroll_width(self) -> float:
        return self.panel_count * self.window.inner_width

    @property
    def client_width(self) -> float:
        return self.window.inner_width

    @property
    def max_scroll_left(self) -> float:
        return max(0, self.scroll_width - self.client_width)

    @property
    def scroll_left(self) -> float:
        return self._scroll_left

    @scroll_left.setter
    def scroll_left(self, value: float) -> None:
        clamped = max(0, min(value, self.max_scroll_left))
        if clamped == self._scroll_left:
            return
        self._scroll_left = clamped
        self.dispatch("scroll")

    def scroll_to(self, left: float, *, smooth: bool = True) -> None:  # noqa: ARG002
        """Jump to ``left``; smooth requests settle at once."""
        self.scroll_requests.append(left)
        self.scroll_left = left


@dc.dataclass(slots=True)
class VirtualProgressBar:
    width_percent: float = 0.0


@dc.dataclass(slots=True)
class VirtualSidebarLink:
    panel_id: str | None
    label: str = ""
    active: bool = False


@dc.dataclass(slots=True)
class VirtualChrome:
    scroll_hint_hidden: bool = False
    navbar_scrolled: bool = False


@dc.dataclass(slots=True)
class VirtualIndicatorHost:
    indicators: list[NavigationIndicator] = dc.field(default_factory=list)

    def add_indicators(self, indicators: cabc.Sequence[NavigationIndicator]) -> None:
        self.indicators.extend(indicators)


__all__ = [
    "VirtualChrome",
    "VirtualIndicatorHost",
    "VirtualProgressBar",
    "VirtualScrollContainer",
    "VirtualSidebarLink",
    "VirtualWindow",
]
