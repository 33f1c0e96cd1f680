"""Collaborator interfaces for the navigation controller.

The controller never touches a rendering toolkit directly. It drives a scroll
container and a window through the small protocols below and pushes derived
state into optional chrome (progress bar, sidebar links, indicator host).
Anything that satisfies these shapes works: the in-memory surfaces in
:mod:`dmlab_pages.navigation.virtual`, or an adapter over a real view.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import NavigationIndicator

Listener = typ.Callable[[typ.Any], None]


class TimerHandle(typ.Protocol):
    def cancel(self) -> None: ...


class Scheduler(typ.Protocol):
    """Deferred-callback source; an ``asyncio`` event loop satisfies it."""

    def call_later(
        self, delay: float, callback: typ.Callable[[], object], /
    ) -> TimerHandle: ...


class EventSource(typ.Protocol):
    def add_event_listener(self, event_type: str, listener: Listener) -> None: ...

    def remove_event_listener(self, event_type: str, listener: Listener) -> None: ...


class WindowSurface(EventSource, typ.Protocol):
    """Viewport that emits ``keydown`` and ``resize`` events."""

    @property
    def inner_width(self) -> float: ...


class ScrollSurface(EventSource, typ.Protocol):
    """Horizontally scrolling container.

    Emits ``scroll``, ``wheel``, ``touchstart`` and ``touchmove`` events.
    """

    scroll_left: float

    @property
    def scroll_width(self) -> float: ...

    @property
    def client_width(self) -> float: ...

    def scroll_to(self, left: float, *, smooth: bool = True) -> None: ...


class ProgressBar(typ.Protocol):
    width_percent: float


class SidebarLink(typ.Protocol):
    panel_id: str | None
    active: bool


class IndicatorHost(typ.Protocol):
    def add_indicators(
        self, indicators: cabc.Sequence[NavigationIndicator]
    ) -> None: ...


class PageChrome(typ.Protocol):
    """Scroll hint and navbar flags toggled by the scroll offset."""

    scroll_hint_hidden: bool
    navbar_scrolled: bool


class EventTarget:
    """Listener registry with synchronous dispatch.

    Listeners run in registration order. Registering the same listener twice
    for one event type is ignored, as in the browser.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[Listener]] = {}

    def add_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.setdefault(event_type, [])
        if listener not in listeners:
            listeners.append(listener)

    def remove_event_listener(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type, [])
        if listener in listeners:
            listeners.remove(listener)

    def dispatch(self, event_type: str, event: object | None = None) -> None:
        for listener in list(self._listeners.get(event_type, ())):
            listener(event)

    def listener_count(self, event_type: str | None = None) -> int:
        """Return how many listeners are registered, optionally for one type."""
        if event_type is not None:
            return len(self._listeners.get(event_type, ()))
        return sum(len(listeners) for listeners in self._listeners.values())


__all__ = [
    "EventSource",
    "EventTarget",
    "IndicatorHost",
    "Listener",
    "PageChrome",
    "ProgressBar",
    "Scheduler",
    "ScrollSurface",
    "SidebarLink",
    "TimerHandle",
    "WindowSurface",
]
