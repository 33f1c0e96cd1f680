"""Translate wheel, touch, and keyboard events into scroll requests.

Wheel and keyboard input is only handled above the mobile breakpoint; below
it the platform's native vertical scrolling takes over. Touch start is always
recorded, but touch moves are likewise ignored at mobile widths.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from .events import KeyEvent, TouchEvent, WheelEvent
    from .momentum import WheelStrategy
    from .surface import ScrollSurface, WindowSurface


class PanelNavigator(typ.Protocol):
    @property
    def panel_count(self) -> int: ...

    def scroll_to_panel(self, index: int) -> None: ...

    def scroll_to_next(self) -> None: ...

    def scroll_to_previous(self) -> None: ...


def is_desktop(window: WindowSurface, mobile_breakpoint: int) -> bool:
    """Return True when the window is wider than the mobile breakpoint."""
    return window.inner_width > mobile_breakpoint


class WheelInput:
    """Turn vertical (or horizontal) wheel deltas into horizontal scrolling."""

    def __init__(
        self,
        window: WindowSurface,
        strategy: WheelStrategy,
        *,
        mobile_breakpoint: int,
    ) -> None:
        self.window = window
        self.strategy = strategy
        self.mobile_breakpoint = mobile_breakpoint

    def handle(self, event: WheelEvent) -> None:
        if not is_desktop(self.window, self.mobile_breakpoint):
            return
        event.prevent_default()
        self.strategy.apply(event.delta_y or event.delta_x)


@dc.dataclass(slots=True)
class _TouchOrigin:
    x: float
    y: float
    offset: float


class TouchInput:
    """Follow horizontal-dominant swipes from where the touch started."""

    def __init__(
        self,
        window: WindowSurface,
        container: ScrollSurface,
        *,
        mobile_breakpoint: int,
    ) -> None:
        self.window = window
        self.container = container
        self.mobile_breakpoint = mobile_breakpoint
        self._origin = _TouchOrigin(0.0, 0.0, 0.0)

    def handle_start(self, event: TouchEvent) -> None:
        self._origin = _TouchOrigin(
            event.client_x, event.client_y, self.container.scroll_left
        )

    def handle_move(self, event: TouchEvent) -> None:
        if not is_desktop(self.window, self.mobile_breakpoint):
            return
        delta_x = self._origin.x - event.client_x
        delta_y = self._origin.y - event.client_y
        if abs(delta_x) > abs(delta_y):
            self.container.scroll_left = self._origin.offset + delta_x


class KeyboardInput:
    """Arrow keys step between panels; Home and End jump to the ends."""

    def __init__(
        self,
        window: WindowSurface,
        navigator: PanelNavigator,
        *,
        mobile_breakpoint: int,
    ) -> None:
        self.window = window
        self.navigator = navigator
        self.mobile_breakpoint = mobile_breakpoint

    def handle(self, event: KeyEvent) -> None:
        if not is_desktop(self.window, self.mobile_breakpoint):
            return
        match event.key:
            case "ArrowRight":
                event.prevent_default()
                self.navigator.scroll_to_next()
            case "ArrowLeft":
                event.prevent_default()
                self.navigator.scroll_to_previous()
            case "Home":
                event.prevent_default()
                self.navigator.scroll_to_panel(0)
            case "End":
                event.prevent_default()
                self.navigator.scroll_to_panel(self.navigator.panel_count - 1)
            case _:
                return


__all__ = ["KeyboardInput", "PanelNavigator", "TouchInput", "WheelInput", "is_desktop"]
