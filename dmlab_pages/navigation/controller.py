"""Panel navigation controller for the horizontally scrolling homepage.

The controller owns the input adapters for one scroll container, keeps the
progress bar, navigation dots, sidebar links, and page chrome in sync with
the container's offset, and exposes programmatic navigation between panels.

All state is re-derived from the live surface on every observation; the only
mutable state kept here is the momentum target and the pending timers. Work
is scheduled on a single-threaded :class:`Scheduler` (an ``asyncio`` loop in
production, a manual clock in tests).

Examples
--------
>>> from dmlab_pages.navigation.virtual import VirtualScrollContainer, VirtualWindow
>>> window = VirtualWindow(1000)
>>> container = VirtualScrollContainer(window, panel_count=8)
>>> panels = [Panel(index=i, id=f"p{i}") for i in range(8)]
>>> controller = PanelNavigationController(container, panels, window=window)
>>> controller.scroll_to_panel(3)
>>> controller.current_panel_index()
3
>>> controller.destroy()
"""

from __future__ import annotations

import typing as typ

from .._constants import NAVBAR_SCROLLED_THRESHOLD_PX, SCROLL_HINT_THRESHOLD_PX
from .indicators import build_indicators, sync_indicators, sync_sidebar_links
from .inputs import KeyboardInput, TouchInput, WheelInput, is_desktop
from .models import NavigationOptions, Panel, ScrollState
from .momentum import DirectWheel, MomentumWheel
from .scroll_state import read_scroll_state
from .timing import Debouncer

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .events import KeyEvent, TouchEvent, WheelEvent
    from .models import NavigationIndicator
    from .momentum import WheelStrategy
    from .surface import (
        EventSource,
        IndicatorHost,
        Listener,
        PageChrome,
        ProgressBar,
        Scheduler,
        ScrollSurface,
        SidebarLink,
        WindowSurface,
    )


class PanelNavigationController:
    """Drive panel navigation over a scroll container and window.

    Parameters
    ----------
    container : ScrollSurface or None
        The scroll container. ``None`` disables the controller: nothing is
        registered and every operation is a no-op.
    panels : Sequence[Panel]
        Panels in display order; each ``index`` must equal its position.
    window : WindowSurface
        Supplies the viewport width and emits ``keydown`` and ``resize``.
    scheduler : Scheduler, optional
        Runs the resize debounce and momentum frames. Without one, resizes
        update immediately and momentum is unavailable.
    progress_bar, sidebar_links, indicator_host, chrome : optional
        Page elements kept in sync with the offset. Absent elements are
        skipped.
    options : NavigationOptions, optional
        Breakpoint, momentum, and timing values.

    Raises
    ------
    ValueError
        If a panel index does not match its position, or if momentum is
        enabled without a scheduler.
    """

    def __init__(  # noqa: PLR0913
        self,
        container: ScrollSurface | None,
        panels: cabc.Sequence[Panel],
        *,
        window: WindowSurface,
        scheduler: Scheduler | None = None,
        progress_bar: ProgressBar | None = None,
        sidebar_links: cabc.Sequence[SidebarLink] = (),
        indicator_host: IndicatorHost | None = None,
        chrome: PageChrome | None = None,
        options: NavigationOptions | None = None,
    ) -> None:
        self.container = container
        self.window = window
        self.panels = tuple(panels)
        for position, panel in enumerate(self.panels):
            if panel.index != position:
                msg = (
                    f"Panel {panel.id!r} has index {panel.index} "
                    f"but is at position {position}."
                )
                raise ValueError(msg)
        self.scheduler = scheduler
        self.progress_bar = progress_bar
        self.sidebar_links = tuple(sidebar_links)
        self.indicator_host = indicator_host
        self.chrome = chrome
        self.options = options or NavigationOptions()
        self.indicators: list[NavigationIndicator] = []
        self._registered: list[tuple[EventSource, str, Listener]] = []
        self._destroyed = False

        if container is None:
            return

        self._wheel_strategy = self._build_wheel_strategy(container)
        breakpoint_px = self.options.mobile_breakpoint
        self._wheel = WheelInput(
            window, self._wheel_strategy, mobile_breakpoint=breakpoint_px
        )
        self._touch = TouchInput(window, container, mobile_breakpoint=breakpoint_px)
        self._keyboard = KeyboardInput(window, self, mobile_breakpoint=breakpoint_px)
        self._resize = Debouncer(
            scheduler, self.options.resize_debounce, self.update_progress
        )

        self._listen(container, "wheel", self.handle_wheel)
        self._listen(container, "touchstart", self.handle_touch_start)
        self._listen(container, "touchmove", self.handle_touch_move)
        self._listen(container, "scroll", self.handle_scroll)
        self._listen(window, "keydown", self.handle_key)
        self._listen(window, "resize", self.handle_resize)

        self._create_indicators()
        self.update_progress()

    def _build_wheel_strategy(self, container: ScrollSurface) -> WheelStrategy:
        if not self.options.momentum:
            return DirectWheel(container)
        if self.scheduler is None:
            msg = "Momentum scrolling requires a scheduler for animation frames."
            raise ValueError(msg)
        return MomentumWheel(
            container,
            self.scheduler,
            ease=self.options.ease,
            settle_px=self.options.settle_px,
            frame_interval=self.options.frame_interval,
        )

    def _listen(self, target: EventSource, event_type: str, listener: Listener) -> None:
        target.add_event_listener(event_type, listener)
        self._registered.append((target, event_type, listener))

    def _create_indicators(self) -> None:
        if not is_desktop(self.window, self.options.mobile_breakpoint):
            return
        self.indicators = build_indicators(
            self.panels, self.options.fallback_labels, self.scroll_to_panel
        )
        if self.indicator_host is not None:
            self.indicator_host.add_indicators(self.indicators)

    @property
    def enabled(self) -> bool:
        return self.container is not None and not self._destroyed

    @property
    def panel_count(self) -> int:
        return len(self.panels)

    @property
    def state(self) -> ScrollState:
        """Return the navigation state read from the live surface."""
        viewport = self.window.inner_width
        if self.container is None:
            return read_scroll_state(0, viewport, 0, self.panel_count)
        return read_scroll_state(
            self.container.scroll_left,
            viewport,
            self.container.scroll_width - self.container.client_width,
            self.panel_count,
        )

    def current_panel_index(self) -> int:
        return self.state.current_panel_index

    def scroll_to_panel(self, index: int) -> None:
        """Smooth-scroll to panel ``index``; out-of-range indices do nothing."""
        container = self.container
        if container is None or self._destroyed:
            return
        if not 0 <= index < self.panel_count:
            return
        container.scroll_to(index * self.window.inner_width, smooth=True)

    def scroll_to_next(self) -> None:
        self.scroll_to_panel(self.current_panel_index() + 1)

    def scroll_to_previous(self) -> None:
        self.scroll_to_panel(self.current_panel_index() - 1)

    def update_progress(self) -> ScrollState:
        """Push the current state into the progress bar, indicators, and chrome."""
        state = self.state
        if not self.enabled:
            return state
        if self.progress_bar is not None:
            self.progress_bar.width_percent = state.progress_percent
        if self.panels:
            sync_indicators(self.indicators, state.current_panel_index)
            current_id = self.panels[state.current_panel_index].id
        else:
            current_id = None
        sync_sidebar_links(self.sidebar_links, current_id)
        if self.chrome is not None:
            if state.raw_offset > SCROLL_HINT_THRESHOLD_PX:
                self.chrome.scroll_hint_hidden = True
            self.chrome.navbar_scrolled = state.raw_offset > NAVBAR_SCROLLED_THRESHOLD_PX
        return state

    def handle_wheel(self, event: WheelEvent) -> None:
        if self.enabled:
            self._wheel.handle(event)

    def handle_touch_start(self, event: TouchEvent) -> None:
        if self.enabled:
            self._touch.handle_start(event)

    def handle_touch_move(self, event: TouchEvent) -> None:
        if self.enabled:
            self._touch.handle_move(event)

    def handle_key(self, event: KeyEvent) -> None:
        if self.enabled:
            self._keyboard.handle(event)

    def handle_scroll(self, _event: object | None = None) -> None:
        self.update_progress()

    def handle_resize(self, _event: object | None = None) -> None:
        if self.enabled:
            self._resize.trigger()

    @property
    def momentum_active(self) -> bool:
        if self.container is None:
            return False
        strategy = self._wheel_strategy
        return isinstance(strategy, MomentumWheel) and strategy.animating

    @property
    def resize_pending(self) -> bool:
        return self.container is not None and self._resize.pending

    def destroy(self) -> None:
        """Remove listeners and cancel pending timers; safe to call twice."""
        if self._destroyed:
            return
        self._destroyed = True
        for target, event_type, listener in self._registered:
            target.remove_event_listener(event_type, listener)
        self._registered.clear()
        if self.container is not None:
            self._resize.cancel()
            self._wheel_strategy.cancel()


__all__ = ["PanelNavigationController"]
