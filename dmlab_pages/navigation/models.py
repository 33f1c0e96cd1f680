"""Value types shared by the panel navigation controller and its adapters."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .._constants import (
    DEFAULT_PANEL_LABELS,
    FRAME_INTERVAL_SECONDS,
    MOBILE_BREAKPOINT,
    MOMENTUM_EASE,
    MOMENTUM_SETTLE_PX,
    RESIZE_DEBOUNCE_SECONDS,
)

if typ.TYPE_CHECKING:
    from ..config.models import NavigationConfig


@dc.dataclass(slots=True, frozen=True)
class Panel:
    """A full-viewport section; ``id`` links indicators and sidebar links."""

    index: int
    id: str
    label: str | None = None


@dc.dataclass(slots=True, frozen=True)
class ScrollState:
    """Navigation state derived from one observation of the scroll surface.

    Instances are never cached by the controller; each observation re-reads
    the live offset and dimensions.
    """

    raw_offset: float
    viewport_width: float
    total_scrollable_width: float
    panel_count: int
    current_panel_index: int
    progress_fraction: float

    @property
    def progress_percent(self) -> float:
        return self.progress_fraction * 100


@dc.dataclass(slots=True)
class NavigationIndicator:
    """A navigation dot bound to one panel.

    ``click`` asks the owning controller to scroll to the indicator's panel.
    """

    index: int
    panel_id: str
    label: str
    active: bool = False
    on_click: typ.Callable[[int], None] | None = dc.field(
        default=None, repr=False, compare=False
    )

    def click(self) -> None:
        if self.on_click is not None:
            self.on_click(self.index)


@dc.dataclass(slots=True, frozen=True)
class NavigationOptions:
    """Tuning values for a :class:`PanelNavigationController`."""

    mobile_breakpoint: int = MOBILE_BREAKPOINT
    momentum: bool = False
    ease: float = MOMENTUM_EASE
    settle_px: float = MOMENTUM_SETTLE_PX
    frame_interval: float = FRAME_INTERVAL_SECONDS
    resize_debounce: float = RESIZE_DEBOUNCE_SECONDS
    fallback_labels: tuple[str, ...] = DEFAULT_PANEL_LABELS

    @classmethod
    def from_config(
        cls, config: NavigationConfig, *, momentum: bool | None = None
    ) -> NavigationOptions:
        """Build options from the site's navigation section.

        ``momentum`` overrides the configured flag when given.
        """
        return cls(
            mobile_breakpoint=config.mobile_breakpoint,
            momentum=config.momentum if momentum is None else momentum,
            ease=config.ease,
            resize_debounce=config.resize_debounce,
            fallback_labels=tuple(config.labels),
        )


__all__ = [
    "NavigationIndicator",
    "NavigationOptions",
    "Panel",
    "ScrollState",
]
