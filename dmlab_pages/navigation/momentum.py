"""Wheel strategies: direct offset updates or eased momentum scrolling.

The momentum strategy keeps a target offset and eases the displayed offset
toward it once per animation frame. Only one frame is ever pending; a new
wheel delta cancels it before scheduling the next.
"""

from __future__ import annotations

import typing as typ

from .._constants import FRAME_INTERVAL_SECONDS, MOMENTUM_EASE, MOMENTUM_SETTLE_PX

if typ.TYPE_CHECKING:
    from .surface import Scheduler, ScrollSurface, TimerHandle


class WheelStrategy(typ.Protocol):
    def apply(self, delta: float) -> None: ...

    def cancel(self) -> None: ...


class DirectWheel:
    """Add each wheel delta to the container offset immediately."""

    def __init__(self, container: ScrollSurface) -> None:
        self.container = container

    def apply(self, delta: float) -> None:
        self.container.scroll_left = self.container.scroll_left + delta

    def cancel(self) -> None:
        """Nothing is ever pending."""


class MomentumWheel:
    """Ease the container offset toward an accumulated, clamped target."""

    def __init__(
        self,
        container: ScrollSurface,
        scheduler: Scheduler,
        *,
        ease: float = MOMENTUM_EASE,
        settle_px: float = MOMENTUM_SETTLE_PX,
        frame_interval: float = FRAME_INTERVAL_SECONDS,
    ) -> None:
        self.container = container
        self.scheduler = scheduler
        self.ease = ease
        self.settle_px = settle_px
        self.frame_interval = frame_interval
        self.current = float(container.scroll_left)
        self.target = self.current
        self._frame: TimerHandle | None = None

    @property
    def animating(self) -> bool:
        return self._frame is not None

    @property
    def max_offset(self) -> float:
        return max(0.0, self.container.scroll_width - self.container.client_width)

    def apply(self, delta: float) -> None:
        if self._frame is None:
            # Idle: other inputs may have moved the container since the last run.
            self.current = float(self.container.scroll_left)
            self.target = self.current
        self.target = max(0.0, min(self.target + delta, self.max_offset))
        self.cancel()
        self._frame = self.scheduler.call_later(self.frame_interval, self._step)

    def cancel(self) -> None:
        if self._frame is not None:
            self._frame.cancel()
            self._frame = None

    def _step(self) -> None:
        self._frame = None
        self.current += (self.target - self.current) * self.ease
        if abs(self.target - self.current) > self.settle_px:
            self.container.scroll_left = self.current
            self._frame = self.scheduler.call_later(self.frame_interval, self._step)
            return
        self.current = self.target
        self.container.scroll_left = self.current


__all__ = ["DirectWheel", "MomentumWheel", "WheelStrategy"]
