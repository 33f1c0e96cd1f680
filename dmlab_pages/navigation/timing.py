"""Trailing-edge debouncing on top of a :class:`Scheduler`."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from .surface import Scheduler, TimerHandle


class Debouncer:
    """Run ``callback`` once, ``delay`` seconds after the last trigger.

    Without a scheduler the callback runs synchronously on every trigger.
    """

    def __init__(
        self,
        scheduler: Scheduler | None,
        delay: float,
        callback: typ.Callable[[], object],
    ) -> None:
        self.scheduler = scheduler
        self.delay = delay
        self.callback = callback
        self._handle: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self) -> None:
        if self.scheduler is None:
            self.callback()
            return
        self.cancel()
        self._handle = self.scheduler.call_later(self.delay, self._fire)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self.callback()


__all__ = ["Debouncer"]
