"""Input event payloads delivered to the navigation adapters."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(slots=True)
class _Cancelable:
    default_prevented: bool = dc.field(default=False, init=False)

    def prevent_default(self) -> None:
        self.default_prevented = True


@dc.dataclass(slots=True)
class WheelEvent(_Cancelable):
    delta_x: float = 0.0
    delta_y: float = 0.0


@dc.dataclass(slots=True)
class KeyEvent(_Cancelable):
    key: str = ""


@dc.dataclass(slots=True)
class TouchEvent:
    """Position of the first touch point."""

    client_x: float
    client_y: float


__all__ = ["KeyEvent", "TouchEvent", "WheelEvent"]
