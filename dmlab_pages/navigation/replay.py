"""Replay scripted input against a controller on a virtual surface.

A replay script is a YAML list of single-key steps::

    - wheel: 480            # vertical delta; or {dx: 0, dy: 480}
    - touch: {from: [600, 300], to: [200, 310]}
    - key: End
    - resize: 1200          # new window width in pixels
    - panel: 3              # scroll_to_panel(3)
    - click: 5              # click navigation dot 5
    - wait: 0.3             # let timers (debounce, momentum) run

:func:`replay_script` runs the steps on the running ``asyncio`` loop, which
serves as the controller's scheduler, and records the derived state after
each step. The ``pages navigate`` command prints those records.
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import typing as typ

from ruamel.yaml import YAML

from .controller import PanelNavigationController
from .events import KeyEvent, TouchEvent, WheelEvent
from .virtual import (
    VirtualChrome,
    VirtualIndicatorHost,
    VirtualProgressBar,
    VirtualScrollContainer,
    VirtualWindow,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .models import NavigationOptions, Panel, ScrollState

ACTIONS = ("wheel", "touch", "key", "resize", "panel", "click", "wait")


class ReplayScriptError(ValueError):
    """Raised when a replay script step is malformed."""


@dc.dataclass(slots=True, frozen=True)
class ReplayStep:
    action: str
    value: typ.Any

    def describe(self) -> str:
        match self.action:
            case "wheel":
                return f"wheel dx={self.value.delta_x:g} dy={self.value.delta_y:g}"
            case "touch":
                (x0, y0), (x1, y1) = self.value
                return f"touch ({x0:g},{y0:g})->({x1:g},{y1:g})"
            case _:
                return f"{self.action} {self.value}"


@dc.dataclass(slots=True, frozen=True)
class ReplayRecord:
    """State observed after one replayed step."""

    step: ReplayStep
    state: ScrollState
    momentum_active: bool
    scroll_hint_hidden: bool
    navbar_scrolled: bool

    def line(self) -> str:
        return (
            f"{self.step.describe()}: offset={self.state.raw_offset:.1f} "
            f"panel={self.state.current_panel_index} "
            f"progress={self.state.progress_percent:.1f}%"
        )


def _number(value: object, *, action: str) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"Step '{action}' expects a number, got {value!r}."
        raise ReplayScriptError(msg)
    return float(value)


def _point(value: object, *, action: str) -> tuple[float, float]:
    if not isinstance(value, list | tuple) or len(value) != 2:  # noqa: PLR2004
        msg = f"Step '{action}' expects [x, y] points, got {value!r}."
        raise ReplayScriptError(msg)
    return (_number(value[0], action=action), _number(value[1], action=action))


def _parse_value(action: str, value: object) -> object:  # noqa: PLR0911
    match action:
        case "wheel":
            if isinstance(value, dict):
                return WheelEvent(
                    delta_x=_number(value.get("dx", 0), action=action),
                    delta_y=_number(value.get("dy", 0), action=action),
                )
            return WheelEvent(delta_y=_number(value, action=action))
        case "touch":
            if not isinstance(value, dict) or not {"from", "to"} <= value.keys():
                msg = "Step 'touch' expects a mapping with 'from' and 'to' points."
                raise ReplayScriptError(msg)
            return (
                _point(value["from"], action=action),
                _point(value["to"], action=action),
            )
        case "key":
            if not isinstance(value, str) or not value:
                msg = f"Step 'key' expects a key name, got {value!r}."
                raise ReplayScriptError(msg)
            return value
        case "resize":
            width = _number(value, action=action)
            if width <= 0:
                msg = f"Step 'resize' expects a positive width, got {value!r}."
                raise ReplayScriptError(msg)
            return width
        case "panel" | "click":
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"Step '{action}' expects an integer index, got {value!r}."
                raise ReplayScriptError(msg)
            return value
        case "wait":
            seconds = _number(value, action=action)
            if seconds < 0:
                msg = f"Step 'wait' expects a non-negative duration, got {value!r}."
                raise ReplayScriptError(msg)
            return seconds
        case _:
            known = ", ".join(ACTIONS)
            msg = f"Unknown replay action '{action}'. Known actions: {known}"
            raise ReplayScriptError(msg)


def parse_steps(raw: object) -> list[ReplayStep]:
    """Validate decoded YAML and return the replay steps."""
    if raw is None:
        return []
    if not isinstance(raw, list):
        msg = "Replay script must be a list of steps."
        raise ReplayScriptError(msg)
    steps: list[ReplayStep] = []
    for position, entry in enumerate(raw, start=1):
        if not isinstance(entry, dict) or len(entry) != 1:
            msg = f"Step {position} must be a mapping with exactly one action."
            raise ReplayScriptError(msg)
        ((action, value),) = entry.items()
        steps.append(ReplayStep(str(action), _parse_value(str(action), value)))
    return steps


def load_script(path: Path) -> list[ReplayStep]:
    """Read a replay script from YAML."""
    yaml = YAML(typ="safe")
    yaml.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.load(handle)
    return parse_steps(raw)


def _apply(
    step: ReplayStep,
    *,
    window: VirtualWindow,
    container: VirtualScrollContainer,
    controller: PanelNavigationController,
    host: VirtualIndicatorHost,
) -> None:
    match step.action:
        case "wheel":
            container.dispatch("wheel", dc.replace(step.value))
        case "touch":
            (x0, y0), (x1, y1) = step.value
            container.dispatch("touchstart", TouchEvent(x0, y0))
            container.dispatch("touchmove", TouchEvent(x1, y1))
        case "key":
            window.dispatch("keydown", KeyEvent(key=step.value))
        case "resize":
            window.resize(step.value)
        case "panel":
            controller.scroll_to_panel(step.value)
        case "click":
            if 0 <= step.value < len(host.indicators):
                host.indicators[step.value].click()
        case _:
            return


async def replay_script(
    steps: cabc.Sequence[ReplayStep],
    *,
    panels: cabc.Sequence[Panel],
    viewport_width: float,
    options: NavigationOptions,
) -> list[ReplayRecord]:
    """Run ``steps`` against a fresh virtual surface on the running loop."""
    loop = asyncio.get_running_loop()
    window = VirtualWindow(viewport_width)
    container = VirtualScrollContainer(window, panel_count=len(panels))
    host = VirtualIndicatorHost()
    chrome = VirtualChrome()
    controller = PanelNavigationController(
        container,
        panels,
        window=window,
        scheduler=loop,
        progress_bar=VirtualProgressBar(),
        indicator_host=host,
        chrome=chrome,
        options=options,
    )
    records: list[ReplayRecord] = []
    try:
        for step in steps:
            _apply(
                step, window=window, container=container, controller=controller, host=host
            )
            await asyncio.sleep(step.value if step.action == "wait" else 0)
            records.append(
                ReplayRecord(
                    step=step,
                    state=controller.state,
                    momentum_active=controller.momentum_active,
                    scroll_hint_hidden=chrome.scroll_hint_hidden,
                    navbar_scrolled=chrome.navbar_scrolled,
                )
            )
    finally:
        controller.destroy()
    return records


__all__ = [
    "ACTIONS",
    "ReplayRecord",
    "ReplayScriptError",
    "ReplayStep",
    "load_script",
    "parse_steps",
    "replay_script",
]
