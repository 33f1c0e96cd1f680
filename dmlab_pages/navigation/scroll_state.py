"""Derive the current panel index and progress from raw scroll measurements.

Examples
--------
>>> state = read_scroll_state(3500, 1000, 7000, 8)
>>> state.current_panel_index, state.progress_fraction
(4, 0.5)
>>> read_scroll_state(3499, 1000, 7000, 8).current_panel_index
3
"""

from __future__ import annotations

import math

from .models import ScrollState


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(value, upper))


def panel_index_for(raw_offset: float, viewport_width: float, panel_count: int) -> int:
    """Return the panel nearest to ``raw_offset``, clamped into range.

    Halfway points round up, so an offset of 2.5 viewports selects panel 3.
    """
    if viewport_width <= 0 or panel_count <= 0:
        return 0
    index = _round_half_up(raw_offset / viewport_width)
    return int(_clamp(index, 0, panel_count - 1))


def progress_for(raw_offset: float, total_scrollable_width: float) -> float:
    """Return the scrolled fraction in ``[0, 1]``; ``0`` with nothing to scroll."""
    if total_scrollable_width <= 0:
        return 0.0
    return _clamp(raw_offset / total_scrollable_width, 0.0, 1.0)


def read_scroll_state(
    raw_offset: float,
    viewport_width: float,
    total_scrollable_width: float,
    panel_count: int,
) -> ScrollState:
    """Return the :class:`ScrollState` for one set of measurements.

    Parameters
    ----------
    raw_offset : float
        Horizontal scroll offset of the container in pixels.
    viewport_width : float
        Width of one panel, which equals the window's inner width.
    total_scrollable_width : float
        Content width minus visible width; the largest reachable offset.
    panel_count : int
        Number of panels in the container.

    Returns
    -------
    ScrollState
        The derived state. The function has no side effects.
    """
    return ScrollState(
        raw_offset=raw_offset,
        viewport_width=viewport_width,
        total_scrollable_width=total_scrollable_width,
        panel_count=panel_count,
        current_panel_index=panel_index_for(raw_offset, viewport_width, panel_count),
        progress_fraction=progress_for(raw_offset, total_scrollable_width),
    )


__all__ = ["panel_index_for", "progress_for", "read_scroll_state"]
