"""Tests for the eased momentum wheel strategy and the trailing debouncer."""

from __future__ import annotations

import typing as typ

import pytest

from dmlab_pages.navigation import (
    Debouncer,
    DirectWheel,
    MomentumWheel,
    VirtualScrollContainer,
    VirtualWindow,
    WheelEvent,
)

if typ.TYPE_CHECKING:
    from .conftest import ManualScheduler, SurfaceFactory


@pytest.fixture
def container() -> VirtualScrollContainer:
    return VirtualScrollContainer(VirtualWindow(1000), panel_count=8)


def test_momentum_eases_toward_target(
    container: VirtualScrollContainer, scheduler: ManualScheduler
) -> None:
    wheel = MomentumWheel(container, scheduler)
    wheel.apply(400)
    assert container.scroll_left == 0, "Nothing moves before the first frame"
    scheduler.advance(1 / 60)
    assert container.scroll_left == pytest.approx(30.0), "First frame moves 7.5%"
    assert wheel.animating


def test_momentum_settles_exactly_on_target(
    container: VirtualScrollContainer, scheduler: ManualScheduler
) -> None:
    wheel = MomentumWheel(container, scheduler)
    wheel.apply(400)
    frames = scheduler.run_until_idle()
    assert container.scroll_left == 400
    assert not wheel.animating
    assert 50 < frames < 200, f"unexpected frame count {frames}"


def test_only_one_frame_is_pending(
    container: VirtualScrollContainer, scheduler: ManualScheduler
) -> None:
    wheel = MomentumWheel(container, scheduler)
    for _ in range(5):
        wheel.apply(100)
    assert len(scheduler.pending) == 1
    assert wheel.target == 500


def test_target_is_clamped(
    container: VirtualScrollContainer, scheduler: ManualScheduler
) -> None:
    wheel = MomentumWheel(container, scheduler)
    wheel.apply(-300)
    assert wheel.target == 0
    wheel.apply(50_000)
    assert wheel.target == 7000
    scheduler.run_until_idle()
    assert container.scroll_left == 7000


def test_idle_wheel_resyncs_from_live_offset(
    container: VirtualScrollContainer, scheduler: ManualScheduler
) -> None:
    wheel = MomentumWheel(container, scheduler)
    container.scroll_to(3000)
    wheel.apply(100)
    assert wheel.target == 3100, "Momentum starts from where the container is"
    scheduler.run_until_idle()
    assert container.scroll_left == 3100


def test_cancel_stops_animation(
    container: VirtualScrollContainer, scheduler: ManualScheduler
) -> None:
    wheel = MomentumWheel(container, scheduler)
    wheel.apply(600)
    scheduler.advance(0.05)
    moved = container.scroll_left
    wheel.cancel()
    scheduler.advance(1.0)
    assert container.scroll_left == moved
    assert scheduler.pending == []


def test_direct_wheel_adds_delta(container: VirtualScrollContainer) -> None:
    wheel = DirectWheel(container)
    wheel.apply(250)
    wheel.apply(-100)
    assert container.scroll_left == 150


def test_controller_reports_momentum_activity(
    make_surface: SurfaceFactory, scheduler: ManualScheduler
) -> None:
    surface = make_surface(momentum=True)
    surface.container.dispatch("wheel", WheelEvent(delta_y=1000))
    assert surface.controller.momentum_active
    scheduler.run_until_idle()
    assert not surface.controller.momentum_active
    assert surface.controller.current_panel_index() == 1
    assert surface.host.indicators[1].active


def test_destroy_cancels_momentum_frame(
    make_surface: SurfaceFactory, scheduler: ManualScheduler
) -> None:
    surface = make_surface(momentum=True)
    surface.container.dispatch("wheel", WheelEvent(delta_y=1000))
    surface.controller.destroy()
    assert scheduler.pending == []


def test_debouncer_runs_once_after_last_trigger(scheduler: ManualScheduler) -> None:
    calls: list[float] = []
    debouncer = Debouncer(scheduler, 0.25, lambda: calls.append(scheduler.now))
    debouncer.trigger()
    scheduler.advance(0.2)
    debouncer.trigger()
    scheduler.advance(0.2)
    assert calls == []
    scheduler.advance(0.1)
    assert calls == [pytest.approx(0.45)]
    assert not debouncer.pending


def test_debouncer_without_scheduler_runs_immediately() -> None:
    calls: list[int] = []
    debouncer = Debouncer(None, 0.25, lambda: calls.append(1))
    debouncer.trigger()
    debouncer.trigger()
    assert calls == [1, 1]
    assert not debouncer.pending
