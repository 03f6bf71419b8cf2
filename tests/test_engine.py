import numpy as np
import pytest

from thermometer.engine import (
    AnimationMode,
    EasingController,
    SeekParams,
    ThermometerState,
    step,
)


class FakeTimer:
    """Stands in for QTimer: start/stop/isActive and counters."""

    def __init__(self):
        self.active = False
        self.starts = 0
        self.stops = 0

    def start(self):
        self.active = True
        self.starts += 1

    def stop(self):
        self.active = False
        self.stops += 1

    def isActive(self):
        return self.active


def build(initial=-40.0):
    timer = FakeTimer()
    repaints = []
    ctrl = EasingController(initial, timer, on_repaint=lambda: repaints.append(1))
    return ctrl, timer, repaints


def test_starts_idle_at_initial_value():
    ctrl, timer, _ = build(-40)
    assert ctrl.value == -40.0
    assert ctrl.state.mode is AnimationMode.IDLE
    assert not ctrl.running


def test_seek_starts_tick_source_once():
    ctrl, timer, _ = build()
    ctrl.seek(20)
    ctrl.tick()
    ctrl.seek(30)
    assert timer.starts == 1
    assert ctrl.target == 30.0
    assert ctrl.running


def test_first_tick_applies_max_force():
    ctrl, _, repaints = build(-40)
    ctrl.seek(20)
    assert ctrl.tick() is True
    assert ctrl.state.velocity == pytest.approx(0.2)
    assert ctrl.value == pytest.approx(-39.8)
    assert ctrl.state.acceleration == 0.0
    assert repaints == [1]


def test_seek_to_current_value_stops_without_repaint():
    ctrl, timer, repaints = build(20)
    ctrl.seek(20)
    assert ctrl.tick() is False
    assert timer.stops == 1
    assert not ctrl.running
    assert repaints == []
    assert ctrl.state.mode is AnimationMode.IDLE


def test_step_is_pure():
    state = ThermometerState.at(-40)
    a = step(state, 20)
    b = step(state, 20)
    assert a == b
    assert state.value == -40.0


def test_steady_state_leaves_value_untouched():
    state = ThermometerState(value=19.95, target=20, velocity=0.05)
    result = step(state, 20)
    assert not result.running
    assert not result.repaint
    assert result.state.value == 19.95
    assert result.state.velocity == 0.05


@pytest.mark.parametrize("start,target", [(-40, 50), (50, -40), (0, 3), (10, -35)])
def test_velocity_bounded_and_acceleration_reset(start, target):
    state = ThermometerState.at(start)
    for _ in range(500):
        result = step(state, target)
        state = result.state
        assert abs(state.velocity) <= SeekParams().max_speed
        assert state.acceleration == 0.0
        if not result.running:
            break


@pytest.mark.parametrize("start", [-40, -10, 0, 20, 50])
@pytest.mark.parametrize("target", [-40, -25, 0, 35, 50])
def test_converges_within_budget(start, target):
    ctrl, timer, _ = build(start)
    ctrl.seek(target)
    trajectory = ctrl.settle(max_ticks=500)
    assert not timer.isActive()
    assert abs(ctrl.value - target) < 0.1
    assert abs(ctrl.state.velocity) < 0.1
    assert len(trajectory) <= 500


def test_monotonic_outside_damping_zone():
    ctrl, _, _ = build(-40)
    ctrl.seek(20)
    values = [ctrl.value]
    while 20 - ctrl.value > 15:
        ctrl.tick()
        values.append(ctrl.value)
    assert np.all(np.diff(values) > 0)


def test_scenario_minus_forty_to_twenty():
    ctrl, timer, _ = build(-40)
    ctrl.seek(20)
    trajectory = ctrl.settle(max_ticks=500)
    assert abs(trajectory[-1] - 20) < 0.1
    assert timer.stops == 1
    # Bounces past the target but stays on the scale
    assert trajectory.max() > 20
    assert trajectory.max() < 50


def test_settle_raises_when_budget_exhausted():
    ctrl, _, _ = build(-40)
    ctrl.seek(50)
    with pytest.raises(RuntimeError):
        ctrl.settle(max_ticks=5)


def test_settle_returns_empty_when_idle():
    ctrl, _, _ = build(0)
    assert ctrl.settle().size == 0
