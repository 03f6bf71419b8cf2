"""
Thermometer easing engine.

The displayed temperature does not jump to a new set-point; it seeks it
like a steered particle with bounded speed and steering force.  Far from
the target the value travels at full speed, inside the damping zone the
desired speed falls off linearly, so the mercury slows and may bounce a
little before it settles.

``step`` is a pure function over an immutable state; ``EasingController``
wraps it with a tick source (a ``QTimer`` in the app, anything with
``start``/``stop``/``isActive`` in tests).
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional

import numpy as np

from .scales import clamp

logger = logging.getLogger(__name__)

FPS = 30
TICK_INTERVAL_MS = 1000 // FPS


# ---------------------------------------------------------------------------
# Parameters & state
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SeekParams:
    """Tuning constants of the seek model.

    Raising either limit makes the value more likely to over- or
    undershoot the target.
    """
    max_speed: float = 4.0
    max_force: float = 0.2
    deadband: float = 0.1       # settle when both |v| and |gap| are below this
    damping_zone: float = 15.0  # gap below which desired speed ramps down


DEFAULT_PARAMS = SeekParams()


class AnimationMode(enum.Enum):
    IDLE = "idle"
    ANIMATING = "animating"


@dataclass(frozen=True)
class ThermometerState:
    value: float
    target: float
    velocity: float = 0.0
    acceleration: float = 0.0
    mode: AnimationMode = AnimationMode.IDLE

    @classmethod
    def at(cls, value: float) -> "ThermometerState":
        """Resting state at *value*."""
        return cls(value=float(value), target=float(value))


@dataclass(frozen=True)
class StepResult:
    state: ThermometerState
    repaint: bool
    running: bool


# ---------------------------------------------------------------------------
# Pure step
# ---------------------------------------------------------------------------

def is_settled(state: ThermometerState, target: float,
               params: SeekParams = DEFAULT_PARAMS) -> bool:
    return (abs(state.velocity) < params.deadband
            and abs(state.value - target) < params.deadband)


def step(
    state: ThermometerState,
    target: float,
    params: SeekParams = DEFAULT_PARAMS,
) -> StepResult:
    """Advance the seek simulation by one tick toward *target*."""
    if is_settled(state, target, params):
        # May never hit the target exactly
        idle = replace(state, target=target, mode=AnimationMode.IDLE)
        return StepResult(idle, repaint=False, running=False)

    gap = target - state.value
    if gap > params.damping_zone:
        desired = (1.0 if state.value < target else -1.0) * params.max_speed
    else:
        desired = (gap / params.damping_zone) * params.max_speed

    steer = desired - state.velocity
    acceleration = state.acceleration + clamp(steer, -params.max_force, params.max_force)

    velocity = clamp(state.velocity + acceleration, -params.max_speed, params.max_speed)
    value = state.value + velocity

    new_state = ThermometerState(
        value=value,
        target=target,
        velocity=velocity,
        acceleration=0.0,
        mode=AnimationMode.ANIMATING,
    )
    return StepResult(new_state, repaint=True, running=True)


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------

class EasingController:
    """Owns the thermometer state and the lifecycle of its tick source.

    Parameters:
        initial:     Starting temperature.
        tick_source: Object with ``start()``, ``stop()`` and ``isActive()``.
        on_repaint:  Called after every tick that moved the value.
        params:      Seek constants (defaults are the tuned values).
    """

    def __init__(
        self,
        initial: float,
        tick_source,
        on_repaint: Optional[Callable[[], None]] = None,
        params: SeekParams = DEFAULT_PARAMS,
    ) -> None:
        self.params = params
        self.tick_source = tick_source
        self.on_repaint = on_repaint
        self._state = ThermometerState.at(initial)

    # ── properties ────────────────────────────────────────────────────────

    @property
    def state(self) -> ThermometerState:
        return self._state

    @property
    def value(self) -> float:
        return self._state.value

    @property
    def target(self) -> float:
        return self._state.target

    @property
    def running(self) -> bool:
        return bool(self.tick_source.isActive())

    # ── commands ──────────────────────────────────────────────────────────

    def seek(self, target: float) -> None:
        """Set a new target; start ticking unless already animating."""
        self._state = replace(self._state, target=float(target),
                              mode=AnimationMode.ANIMATING)
        if not self.tick_source.isActive():
            logger.debug("Seek %.1f from %.2f, starting ticks", target, self.value)
            self.tick_source.start()

    def tick(self) -> bool:
        """Advance one step.  Returns whether a repaint is needed."""
        result = step(self._state, self._state.target, self.params)
        self._state = result.state
        if not result.running:
            self.tick_source.stop()
            logger.debug("Settled at %.2f (target %.1f)", self.value, self.target)
        if result.repaint and self.on_repaint is not None:
            self.on_repaint()
        return result.repaint

    def settle(self, max_ticks: int = 500) -> np.ndarray:
        """Tick until idle and return the value after every tick.

        Raises:
            RuntimeError: if still animating after *max_ticks* ticks.
        """
        values: List[float] = []
        for _ in range(max_ticks):
            if not self.running:
                break
            self.tick()
            values.append(self.value)
        if self.running:
            raise RuntimeError(
                f"not settled after {max_ticks} ticks "
                f"(value={self.value:.3f}, target={self.target:.3f})"
            )
        return np.asarray(values, dtype=np.float64)
