"""SceneController - owns the scene and runs one frame per accepted tick."""
from __future__ import annotations

import logging
import math
from typing import Callable

from springline import Clock, System, TickContext, TimeFn, perf_ms
from springline_pacing import FrameGovernor
from springline_signal import SignalBus, make_signal_system
from springline_spring import make_spring_system, set_coefficients

from springline_scene.config import SceneConfig, clamp_coefficient
from springline_scene.render import NullRenderer, RenderFrame, Renderer, build_frame
from springline_scene.state import SceneState

logger = logging.getLogger(__name__)


def _noop() -> None:
    return None


class SceneController:
    """Single owner of SceneState.

    Input handlers only write the pointer and spring 0's target; all
    other mutation happens inside tick(). Physics always advances by
    the fixed dt of its Clock, whatever the wall time between ticks.
    """

    def __init__(
        self,
        config: SceneConfig | None = None,
        renderer: Renderer | None = None,
        bus: SignalBus | None = None,
        time_fn: TimeFn | None = None,
    ) -> None:
        self._config = config if config is not None else SceneConfig()
        self._renderer = renderer if renderer is not None else NullRenderer()
        self._bus = bus if bus is not None else SignalBus()
        self._time_fn = time_fn if time_fn is not None else perf_ms

        self._state = SceneState.from_config(self._config)
        self._clock = Clock(self._config.physics_fps)
        self._governor = FrameGovernor(
            self._config.target_fps, bus=self._bus, time_fn=self._time_fn
        )
        self._systems: list[System] = [make_spring_system(self._config.max_speed)]
        # Flushes after the ticket completes, not with the other systems
        self._dispatch = make_signal_system(self._bus)
        self._last_frame: RenderFrame | None = None

    @property
    def config(self) -> SceneConfig:
        return self._config

    @property
    def state(self) -> SceneState:
        return self._state

    @property
    def governor(self) -> FrameGovernor:
        return self._governor

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def last_frame(self) -> RenderFrame | None:
        return self._last_frame

    def add_system(self, system: System) -> None:
        """Append a system that runs after the springs on every rendered tick."""
        self._systems.append(system)

    # -- input --------------------------------------------------------

    def _move_pointer(self, x: float, y: float) -> bool:
        if not (math.isfinite(x) and math.isfinite(y)):
            logger.debug("Ignoring non-finite pointer position (%r, %r)", x, y)
            return False
        self._state.pointer.x = x
        self._state.pointer.y = y
        return True

    def pointer_move(self, x: float, y: float) -> None:
        """Mouse movement. Only drags the curve while the button is held."""
        if self._move_pointer(x, y) and self._state.pointer.pressed:
            self.retarget()

    def touch_move(self, x: float, y: float) -> None:
        """Touch movement always drags."""
        if self._move_pointer(x, y):
            self.retarget()

    def touch_start(self, x: float, y: float) -> None:
        """Finger down. Records the contact without moving the curve."""
        self._move_pointer(x, y)
        self._state.pointer.pressed = True

    def pointer_down(self, x: float | None = None, y: float | None = None) -> None:
        if x is not None and y is not None:
            self._move_pointer(x, y)
        self._state.pointer.pressed = True

    def pointer_up(self) -> None:
        self._state.pointer.pressed = False

    def pointer_leave(self) -> None:
        self._state.pointer.pressed = False

    def retarget(self) -> None:
        """Aim the lead spring at the last known pointer position."""
        pointer = self._state.pointer
        self._state.springs[0].aim(pointer.x, pointer.y)

    # -- configuration ------------------------------------------------

    def set_stiffness(self, value: float) -> float:
        value = clamp_coefficient(value)
        self._state.stiffness = value
        set_coefficients(self._state.springs, stiffness=value)
        return value

    def set_damping(self, value: float) -> float:
        value = clamp_coefficient(value)
        self._state.damping = value
        set_coefficients(self._state.springs, damping=value)
        return value

    def reset(self) -> None:
        """Restore the initial curve and HIGH quality; keep slider values and pointer."""
        pointer = self._state.pointer
        self._state = SceneState.from_config(
            self._config,
            stiffness=self._state.stiffness,
            damping=self._state.damping,
        )
        self._state.pointer = pointer
        self._governor.reset()
        logger.info("Scene reset")

    # -- frame --------------------------------------------------------

    def tick(
        self, now_ms: float, request_stop: Callable[[], None] = _noop
    ) -> RenderFrame | None:
        """Run one host callback. Returns the rendered frame, or None if skipped."""
        ticket = self._governor.should_render(now_ms)
        if not ticket.render:
            return None

        self._clock.advance()
        ctx = self._clock.context(now_ms, request_stop)
        for system in self._systems:
            system(self._state, ctx)

        frame = build_frame(
            self._state,
            self._governor.level,
            self._governor.profile,
            ctx.tick_number,
            self._config.tangent_length,
        )
        self._renderer.draw(frame)
        self._last_frame = frame

        ticket.complete(self._time_fn() - ticket.frame_start_ms)
        self._dispatch(self._state, ctx)
        return frame

    def __call__(self, ctx: TickContext) -> None:
        """TickScheduler callback."""
        self.tick(ctx.now_ms, ctx.request_stop)
