"""TickScheduler - invokes a callback repeatedly at a target cadence.

Stands in for a host display-refresh callback. Time and sleep are
injectable so callers can drive it with synthetic timestamps.
"""

import logging
import time
from typing import Callable

from springline.clock import Clock, perf_ms
from springline.types import TickContext, TimeFn

logger = logging.getLogger(__name__)

TickCallback = Callable[[TickContext], None]


class TickScheduler:
    def __init__(
        self,
        callback: TickCallback,
        fps: int = 60,
        time_fn: TimeFn | None = None,
        sleep_fn: Callable[[float], None] | None = None,
    ) -> None:
        self._clock = Clock(fps)
        self._callback = callback
        self._time_fn = time_fn if time_fn is not None else perf_ms
        self._sleep_fn = sleep_fn if sleep_fn is not None else time.sleep
        self._start_hooks: list[TickCallback] = []
        self._stop_hooks: list[TickCallback] = []
        self._stop_requested = False

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    def on_start(self, hook: TickCallback) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: TickCallback) -> None:
        self._stop_hooks.append(hook)

    def stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> TickContext:
        return self._clock.context(self._time_fn(), self.stop)

    def _tick(self) -> None:
        self._clock.advance()
        self._callback(self._context())

    def _run_hooks(self, hooks: list[TickCallback]) -> None:
        ctx = self._context()
        for hook in hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        self._run_hooks(self._stop_hooks)

    def run_forever(self) -> None:
        self._stop_requested = False
        self._run_hooks(self._start_hooks)
        logger.debug("Scheduler running at %d Hz", self._clock.tps)

        interval_ms = self._clock.dt * 1000.0
        while not self._stop_requested:
            start = self._time_fn()
            self._tick()
            if self._stop_requested:
                break
            sleep_ms = interval_ms - (self._time_fn() - start)
            if sleep_ms > 0:
                self._sleep_fn(sleep_ms / 1000.0)

        logger.debug("Scheduler stopped after %d ticks", self._clock.tick_number)
        self._run_hooks(self._stop_hooks)
