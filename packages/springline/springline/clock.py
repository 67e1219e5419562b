"""Fixed-timestep clock and wall-time helpers."""

import time
from typing import Callable

from springline.types import TickContext


def perf_ms() -> float:
    """High-resolution monotonic time in milliseconds."""
    return time.perf_counter() * 1000.0


class Clock:
    """Counts ticks of a fixed step. dt never follows measured wall time."""

    def __init__(self, tps: int = 60) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, now_ms: float, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            now_ms=now_ms,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
