"""Shared type aliases for the springline tick loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    now_ms: float
    request_stop: Callable[[], None]

    @property
    def elapsed(self) -> float:
        """Simulated seconds covered by the ticks so far."""
        return self.tick_number * self.dt


TimeFn = Callable[[], float]
"""Returns a monotonic timestamp in milliseconds."""

System = Callable[[Any, TickContext], None]
