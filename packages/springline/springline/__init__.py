"""springline - Tick loop primitives for the spring-driven Bezier playground."""

from springline.clock import Clock, perf_ms
from springline.log import setup_logging
from springline.scheduler import TickScheduler
from springline.types import System, TickContext, TimeFn

__all__ = [
    "Clock",
    "TickScheduler",
    "TickContext",
    "System",
    "TimeFn",
    "perf_ms",
    "setup_logging",
]
