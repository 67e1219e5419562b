"""System factories for signal dispatch."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from springline_signal.bus import SignalBus

if TYPE_CHECKING:
    from springline import TickContext


def make_signal_system(bus: SignalBus) -> Callable[[Any, TickContext], None]:
    def signal_system(state: Any, ctx: TickContext) -> None:
        bus.flush()

    return signal_system
