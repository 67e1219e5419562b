"""springline-signal - In-process signal bus for presentation collaborators."""
from __future__ import annotations

from springline_signal.bus import Handler, SignalBus
from springline_signal.systems import make_signal_system

__all__ = ["Handler", "SignalBus", "make_signal_system"]
