"""Frame pacing gate and adaptive quality governor.

The governor does two things:

1. ``should_render(now_ms)`` rate-limits rendering to the target interval.
   Accepted frames advance the phase by whole intervals only, so the
   schedule stays locked to multiples of the interval instead of
   drifting with callback jitter.

2. ``on_complete(frame_time_ms)`` feeds the measured cost of a rendered
   frame into two hysteresis scores. Six consecutive slow frames drop
   one quality level; thirty-one fast frames raise one.

Presentation is reached only through signals on a ``SignalBus``.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from springline import TimeFn, perf_ms

from springline_pacing import signals
from springline_pacing.quality import (
    PROFILES,
    QualityLevel,
    QualityProfile,
    classify_fps,
)

if TYPE_CHECKING:
    from springline_signal import SignalBus

logger = logging.getLogger(__name__)

TARGET_FPS = 60

# Fixed millisecond thresholds; they do not scale with target_fps.
SLOW_FRAME_MS = 18.0
FAST_FRAME_MS = 14.0
SLOW_FRAME_LIMIT = 5
FAST_FRAME_LIMIT = 30
GOOD_FRAME_DECAY = 0.5

FPS_WINDOW_MS = 1000.0
WARNING_CLEAR_FPS = 58
WARNING_COOLDOWN_MS = 5000.0


@dataclass(frozen=True)
class FrameTicket:
    """Answer to should_render. Rendered frames must be completed."""

    render: bool
    frame_start_ms: float | None = None
    on_complete: Callable[[float], None] | None = None

    def complete(self, frame_time_ms: float) -> None:
        if self.on_complete is None:
            raise RuntimeError("cannot complete a skipped frame")
        self.on_complete(frame_time_ms)


_SKIP = FrameTicket(render=False)


class FrameGovernor:
    def __init__(
        self,
        target_fps: int = TARGET_FPS,
        bus: SignalBus | None = None,
        time_fn: TimeFn | None = None,
    ) -> None:
        if target_fps <= 0:
            raise ValueError("target_fps must be positive")
        self._target_interval_ms = 1000.0 / target_fps
        self._bus = bus
        self._time_fn = time_fn if time_fn is not None else perf_ms

        self._last_frame_start_ms = 0.0
        self._slow_frame_score = 0.0
        self._fast_frame_score = 0.0
        self._level = QualityLevel.HIGH
        self._warning_active = False
        self._warning_clear_at: float | None = None

        self._window_frames = 0
        self._window_start_ms = self._time_fn()
        self._measured_fps: int | None = None

    # -- state --------------------------------------------------------

    @property
    def target_interval_ms(self) -> float:
        return self._target_interval_ms

    @property
    def last_frame_start_ms(self) -> float:
        return self._last_frame_start_ms

    @property
    def slow_frame_score(self) -> float:
        return self._slow_frame_score

    @property
    def fast_frame_score(self) -> float:
        return self._fast_frame_score

    @property
    def level(self) -> QualityLevel:
        return self._level

    @property
    def profile(self) -> QualityProfile:
        return PROFILES[self._level]

    @property
    def warning_active(self) -> bool:
        return self._warning_active

    @property
    def measured_fps(self) -> int | None:
        """Most recent one-second FPS estimate, None before the first report."""
        return self._measured_fps

    # -- pacing -------------------------------------------------------

    def should_render(self, now_ms: float) -> FrameTicket:
        elapsed = now_ms - self._last_frame_start_ms
        if elapsed < self._target_interval_ms:
            return _SKIP

        self._last_frame_start_ms += elapsed - (elapsed % self._target_interval_ms)
        return FrameTicket(
            render=True,
            frame_start_ms=self._time_fn(),
            on_complete=self.on_complete,
        )

    # -- adaptation ---------------------------------------------------

    def on_complete(self, frame_time_ms: float) -> None:
        self._window_frames += 1

        if frame_time_ms > SLOW_FRAME_MS:
            self._slow_frame_score += 1
            self._fast_frame_score = 0.0
            if self._slow_frame_score > SLOW_FRAME_LIMIT and self._level > QualityLevel.LOW:
                self._set_level(QualityLevel(self._level - 1))
                self._slow_frame_score = 0.0
                self._show_warning()
        elif frame_time_ms < FAST_FRAME_MS:
            self._fast_frame_score += 1
            self._slow_frame_score = max(0.0, self._slow_frame_score - 1)
            if self._fast_frame_score > FAST_FRAME_LIMIT and self._level < QualityLevel.HIGH:
                self._set_level(QualityLevel(self._level + 1))
                self._fast_frame_score = 0.0
        else:
            self._slow_frame_score = max(0.0, self._slow_frame_score - GOOD_FRAME_DECAY)
            self._fast_frame_score = max(0.0, self._fast_frame_score - GOOD_FRAME_DECAY)

        now = self._time_fn()
        self._update_fps_window(now)
        self._expire_warning(now)

    def reset(self) -> None:
        """Back to HIGH with clean scores. A visible warning keeps its cooldown."""
        self._set_level(QualityLevel.HIGH)
        self._slow_frame_score = 0.0
        self._fast_frame_score = 0.0
        logger.info("Governor reset to %s", self._level.label)

    def _set_level(self, level: QualityLevel) -> None:
        previous = self._level
        if level == previous:
            return
        self._level = level
        verb = "Lowered" if level < previous else "Raised"
        logger.info("%s quality to %s", verb, level.label)
        self._publish(signals.QUALITY_CHANGED, level=level.label, previous=previous.label)

    # -- telemetry ----------------------------------------------------

    def _update_fps_window(self, now: float) -> None:
        window = now - self._window_start_ms
        if window <= FPS_WINDOW_MS:
            return

        fps = math.floor(self._window_frames * 1000.0 / window + 0.5)
        self._measured_fps = fps
        band = classify_fps(fps)
        logger.debug("Measured %d FPS (%s) at %s quality", fps, band.value, self._level.label)
        self._publish(signals.FPS_REPORT, fps=fps, quality=self._level.label, band=band)

        self._window_frames = 0
        self._window_start_ms = now

        if (
            self._warning_active
            and fps >= WARNING_CLEAR_FPS
            and self._warning_clear_at is None
        ):
            self._warning_clear_at = now + WARNING_COOLDOWN_MS

    def _show_warning(self) -> None:
        # A fresh drop restarts any pending cooldown
        self._warning_clear_at = None
        if self._warning_active:
            return
        self._warning_active = True
        logger.info("Performance warning: quality lowered to %s", self._level.label)
        self._publish(signals.WARNING_SHOWN, level=self._level.label)

    def _expire_warning(self, now: float) -> None:
        if self._warning_clear_at is None or now < self._warning_clear_at:
            return
        self._warning_clear_at = None
        self._warning_active = False
        logger.info("Performance warning cleared")
        self._publish(signals.WARNING_HIDDEN)

    def _publish(self, signal_name: str, **data: Any) -> None:
        if self._bus is not None:
            self._bus.publish(signal_name, **data)
