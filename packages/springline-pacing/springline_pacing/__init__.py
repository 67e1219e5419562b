"""springline-pacing - Frame pacing and adaptive rendering quality."""
from __future__ import annotations

from springline_pacing import signals
from springline_pacing.governor import (
    FAST_FRAME_MS,
    SLOW_FRAME_MS,
    TARGET_FPS,
    FrameGovernor,
    FrameTicket,
)
from springline_pacing.quality import (
    PROFILES,
    FpsBand,
    QualityLevel,
    QualityProfile,
    classify_fps,
)

__all__ = [
    "FAST_FRAME_MS",
    "PROFILES",
    "SLOW_FRAME_MS",
    "TARGET_FPS",
    "FpsBand",
    "FrameGovernor",
    "FrameTicket",
    "QualityLevel",
    "QualityProfile",
    "classify_fps",
    "signals",
]
