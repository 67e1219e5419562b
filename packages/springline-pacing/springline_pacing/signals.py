"""Signal names published by the frame governor.

Payloads:
    fps_report:       fps (int), quality (str), band (FpsBand)
    quality_changed:  level (str), previous (str)
    warning_shown:    level (str)
    warning_hidden:   (none)
"""
from __future__ import annotations

FPS_REPORT = "fps_report"
QUALITY_CHANGED = "quality_changed"
WARNING_SHOWN = "warning_shown"
WARNING_HIDDEN = "warning_hidden"
