"""springline-spring - Damped spring integrator driving the curve's interior points."""
from __future__ import annotations

from springline_spring.components import (
    FOLLOW_FACTOR,
    MAX_SPEED,
    REFERENCE_FPS,
    SpringBody,
)
from springline_spring.integrator import follow, set_coefficients, step_spring
from springline_spring.systems import DRIVEN_POINTS, SpringRig, make_spring_system

__all__ = [
    "DRIVEN_POINTS",
    "FOLLOW_FACTOR",
    "MAX_SPEED",
    "REFERENCE_FPS",
    "SpringBody",
    "SpringRig",
    "follow",
    "make_spring_system",
    "set_coefficients",
    "step_spring",
]
