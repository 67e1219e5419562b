"""springline-curve - Cubic Bezier math for the springline playground."""
from __future__ import annotations

from springline_curve import vec
from springline_curve.bezier import (
    TangentSample,
    arrow_head,
    derivative,
    evaluate,
    sample_curve,
    sample_tangents,
    tangent,
)
from springline_curve.vec import Point

__all__ = [
    "Point",
    "TangentSample",
    "arrow_head",
    "derivative",
    "evaluate",
    "sample_curve",
    "sample_tangents",
    "tangent",
    "vec",
]
