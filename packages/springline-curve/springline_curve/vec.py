"""2-D vector helpers operating on (x, y) tuples."""
from __future__ import annotations

import math

Point = tuple[float, float]


def add(a: Point, b: Point) -> Point:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Point, b: Point) -> Point:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Point, s: float) -> Point:
    return (v[0] * s, v[1] * s)


def dot(a: Point, b: Point) -> float:
    return a[0] * b[0] + a[1] * b[1]


def magnitude_sq(v: Point) -> float:
    return v[0] * v[0] + v[1] * v[1]


def magnitude(v: Point) -> float:
    return math.sqrt(magnitude_sq(v))


def normalize(v: Point) -> Point:
    """Unit vector along v. A zero-length v divides by 1 and stays (0, 0)."""
    mag = magnitude(v) or 1.0
    return (v[0] / mag, v[1] / mag)


def lerp(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def distance(a: Point, b: Point) -> float:
    return magnitude(sub(a, b))


def clamp_magnitude(v: Point, max_mag: float) -> Point:
    sq = magnitude_sq(v)
    if sq <= max_mag * max_mag:
        return v
    return scale(v, max_mag / math.sqrt(sq))
