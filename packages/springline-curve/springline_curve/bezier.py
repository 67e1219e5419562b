"""Cubic Bezier evaluation, tangents and sampling.

    B(t)  = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3
    B'(t) = 3(1-t)^2 (P1-P0) + 6(1-t) t (P2-P1) + 3 t^2 (P3-P2)

All functions are pure. t is meant to lie in [0, 1]; values outside
extrapolate the polynomial and are not clamped.
"""
from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from springline_curve import vec
from springline_curve.vec import Point

ControlPoints = Sequence[Point]


@dataclass(frozen=True)
class TangentSample:
    """Curve point and unit direction at parameter t."""

    t: float
    point: Point
    direction: Point


def evaluate(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    u = 1.0 - t
    b0 = u * u * u
    b1 = 3.0 * u * u * t
    b2 = 3.0 * u * t * t
    b3 = t * t * t
    return (
        b0 * p0[0] + b1 * p1[0] + b2 * p2[0] + b3 * p3[0],
        b0 * p0[1] + b1 * p1[1] + b2 * p2[1] + b3 * p3[1],
    )


def derivative(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    u = 1.0 - t
    c0 = 3.0 * u * u
    c1 = 6.0 * u * t
    c2 = 3.0 * t * t
    return (
        c0 * (p1[0] - p0[0]) + c1 * (p2[0] - p1[0]) + c2 * (p3[0] - p2[0]),
        c0 * (p1[1] - p0[1]) + c1 * (p2[1] - p1[1]) + c2 * (p3[1] - p2[1]),
    )


def tangent(t: float, p0: Point, p1: Point, p2: Point, p3: Point) -> Point:
    """Unit tangent at t. Returns (0, 0) when B'(t) has zero length."""
    return vec.normalize(derivative(t, p0, p1, p2, p3))


def sample_curve(points: ControlPoints, count: int) -> list[Point]:
    """Return count + 1 evenly spaced points from t=0 to t=1 inclusive."""
    if count <= 0:
        raise ValueError(f"sample count must be positive, got {count}")
    p0, p1, p2, p3 = points
    samples = [p0]
    for i in range(1, count):
        samples.append(evaluate(i / count, p0, p1, p2, p3))
    samples.append(evaluate(1.0, p0, p1, p2, p3))
    return samples


def sample_tangents(points: ControlPoints, params: Iterable[float]) -> list[TangentSample]:
    p0, p1, p2, p3 = points
    return [
        TangentSample(
            t=t,
            point=evaluate(t, p0, p1, p2, p3),
            direction=tangent(t, p0, p1, p2, p3),
        )
        for t in params
    ]


def arrow_head(
    start: Point,
    end: Point,
    length: float = 10.0,
    spread: float = math.pi / 6,
) -> tuple[Point, Point]:
    """Endpoints of the two barbs of an arrow pointing from start to end."""
    angle = math.atan2(end[1] - start[1], end[0] - start[0])
    left = (
        end[0] - length * math.cos(angle - spread),
        end[1] - length * math.sin(angle - spread),
    )
    right = (
        end[0] - length * math.cos(angle + spread),
        end[1] - length * math.sin(angle + spread),
    )
    return left, right
