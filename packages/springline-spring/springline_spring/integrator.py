"""Semi-implicit Euler spring step and lead-follow coupling."""
from __future__ import annotations

import math
from collections.abc import Iterable

from springline_spring.components import (
    FOLLOW_FACTOR,
    MAX_SPEED,
    REFERENCE_FPS,
    SpringBody,
)


def step_spring(body: SpringBody, dt: float, max_speed: float = MAX_SPEED) -> None:
    """Advance body one fixed step: acceleration -> velocity -> position.

    a = -k (x - target) - c v

    Velocity is clamped to max_speed after the position update, so
    the clamp limits the next step, not this one.
    """
    ax = -body.stiffness * (body.x - body.target_x) - body.damping * body.vx
    ay = -body.stiffness * (body.y - body.target_y) - body.damping * body.vy

    body.vx += ax * dt
    body.vy += ay * dt
    body.x += body.vx * dt
    body.y += body.vy * dt

    speed = math.sqrt(body.vx * body.vx + body.vy * body.vy)
    if speed > max_speed:
        body.vx = body.vx / speed * max_speed
        body.vy = body.vy / speed * max_speed


def follow(
    leader: SpringBody,
    follower: SpringBody,
    dt: float,
    factor: float = FOLLOW_FACTOR,
    reference_fps: int = REFERENCE_FPS,
) -> None:
    """Drag the follower's target toward the leader's current position.

    Exponential smoothing scaled so factor is the per-frame blend at
    reference_fps. Only the target moves; the follower's own spring
    does the rest on the next step.
    """
    blend = factor * dt * reference_fps
    follower.target_x += (leader.x - follower.target_x) * blend
    follower.target_y += (leader.y - follower.target_y) * blend


def set_coefficients(
    bodies: Iterable[SpringBody],
    stiffness: float | None = None,
    damping: float | None = None,
) -> None:
    for body in bodies:
        if stiffness is not None:
            body.stiffness = stiffness
        if damping is not None:
            body.damping = damping
