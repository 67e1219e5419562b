"""System factory for the spring-driven control points."""
from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import TYPE_CHECKING, Callable, Protocol

from springline_spring.components import MAX_SPEED, SpringBody
from springline_spring.integrator import follow, step_spring

if TYPE_CHECKING:
    from springline import TickContext


class _Movable(Protocol):
    x: float
    y: float


class SpringRig(Protocol):
    """Anything holding the two driven springs and the four control points."""

    springs: Sequence[SpringBody]
    control_points: MutableSequence[_Movable]


# Spring i drives control point DRIVEN_POINTS[i]
DRIVEN_POINTS = (1, 2)


def make_spring_system(
    max_speed: float = MAX_SPEED,
) -> Callable[[SpringRig, "TickContext"], None]:
    """Step every spring, mirror them into P1/P2, then chain spring 1 to spring 0.

    The follow update runs after the copy, so the second spring reacts
    to the leader one tick late.
    """

    def spring_system(rig: SpringRig, ctx: "TickContext") -> None:
        for body in rig.springs:
            step_spring(body, ctx.dt, max_speed)

        for body, index in zip(rig.springs, DRIVEN_POINTS):
            point = rig.control_points[index]
            point.x = body.x
            point.y = body.y

        if len(rig.springs) > 1:
            follow(rig.springs[0], rig.springs[1], ctx.dt)

    return spring_system
