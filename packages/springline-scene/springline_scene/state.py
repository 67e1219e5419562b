"""Scene state owned by a single SceneController."""
from __future__ import annotations

from dataclasses import dataclass, field

from springline_curve import Point
from springline_spring import DRIVEN_POINTS, SpringBody

from springline_scene.config import SceneConfig


@dataclass
class ControlPoint:
    x: float
    y: float

    def as_tuple(self) -> Point:
        return (self.x, self.y)


@dataclass
class PointerState:
    """Last known pointer/touch position in canvas coordinates."""

    x: float = 0.0
    y: float = 0.0
    pressed: bool = False


@dataclass
class SceneState:
    control_points: list[ControlPoint]
    springs: list[SpringBody]
    pointer: PointerState = field(default_factory=PointerState)
    stiffness: float = 0.1
    damping: float = 0.9

    @classmethod
    def from_config(
        cls,
        config: SceneConfig,
        stiffness: float | None = None,
        damping: float | None = None,
    ) -> SceneState:
        """Fresh topology; stiffness/damping override the config values."""
        stiffness = config.stiffness if stiffness is None else stiffness
        damping = config.damping if damping is None else damping
        points = [ControlPoint(x, y) for x, y in config.initial_points]
        springs = [
            SpringBody.at_rest(points[i].x, points[i].y, stiffness, damping)
            for i in DRIVEN_POINTS
        ]
        return cls(
            control_points=points,
            springs=springs,
            stiffness=stiffness,
            damping=damping,
        )

    def points(self) -> tuple[Point, Point, Point, Point]:
        p0, p1, p2, p3 = (p.as_tuple() for p in self.control_points)
        return (p0, p1, p2, p3)
