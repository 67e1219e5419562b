"""Scene defaults and the immutable SceneConfig."""
from __future__ import annotations

from dataclasses import dataclass

from springline_spring import MAX_SPEED

# Spring coefficients exposed to the user, both in [0, 1]
DEFAULT_STIFFNESS = 0.1
DEFAULT_DAMPING = 0.9
COEFFICIENT_RANGE = (0.0, 1.0)

# P0..P3; P0 and P3 never move
DEFAULT_POINTS: tuple[tuple[float, float], ...] = (
    (100.0, 300.0),
    (200.0, 100.0),
    (400.0, 100.0),
    (500.0, 300.0),
)

PHYSICS_FPS = 60
TARGET_FPS = 60

TANGENT_LENGTH = 30.0
ARROW_HEAD_LENGTH = 10.0


class ConfigError(ValueError):
    """Raised when a SceneConfig is out of range."""


@dataclass(frozen=True)
class SceneConfig:
    """Immutable scene setup.

    Attributes:
        stiffness: Spring constant applied to both driven points.
        damping: Velocity damping applied to both driven points.
        initial_points: Four (x, y) control points P0..P3.
        physics_fps: Fixed physics rate; dt = 1 / physics_fps.
        target_fps: Render rate the governor paces to.
        max_speed: Spring speed cap in units per second.
        tangent_length: Length of the drawn tangent lines.
    """

    stiffness: float = DEFAULT_STIFFNESS
    damping: float = DEFAULT_DAMPING
    initial_points: tuple[tuple[float, float], ...] = DEFAULT_POINTS
    physics_fps: int = PHYSICS_FPS
    target_fps: int = TARGET_FPS
    max_speed: float = MAX_SPEED
    tangent_length: float = TANGENT_LENGTH

    def __post_init__(self) -> None:
        lo, hi = COEFFICIENT_RANGE
        if not lo <= self.stiffness <= hi:
            raise ConfigError(f"stiffness must be in [{lo}, {hi}], got {self.stiffness}")
        if not lo <= self.damping <= hi:
            raise ConfigError(f"damping must be in [{lo}, {hi}], got {self.damping}")
        if len(self.initial_points) != 4:
            raise ConfigError(
                f"a cubic curve needs exactly 4 control points, got {len(self.initial_points)}"
            )
        if self.physics_fps <= 0 or self.target_fps <= 0:
            raise ConfigError("physics_fps and target_fps must be positive")
        if self.max_speed <= 0:
            raise ConfigError(f"max_speed must be positive, got {self.max_speed}")


def clamp_coefficient(value: float) -> float:
    lo, hi = COEFFICIENT_RANGE
    return max(lo, min(hi, value))
