"""Quality levels and their static rendering profiles."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping


class QualityLevel(IntEnum):
    """Ordered detail level. Higher value means more rendering work."""

    LOW = 0
    MEDIUM = 1
    HIGH = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class QualityProfile:
    """What the renderer should draw at a given quality level.

    Attributes:
        sample_count: Curve segments; the renderer receives sample_count + 1 points.
        tangent_params: Curve parameters at which tangents are drawn.
        grid_enabled: Background grid.
        control_lines_enabled: Dashed P0-P1 and P2-P3 handles.
        arrow_heads_enabled: Arrow heads on tangent lines.
        fade_alpha: Strength of the trail fade overlay.
    """

    sample_count: int
    tangent_params: tuple[float, ...]
    grid_enabled: bool
    control_lines_enabled: bool
    arrow_heads_enabled: bool
    fade_alpha: float

    def __post_init__(self) -> None:
        if self.sample_count <= 0:
            raise ValueError(f"sample_count must be positive, got {self.sample_count}")
        if not all(0.0 <= t <= 1.0 for t in self.tangent_params):
            raise ValueError(f"tangent params must lie in [0, 1], got {self.tangent_params}")
        if not 0.0 <= self.fade_alpha <= 1.0:
            raise ValueError(f"fade_alpha must lie in [0, 1], got {self.fade_alpha}")


PROFILES: Mapping[QualityLevel, QualityProfile] = MappingProxyType({
    QualityLevel.LOW: QualityProfile(
        sample_count=50,
        tangent_params=(0.5,),
        grid_enabled=False,
        control_lines_enabled=False,
        arrow_heads_enabled=False,
        fade_alpha=0.3,
    ),
    QualityLevel.MEDIUM: QualityProfile(
        sample_count=100,
        tangent_params=(0.0, 0.5, 1.0),
        grid_enabled=True,
        control_lines_enabled=True,
        arrow_heads_enabled=False,
        fade_alpha=0.2,
    ),
    QualityLevel.HIGH: QualityProfile(
        sample_count=200,
        tangent_params=(0.0, 0.25, 0.5, 0.75, 1.0),
        grid_enabled=True,
        control_lines_enabled=True,
        arrow_heads_enabled=True,
        fade_alpha=0.1,
    ),
})


class FpsBand(Enum):
    """Coarse rating of a measured frame rate, used for HUD colouring."""

    LOW = "low"
    GOOD = "good"
    HIGH = "high"


def classify_fps(fps: float, low_below: float = 58.0, high_from: float = 62.0) -> FpsBand:
    if fps < low_below:
        return FpsBand.LOW
    if fps < high_from:
        return FpsBand.GOOD
    return FpsBand.HIGH
