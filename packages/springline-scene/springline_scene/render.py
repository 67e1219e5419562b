"""Render frame contents and the renderer protocol."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from springline_curve import Point, TangentSample, arrow_head, sample_curve, sample_tangents, vec
from springline_pacing import QualityLevel, QualityProfile

from springline_scene.config import ARROW_HEAD_LENGTH
from springline_scene.state import PointerState, SceneState


@dataclass(frozen=True)
class TangentLine:
    """A tangent drawn from a curve point; barbs is None when arrows are off."""

    sample: TangentSample
    end: Point
    barbs: tuple[Point, Point] | None


@dataclass(frozen=True)
class RenderFrame:
    """Everything a renderer needs for one accepted tick."""

    tick_number: int
    control_points: tuple[Point, Point, Point, Point]
    level: QualityLevel
    profile: QualityProfile
    curve: list[Point]
    tangents: list[TangentLine]
    pointer: PointerState


@runtime_checkable
class Renderer(Protocol):
    """Drawing collaborator. Makes no assumptions back into the core."""

    def draw(self, frame: RenderFrame) -> None:
        ...


class NullRenderer:
    """Draws nothing. Used for headless runs."""

    def draw(self, frame: RenderFrame) -> None:
        return None


def build_frame(
    state: SceneState,
    level: QualityLevel,
    profile: QualityProfile,
    tick_number: int,
    tangent_length: float,
) -> RenderFrame:
    points = state.points()
    tangents = []
    for sample in sample_tangents(points, profile.tangent_params):
        end = vec.add(sample.point, vec.scale(sample.direction, tangent_length))
        barbs = None
        if profile.arrow_heads_enabled:
            barbs = arrow_head(sample.point, end, ARROW_HEAD_LENGTH)
        tangents.append(TangentLine(sample=sample, end=end, barbs=barbs))

    pointer = state.pointer
    return RenderFrame(
        tick_number=tick_number,
        control_points=points,
        level=level,
        profile=profile,
        curve=sample_curve(points, profile.sample_count),
        tangents=tangents,
        pointer=PointerState(pointer.x, pointer.y, pointer.pressed),
    )
