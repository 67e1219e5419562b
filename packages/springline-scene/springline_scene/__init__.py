"""springline-scene - Scene state and controller for the spring-driven Bezier curve."""
from __future__ import annotations

from springline_scene.config import ConfigError, SceneConfig
from springline_scene.controller import SceneController
from springline_scene.render import (
    NullRenderer,
    RenderFrame,
    Renderer,
    TangentLine,
    build_frame,
)
from springline_scene.state import ControlPoint, PointerState, SceneState

__all__ = [
    "ConfigError",
    "ControlPoint",
    "NullRenderer",
    "PointerState",
    "RenderFrame",
    "Renderer",
    "SceneConfig",
    "SceneController",
    "SceneState",
    "TangentLine",
    "build_frame",
]
