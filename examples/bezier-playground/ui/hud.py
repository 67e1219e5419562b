"""HUD overlay - FPS, quality, spring coefficients and the performance warning."""
from __future__ import annotations

import pygame

from springline_pacing import signals
from springline_signal import SignalBus

from ui.constants import (
    FPS_BAND_COLORS,
    HUD_PAD,
    LINE_H,
    OUTLINE_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
    WARNING_BG,
)


class Hud:
    """Presentation state fed only by governor signals and slider changes."""

    def __init__(self, bus: SignalBus, stiffness: float, damping: float) -> None:
        self.fps: int | None = None
        self.fps_color = TEXT_COLOR
        self.quality = "High"
        self.warning_visible = False
        self.stiffness = stiffness
        self.damping = damping

        bus.subscribe(signals.FPS_REPORT, self._on_fps_report)
        bus.subscribe(signals.QUALITY_CHANGED, self._on_quality_changed)
        bus.subscribe(signals.WARNING_SHOWN, self._on_warning_shown)
        bus.subscribe(signals.WARNING_HIDDEN, self._on_warning_hidden)

    def _on_fps_report(self, signal_name: str, data: dict) -> None:
        self.fps = data["fps"]
        self.quality = data["quality"]
        self.fps_color = FPS_BAND_COLORS.get(data["band"].value, TEXT_COLOR)

    def _on_quality_changed(self, signal_name: str, data: dict) -> None:
        self.quality = data["level"]

    def _on_warning_shown(self, signal_name: str, data: dict) -> None:
        self.warning_visible = True

    def _on_warning_hidden(self, signal_name: str, data: dict) -> None:
        self.warning_visible = False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        x = HUD_PAD
        y = HUD_PAD
        fps_text = "--" if self.fps is None else str(self.fps)
        surface.blit(font.render("FPS: ", True, TEXT_DIM), (x, y))
        surface.blit(font.render(fps_text, True, self.fps_color), (x + 50, y))
        y += LINE_H
        surface.blit(font.render(f"Quality: {self.quality}", True, TEXT_DIM), (x, y))
        y += LINE_H
        surface.blit(
            font.render(
                f"Stiffness: {self.stiffness:.2f}  Damping: {self.damping:.2f}",
                True,
                TEXT_COLOR,
            ),
            (x, y),
        )

        w, h = surface.get_size()
        hint = font.render(
            "[Drag] Bend  [Up/Down] Stiffness  [Left/Right] Damping  [R] Reset  [Esc] Quit",
            True,
            TEXT_DIM,
        )
        surface.blit(hint, (x, h - HUD_PAD - hint.get_height()))

        if self.warning_visible:
            text = font.render("Quality lowered to maintain 60 FPS", True, OUTLINE_COLOR)
            box = text.get_rect(topright=(w - 20, 20)).inflate(30, 20)
            banner = pygame.Surface(box.size, pygame.SRCALPHA)
            banner.fill(WARNING_BG)
            surface.blit(banner, box.topleft)
            surface.blit(text, text.get_rect(center=box.center))
