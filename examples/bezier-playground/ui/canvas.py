"""pygame renderer for springline RenderFrames."""
from __future__ import annotations

import pygame

from springline_curve import vec
from springline_scene import RenderFrame

from ui.constants import (
    BG_COLOR,
    CONTROL_LINE_COLOR,
    CONTROL_POINT_COLOR,
    CURVE_COLOR,
    CURVE_WIDTH,
    DASH,
    END_POINT_COLOR,
    GRID_COLOR,
    GRID_SIZE,
    OUTLINE_COLOR,
    POINT_RADIUS,
    POINTER_FILL,
    POINTER_RADIUS,
    TANGENT_COLOR,
    TANGENT_DOT_RADIUS,
    TANGENT_WIDTH,
)
from ui.hud import Hud


def _draw_dashed_line(
    surface: pygame.Surface,
    color: tuple[int, ...],
    start: tuple[float, float],
    end: tuple[float, float],
) -> None:
    length = vec.distance(start, end)
    if length == 0.0:
        return
    dashes = int(length // DASH)
    for i in range(0, dashes, 2):
        a = vec.lerp(start, end, i * DASH / length)
        b = vec.lerp(start, end, min((i + 1) * DASH / length, 1.0))
        pygame.draw.line(surface, color, a, b, 1)


class PygameRenderer:
    """Draws one frame per call, then the HUD, then flips the display."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font, hud: Hud) -> None:
        self._screen = screen
        self._font = font
        self._label_font = pygame.font.SysFont("arial", 14, bold=True)
        self._hud = hud
        w, h = screen.get_size()
        self._overlay = pygame.Surface((w, h), pygame.SRCALPHA)

    def draw(self, frame: RenderFrame) -> None:
        screen = self._screen
        profile = frame.profile

        screen.fill(BG_COLOR)
        if profile.fade_alpha > 0:
            fade = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
            fade.fill((*BG_COLOR, int(profile.fade_alpha * 255)))
            screen.blit(fade, (0, 0))

        self._overlay.fill((0, 0, 0, 0))
        if profile.grid_enabled:
            self._draw_grid()
        if profile.control_lines_enabled:
            p0, p1, p2, p3 = frame.control_points
            _draw_dashed_line(self._overlay, CONTROL_LINE_COLOR, p0, p1)
            _draw_dashed_line(self._overlay, CONTROL_LINE_COLOR, p2, p3)
        screen.blit(self._overlay, (0, 0))

        pygame.draw.lines(screen, CURVE_COLOR, False, frame.curve, CURVE_WIDTH)
        self._draw_tangents(frame)
        self._draw_control_points(frame)
        self._draw_pointer(frame)

        self._hud.draw(screen, self._font)
        pygame.display.flip()

    def _draw_grid(self) -> None:
        w, h = self._overlay.get_size()
        for x in range(0, w + 1, GRID_SIZE):
            pygame.draw.line(self._overlay, GRID_COLOR, (x, 0), (x, h))
        for y in range(0, h + 1, GRID_SIZE):
            pygame.draw.line(self._overlay, GRID_COLOR, (0, y), (w, y))

    def _draw_tangents(self, frame: RenderFrame) -> None:
        for line in frame.tangents:
            start = line.sample.point
            pygame.draw.line(self._screen, TANGENT_COLOR, start, line.end, TANGENT_WIDTH)
            pygame.draw.circle(self._screen, TANGENT_COLOR, start, TANGENT_DOT_RADIUS)
            if line.barbs is not None:
                for barb in line.barbs:
                    pygame.draw.line(self._screen, TANGENT_COLOR, line.end, barb, TANGENT_WIDTH)

    def _draw_control_points(self, frame: RenderFrame) -> None:
        last = len(frame.control_points) - 1
        for index, (x, y) in enumerate(frame.control_points):
            color = END_POINT_COLOR if index in (0, last) else CONTROL_POINT_COLOR
            pygame.draw.circle(self._screen, color, (x, y), POINT_RADIUS)
            pygame.draw.circle(self._screen, OUTLINE_COLOR, (x, y), POINT_RADIUS, 2)
            label = self._label_font.render(f"P{index}", True, OUTLINE_COLOR)
            self._screen.blit(label, label.get_rect(center=(x, y - 20)))

    def _draw_pointer(self, frame: RenderFrame) -> None:
        pointer = frame.pointer
        if not pointer.pressed:
            return
        center = (pointer.x, pointer.y)
        ring = pygame.Surface((POINTER_RADIUS * 2, POINTER_RADIUS * 2), pygame.SRCALPHA)
        pygame.draw.circle(ring, POINTER_FILL, (POINTER_RADIUS, POINTER_RADIUS), POINTER_RADIUS)
        self._screen.blit(ring, (pointer.x - POINTER_RADIUS, pointer.y - POINTER_RADIUS))
        pygame.draw.circle(self._screen, CONTROL_POINT_COLOR, center, POINTER_RADIUS, 2)
        hint = self._font.render("Drag", True, OUTLINE_COLOR)
        self._screen.blit(hint, hint.get_rect(center=(pointer.x, pointer.y + 30)))
