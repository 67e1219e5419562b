"""Bezier Playground - spring-driven cubic curve with adaptive quality.

Drag anywhere to pull P1; P2 follows it through its own spring. The frame
governor paces rendering to the target rate and lowers detail when frames
run long.

Controls:
  Drag        Bend the curve (mouse or touch)
  Up/Down     Stiffness +/- 0.05
  Left/Right  Damping -/+ 0.05
  R           Reset curve and quality
  Escape      Quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from springline import TickContext, TickScheduler, setup_logging
from springline_scene import ConfigError, SceneConfig, SceneController
from springline_scene.config import DEFAULT_DAMPING, DEFAULT_STIFFNESS
from springline_signal import SignalBus
from ui.canvas import PygameRenderer
from ui.constants import COEFFICIENT_STEP, FPS, HOST_HZ, SCREEN_H, SCREEN_W
from ui.hud import Hud


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Bezier Playground - springline visual demo")
    p.add_argument("--fps", type=int, default=FPS, help=f"Target render FPS (default: {FPS})")
    p.add_argument("--stiffness", type=float, default=DEFAULT_STIFFNESS,
                   help=f"Initial spring stiffness 0-1 (default: {DEFAULT_STIFFNESS})")
    p.add_argument("--damping", type=float, default=DEFAULT_DAMPING,
                   help=f"Initial spring damping 0-1 (default: {DEFAULT_DAMPING})")
    p.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return p.parse_args()


def handle_events(controller: SceneController, hud: Hud, ctx: TickContext) -> None:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            ctx.request_stop()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                ctx.request_stop()
            elif event.key == pygame.K_r:
                controller.reset()
            elif event.key == pygame.K_UP:
                hud.stiffness = controller.set_stiffness(hud.stiffness + COEFFICIENT_STEP)
            elif event.key == pygame.K_DOWN:
                hud.stiffness = controller.set_stiffness(hud.stiffness - COEFFICIENT_STEP)
            elif event.key == pygame.K_RIGHT:
                hud.damping = controller.set_damping(hud.damping + COEFFICIENT_STEP)
            elif event.key == pygame.K_LEFT:
                hud.damping = controller.set_damping(hud.damping - COEFFICIENT_STEP)
        elif event.type == pygame.MOUSEMOTION:
            if not getattr(event, "touch", False):
                controller.pointer_move(*event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if not getattr(event, "touch", False):
                controller.pointer_down(*event.pos)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            controller.pointer_up()
        elif event.type == pygame.WINDOWLEAVE:
            controller.pointer_leave()
        # Finger coordinates are normalized to the window
        elif event.type == pygame.FINGERDOWN:
            controller.touch_start(event.x * SCREEN_W, event.y * SCREEN_H)
        elif event.type == pygame.FINGERMOTION:
            controller.touch_move(event.x * SCREEN_W, event.y * SCREEN_H)
        elif event.type == pygame.FINGERUP:
            controller.pointer_up()


def main() -> None:
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = SceneConfig(
            stiffness=args.stiffness,
            damping=args.damping,
            target_fps=args.fps,
        )
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Bezier Playground")
    font = pygame.font.SysFont("monospace", 14)

    bus = SignalBus()
    hud = Hud(bus, config.stiffness, config.damping)
    controller = SceneController(
        config=config,
        renderer=PygameRenderer(screen, font, hud),
        bus=bus,
    )

    def host_callback(ctx: TickContext) -> None:
        handle_events(controller, hud, ctx)
        controller(ctx)

    scheduler = TickScheduler(host_callback, fps=HOST_HZ)
    scheduler.run_forever()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
