"""
lumen Backdrop
Resizable window hosting the lumen simulators over the gradient field.

Controls:
  1-4     Switch scene (grid, particles, swarm, stars)
  O       Toggle the grid overlay on the field layer
  H       Toggle HUD
  Esc     Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
import time

import pygame

from lumen import EventBus, FrameScheduler, Mount, Simulator, Viewport
from lumen.bus import POINTER_LEAVE, POINTER_MOVE, RESIZE
from lumen_field import FieldConfig, FieldRenderer
from lumen_grid import WaveGrid
from lumen_particles import FloatingField, Swarm
from lumen_stars import StarField

from ui.constants import FPS, HEIGHT, HUD_COLOR, HUD_FONT, HUD_FONT_SIZE, HUD_SHADOW, SCENES, TITLE, WIDTH


def make_simulator(scene: str) -> Simulator:
    if scene == "grid":
        return WaveGrid()
    if scene == "particles":
        return FloatingField()
    if scene == "swarm":
        return Swarm()
    if scene == "stars":
        return StarField()
    raise ValueError(f"Unknown scene {scene!r}")


class Backdrop:
    """Owns the viewport, layers and scheduler for one window."""

    def __init__(self, width: int, height: int, dpr: float, seed: int | None, overlay: bool) -> None:
        self.bus = EventBus()
        self.viewport = Viewport(width, height, dpr)
        self.field_layer = self.viewport.create_layer(opaque=True)
        self.sim_layer = self.viewport.create_layer()
        self.scheduler = FrameScheduler(self.viewport, self.bus, seed=seed)
        self.overlay = overlay
        self.field = FieldRenderer(FieldConfig(grid_overlay=overlay))
        self.scheduler.on_resize(self._repaint_field)
        self.scene = SCENES[0]
        self.mount: Mount | None = None

    def _repaint_field(self, viewport: Viewport) -> None:
        self.field.paint(self.field_layer)

    def switch(self, scene: str) -> None:
        if self.mount is not None:
            self.scheduler.unmount(self.mount)
        self.scene = scene
        self.mount = self.scheduler.mount(make_simulator(scene), self.sim_layer)

    def toggle_overlay(self) -> None:
        self.overlay = not self.overlay
        self.field = FieldRenderer(FieldConfig(grid_overlay=self.overlay))
        self.field.paint(self.field_layer)

    def composite(self, screen: pygame.Surface) -> None:
        size = screen.get_size()
        for layer in (self.field_layer, self.sim_layer):
            surface = layer.surface
            if surface is None:
                continue
            if surface.get_size() != size:
                surface = pygame.transform.smoothscale(surface, size)
            screen.blit(surface, (0, 0))


def entity_count(backdrop: Backdrop) -> int:
    if backdrop.mount is None:
        return 0
    sim = backdrop.mount.simulator
    if isinstance(sim, WaveGrid):
        return len(sim.lattice)
    if isinstance(sim, (FloatingField, Swarm)):
        return len(sim.state.particles)
    if isinstance(sim, StarField):
        return len(sim.state.stars)
    return 0


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, backdrop: Backdrop, fps: float) -> None:
    lines = [
        f"Scene: {backdrop.scene}   Entities: {entity_count(backdrop)}   FPS: {fps:.0f}",
        "1-4=Scene  O=Overlay  H=HUD  Esc=Quit",
    ]
    for i, line in enumerate(lines):
        screen.blit(font.render(line, True, HUD_SHADOW), (11, 9 + i * 20))
        screen.blit(font.render(line, True, HUD_COLOR), (10, 8 + i * 20))


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument("--scene", choices=SCENES, default=SCENES[0])
    parser.add_argument("--dpr", type=float, default=1.0, help="device pixel ratio of the layers")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--overlay", action="store_true", help="draw the grid overlay")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont(HUD_FONT, HUD_FONT_SIZE)

    backdrop = Backdrop(WIDTH, HEIGHT, args.dpr, args.seed, args.overlay)
    backdrop.switch(args.scene)
    backdrop.scheduler.start()

    show_hud = True
    running = True

    while running:
        pg_clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_o:
                    backdrop.toggle_overlay()
                elif event.key == pygame.K_h:
                    show_hud = not show_hud
                elif pygame.K_1 <= event.key < pygame.K_1 + len(SCENES):
                    backdrop.switch(SCENES[event.key - pygame.K_1])
            elif event.type == pygame.VIDEORESIZE:
                backdrop.bus.emit(RESIZE, width=event.w, height=event.h, dpr=args.dpr)
            elif event.type == pygame.MOUSEMOTION:
                mx, my = event.pos
                backdrop.bus.emit(POINTER_MOVE, x=mx, y=my)
            elif event.type == pygame.WINDOWLEAVE:
                backdrop.bus.emit(POINTER_LEAVE)

        # --- Update + draw ---
        backdrop.scheduler.frame(time.monotonic())
        backdrop.composite(screen)
        if show_hud:
            draw_hud(screen, font, backdrop, pg_clock.get_fps())

        pygame.display.flip()

    backdrop.scheduler.stop()
    backdrop.viewport.release()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
