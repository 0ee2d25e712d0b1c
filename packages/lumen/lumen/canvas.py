"""Canvas - a drawing surface addressed in logical (CSS-like) units.

The backing ``pygame.Surface`` lives at physical resolution; every call
scales logical coordinates by the device pixel ratio. A canvas without a
surface is "unavailable" and silently ignores draw calls, so a missing
layer never breaks the frame.
"""
from __future__ import annotations

import numpy as np
import pygame
from pygame import gfxdraw

from lumen.palette import Color, mix


def _alpha(value: float) -> int:
    if value <= 0.0:
        return 0
    if value >= 1.0:
        return 255
    return int(value * 255)


class Canvas:
    def __init__(
        self,
        surface: pygame.Surface | None = None,
        scale: float = 1.0,
        opaque: bool = False,
    ) -> None:
        self._surface = surface
        self._scale = scale
        self._opaque = opaque
        self.draw_calls = 0

    @property
    def available(self) -> bool:
        return self._surface is not None

    @property
    def surface(self) -> pygame.Surface | None:
        return self._surface

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def opaque(self) -> bool:
        return self._opaque

    @property
    def physical_size(self) -> tuple[int, int]:
        if self._surface is None:
            return (0, 0)
        return self._surface.get_size()

    def attach(self, surface: pygame.Surface | None, scale: float) -> None:
        self._surface = surface
        self._scale = scale

    def detach(self) -> None:
        self.attach(None, self._scale)

    def _px(self, value: float) -> int:
        return int(round(value * self._scale))

    # -- Primitives (logical units) --

    def clear(self) -> None:
        if self._surface is None:
            return
        self._surface.fill((0, 0, 0) if self._opaque else (0, 0, 0, 0))

    def circle(self, x: float, y: float, radius: float, color: Color, alpha: float = 1.0) -> None:
        if self._surface is None:
            return
        a = _alpha(alpha)
        if a == 0:
            return
        px, py = self._px(x), self._px(y)
        r = self._px(radius)
        rgba = (color[0], color[1], color[2], a)
        if r < 1:
            gfxdraw.pixel(self._surface, px, py, rgba)
        else:
            gfxdraw.filled_circle(self._surface, px, py, r, rgba)
            gfxdraw.aacircle(self._surface, px, py, r, rgba)
        self.draw_calls += 1

    def line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        color: Color,
        alpha: float = 1.0,
    ) -> None:
        if self._surface is None:
            return
        a = _alpha(alpha)
        if a == 0:
            return
        gfxdraw.line(
            self._surface,
            self._px(x1),
            self._px(y1),
            self._px(x2),
            self._px(y2),
            (color[0], color[1], color[2], a),
        )
        self.draw_calls += 1

    def gradient_line(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        start: Color,
        end: Color,
        alpha: float = 1.0,
        segments: int = 4,
    ) -> None:
        """Stroke a line whose color blends from ``start`` to ``end``."""
        if self._surface is None or _alpha(alpha) == 0:
            return
        for i in range(segments):
            t0 = i / segments
            t1 = (i + 1) / segments
            color = mix(start, end, (t0 + t1) / 2)
            self.line(
                x1 + (x2 - x1) * t0,
                y1 + (y2 - y1) * t0,
                x1 + (x2 - x1) * t1,
                y1 + (y2 - y1) * t1,
                color,
                alpha,
            )

    def blit(self, source: pygame.Surface) -> None:
        if self._surface is None:
            return
        self._surface.blit(source, (0, 0))
        self.draw_calls += 1

    def blit_array(self, pixels: np.ndarray) -> None:
        """Copy an (width, height, 3) uint8 array onto the whole surface."""
        if self._surface is None:
            return
        if pixels.shape[:2] != self._surface.get_size():
            raise ValueError(
                f"Pixel buffer {pixels.shape[:2]} does not match surface {self._surface.get_size()}"
            )
        pygame.surfarray.blit_array(self._surface, pixels)
        self.draw_calls += 1
