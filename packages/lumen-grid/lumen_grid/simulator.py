"""WaveGrid - cursor-reactive spring lattice."""
from __future__ import annotations

import random

from lumen.canvas import Canvas
from lumen.types import Cursor, FrameContext, Size

from lumen_grid.components import Lattice, WaveGridConfig
from lumen_grid.lattice import build_lattice
from lumen_grid.systems import draw_grid, step_grid


class WaveGrid:
    def __init__(self, config: WaveGridConfig | None = None) -> None:
        self._config = config or WaveGridConfig()
        self._lattice = Lattice(rows=0, cols=0, spacing=self._config.spacing)

    @property
    def config(self) -> WaveGridConfig:
        return self._config

    @property
    def lattice(self) -> Lattice:
        return self._lattice

    def init(self, size: Size, rng: random.Random) -> None:
        self._lattice = build_lattice(size, self._config, rng)

    def tick(self, ctx: FrameContext, cursor: Cursor) -> None:
        step_grid(self._lattice, ctx.dt, cursor, self._config, ctx.random)

    def draw(self, canvas: Canvas) -> None:
        draw_grid(canvas, self._lattice, self._config)
