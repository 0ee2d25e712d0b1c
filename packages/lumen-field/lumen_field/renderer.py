"""FieldRenderer - one-shot backdrop painter, repainted on resize only."""
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from lumen.canvas import Canvas
from lumen.palette import Color
from lumen_field import gradient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldConfig:
    """Immutable configuration for the background field.

    Attributes:
        center_color: Light tone at the middle of the radial gradient.
        edge_color: Near-black tone at the farthest corner.
        center: Gradient centre as fractions of width and height.
        vignette_color: Color darkened in toward the edges.
        vignette_strength: Vignette alpha at the corners (0-1).
        vignette_start: Normalized radius where the vignette begins.
        noise_alpha: Opacity of the per-pixel noise texture.
        seed: Noise seed; combined with the surface size so a repaint at
            the same size is pixel-identical.
        grid_overlay: Draw the faint grid, accent line and dots on top.
        grid_size: Spacing of the overlay grid in logical pixels.
        accent_color: Color of the overlay accent line.
    """

    center_color: Color = (46, 40, 82)
    edge_color: Color = (6, 6, 14)
    center: tuple[float, float] = (0.5, 0.4)
    vignette_color: Color = (0, 0, 0)
    vignette_strength: float = 0.55
    vignette_start: float = 0.45
    noise_alpha: float = 0.035
    seed: int = 7
    grid_overlay: bool = False
    grid_size: float = 64.0
    accent_color: Color = (255, 82, 82)

    def __post_init__(self) -> None:
        if not 0.0 <= self.vignette_strength <= 1.0:
            raise ValueError("vignette_strength must be within [0, 1]")
        if not 0.0 <= self.noise_alpha <= 1.0:
            raise ValueError("noise_alpha must be within [0, 1]")
        if self.grid_size <= 0:
            raise ValueError("grid_size must be positive")


class FieldRenderer:
    def __init__(self, config: FieldConfig | None = None) -> None:
        self._config = config or FieldConfig()

    @property
    def config(self) -> FieldConfig:
        return self._config

    def render(self, width: int, height: int) -> np.ndarray:
        """Return the gradient + vignette + noise buffer as uint8 pixels."""
        cfg = self._config
        buf = gradient.radial_gradient(
            width, height, cfg.center_color, cfg.edge_color, cfg.center
        )
        buf = gradient.composite(
            buf,
            cfg.vignette_color,
            gradient.vignette_alpha(width, height, cfg.vignette_strength, cfg.vignette_start),
        )
        if cfg.noise_alpha > 0.0:
            rng = np.random.default_rng([cfg.seed, width, height])
            grain = gradient.noise(width, height, rng) * 255.0
            buf = buf * (1.0 - cfg.noise_alpha) + grain[..., None] * cfg.noise_alpha
        return gradient.to_pixels(buf)

    def paint(self, canvas: Canvas) -> None:
        if not canvas.available:
            logger.warning("field layer has no drawing surface; skipping paint")
            return
        width, height = canvas.physical_size
        if width == 0 or height == 0:
            return
        canvas.blit_array(self.render(width, height))
        if self._config.grid_overlay:
            self._paint_overlay(canvas, width / canvas.scale, height / canvas.scale)
        logger.debug("field painted at %dx%d", width, height)

    def _paint_overlay(self, canvas: Canvas, width: float, height: float) -> None:
        cfg = self._config
        step = cfg.grid_size
        white = (255, 255, 255)

        for heavy, every, alpha in ((False, step, 0.05), (True, step * 4, 0.08)):
            x = 0.0
            while x <= width:
                canvas.line(x, 0, x, height, white, alpha)
                if heavy:
                    canvas.line(x + 1, 0, x + 1, height, white, alpha)
                x += every
            y = 0.0
            while y <= height:
                canvas.line(0, y, width, y, white, alpha)
                if heavy:
                    canvas.line(0, y + 1, width, y + 1, white, alpha)
                y += every

        accent_y = height / 3
        canvas.line(0, accent_y, width, accent_y, cfg.accent_color, 0.4)
        canvas.line(0, accent_y + 1, width, accent_y + 1, cfg.accent_color, 0.4)

        x = 0.0
        while x <= width:
            y = 0.0
            while y <= height:
                canvas.circle(x, y, 2, white, 0.1)
                y += step * 4
            x += step * 4

        rng = np.random.default_rng([cfg.seed, int(width), int(height), 1])
        count = int(width * height / 10000)
        for px, py, size in zip(
            rng.random(count) * width,
            rng.random(count) * height,
            rng.random(count) * 2,
        ):
            canvas.circle(float(px), float(py), float(size), white, 0.04)
