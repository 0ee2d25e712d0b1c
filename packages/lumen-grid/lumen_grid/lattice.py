"""Lattice construction."""
from __future__ import annotations

import math
import random

from lumen.palette import hsl
from lumen.types import Size

from lumen_grid.components import GridPoint, Lattice, WaveGridConfig


def lattice_shape(size: Size, spacing: float) -> tuple[int, int]:
    """(rows, cols) that fit ``size``; (0, 0) for a degenerate surface."""
    if size.is_degenerate:
        return (0, 0)
    return (math.floor(size.height / spacing), math.floor(size.width / spacing))


def build_lattice(size: Size, config: WaveGridConfig, rng: random.Random) -> Lattice:
    """Generate a fresh lattice with points centred in their cells, at rest."""
    rows, cols = lattice_shape(size, config.spacing)
    half = config.spacing / 2
    lo, hi = config.size_range
    points: list[GridPoint] = []
    for row in range(rows):
        for col in range(cols):
            x = col * config.spacing + half
            y = row * config.spacing + half
            hue = config.base_hue + config.hue_spread * (x / size.width) + rng.uniform(-10, 10)
            points.append(
                GridPoint(
                    x=x,
                    y=y,
                    original_y=y,
                    row=row,
                    col=col,
                    size=rng.uniform(lo, hi),
                    hue=hue,
                    color=hsl(hue, 0.8, 0.6),
                    opacity=config.opacity_base,
                    max_displacement=config.max_displacement,
                )
            )
    return Lattice(rows=rows, cols=cols, spacing=config.spacing, points=points)
