"""Wave grid step and draw functions."""
from __future__ import annotations

import math
import random
from typing import Iterator

from lumen import vec
from lumen.canvas import Canvas
from lumen.types import Cursor

from lumen_grid.components import GridPoint, Lattice, WaveGridConfig

BOUNCE = -0.5


def wave_offset(clock: float, x: float, config: WaveGridConfig) -> float:
    return math.sin(clock + x * config.wave_frequency) * config.wave_amplitude


def cursor_influence(point: GridPoint, cursor: Cursor, config: WaveGridConfig) -> float:
    """One-sided push (downward only); zero outside the radius or with no cursor."""
    if not cursor.active:
        return 0.0
    d = vec.distance(cursor.x, cursor.y, point.x, point.y)
    return max(0.0, 1.0 - d / config.influence_radius) * config.influence_strength


def step_point(
    point: GridPoint,
    clock: float,
    dt: float,
    cursor: Cursor,
    config: WaveGridConfig,
    rng: random.Random,
) -> None:
    influence = cursor_influence(point, cursor, config)
    target = point.original_y + wave_offset(clock, point.x, config)
    if influence > 0:
        target += influence

    force = config.spring * (target - point.y)
    point.velocity = (point.velocity + force * dt * config.dt_scale) * config.friction
    point.y += point.velocity

    offset = point.y - point.original_y
    if abs(offset) > point.max_displacement:
        point.y = point.original_y + math.copysign(point.max_displacement, offset)
        point.velocity *= BOUNCE

    # Zero strength disables the push, so there is no influence to brighten by.
    ratio = influence / config.influence_strength if config.influence_strength > 0 else 0.0
    point.opacity = min(
        1.0,
        config.opacity_base
        + rng.random() * config.opacity_jitter
        + ratio * config.opacity_influence,
    )


def step_grid(
    lattice: Lattice,
    dt: float,
    cursor: Cursor,
    config: WaveGridConfig,
    rng: random.Random,
) -> Lattice:
    """Advance the lattice clock by ``dt`` seconds and integrate every point.

    Points are updated in place; the same lattice is returned.
    """
    lattice.clock += dt
    for point in lattice.points:
        step_point(point, lattice.clock, dt, cursor, config, rng)
    return lattice


def iter_edges(
    lattice: Lattice, max_length: float
) -> Iterator[tuple[GridPoint, GridPoint]]:
    """Yield (a, b) for right/below neighbours closer than ``max_length``."""
    for point in lattice.points:
        for other in (lattice.right_of(point), lattice.below(point)):
            if other is None:
                continue
            if vec.distance(point.x, point.y, other.x, other.y) < max_length:
                yield point, other


def draw_grid(canvas: Canvas, lattice: Lattice, config: WaveGridConfig) -> None:
    if not canvas.available:
        return
    for a, b in iter_edges(lattice, config.connect_distance):
        canvas.gradient_line(
            a.x, a.y, b.x, b.y, a.color, b.color, (a.opacity + b.opacity) * 0.3
        )
    for p in lattice.points:
        canvas.circle(p.x, p.y, p.size, p.color, p.opacity)
