"""2D vector helpers operating on plain (x, y) floats."""
from __future__ import annotations

import math

Vec2 = tuple[float, float]


def distance(ax: float, ay: float, bx: float, by: float) -> float:
    return math.hypot(ax - bx, ay - by)


def away(fx: float, fy: float, tx: float, ty: float) -> Vec2:
    """Unit vector pointing from (fx, fy) to (tx, ty); zero when they coincide."""
    dx = tx - fx
    dy = ty - fy
    mag = math.hypot(dx, dy)
    if mag == 0.0:
        return (0.0, 0.0)
    return (dx / mag, dy / mag)
