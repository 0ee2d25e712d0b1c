"""Pixel-buffer gradient and noise helpers.

Buffers follow ``pygame.surfarray`` layout: shape ``(width, height, ...)``
with float channels in 0-255 until :func:`to_pixels` quantizes them.
"""
from __future__ import annotations

import numpy as np

from lumen.palette import Color


def radial_distance(
    width: int, height: int, center: tuple[float, float] = (0.5, 0.5)
) -> np.ndarray:
    """Distance of every pixel centre from ``center`` (fractions of the
    surface), normalized so the farthest corner is 1.0."""
    cx = center[0] * width
    cy = center[1] * height
    xs = np.arange(width, dtype=np.float64) + 0.5 - cx
    ys = np.arange(height, dtype=np.float64) + 0.5 - cy
    dist = np.sqrt(xs[:, None] ** 2 + ys[None, :] ** 2)
    reach = max(
        np.hypot(cx, cy),
        np.hypot(width - cx, cy),
        np.hypot(cx, height - cy),
        np.hypot(width - cx, height - cy),
    )
    if reach == 0:
        return np.zeros((width, height))
    return dist / reach


def _ramp(t: np.ndarray, start: Color, end: Color) -> np.ndarray:
    a = np.asarray(start, dtype=np.float64)
    b = np.asarray(end, dtype=np.float64)
    return a + (b - a) * t[..., None]


def radial_gradient(
    width: int,
    height: int,
    inner: Color,
    outer: Color,
    center: tuple[float, float] = (0.5, 0.5),
) -> np.ndarray:
    return _ramp(radial_distance(width, height, center), inner, outer)


def vertical_gradient(width: int, height: int, top: Color, bottom: Color) -> np.ndarray:
    if height <= 1:
        t = np.zeros((width, max(height, 0)))
    else:
        t = np.broadcast_to(np.linspace(0.0, 1.0, height)[None, :], (width, height))
    return _ramp(t, top, bottom)


def composite(base: np.ndarray, color: Color, alpha: np.ndarray | float) -> np.ndarray:
    """Source-over blend of a flat color onto ``base`` with per-pixel alpha."""
    a = np.asarray(alpha, dtype=np.float64)
    if a.ndim == 2:
        a = a[..., None]
    return base * (1.0 - a) + np.asarray(color, dtype=np.float64) * a


def vignette_alpha(
    width: int, height: int, strength: float, start: float
) -> np.ndarray:
    d = radial_distance(width, height)
    t = np.clip((d - start) / max(1.0 - start, 1e-6), 0.0, 1.0)
    return strength * t * t


def noise(width: int, height: int, rng: np.random.Generator) -> np.ndarray:
    return rng.random((width, height))


def to_pixels(buffer: np.ndarray) -> np.ndarray:
    return np.clip(np.rint(buffer), 0, 255).astype(np.uint8)
