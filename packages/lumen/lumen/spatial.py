"""SpatialHash - uniform bucket grid for near-neighbour queries."""
from __future__ import annotations

import math
from typing import Iterator


class SpatialHash:
    """Buckets items by cell so pairs within ``cell_size`` are found
    without an all-pairs scan.

    Items are referenced by integer index (the position in the caller's
    entity list). Rebuild once per frame with :meth:`rebuild`.
    """

    def __init__(self, cell_size: float) -> None:
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self._cell_size = cell_size
        self._cells: dict[tuple[int, int], list[int]] = {}
        self._points: list[tuple[float, float]] = []

    @property
    def cell_size(self) -> float:
        return self._cell_size

    def __len__(self) -> int:
        return len(self._points)

    def _key(self, x: float, y: float) -> tuple[int, int]:
        return (math.floor(x / self._cell_size), math.floor(y / self._cell_size))

    def clear(self) -> None:
        self._cells.clear()
        self._points.clear()

    def insert(self, x: float, y: float) -> int:
        index = len(self._points)
        self._points.append((x, y))
        self._cells.setdefault(self._key(x, y), []).append(index)
        return index

    def rebuild(self, points: list[tuple[float, float]]) -> None:
        self.clear()
        for x, y in points:
            self.insert(x, y)

    def pairs(self, radius: float) -> Iterator[tuple[int, int, float]]:
        """Yield ``(i, j, distance)`` for every pair with i < j closer than ``radius``."""
        r_sq = radius * radius
        span = max(1, math.ceil(radius / self._cell_size))
        for (cx, cy), members in self._cells.items():
            for gx in range(cx - span, cx + span + 1):
                for gy in range(cy - span, cy + span + 1):
                    others = self._cells.get((gx, gy))
                    if not others:
                        continue
                    for i in members:
                        ix, iy = self._points[i]
                        for j in others:
                            if j <= i:
                                continue
                            jx, jy = self._points[j]
                            d_sq = (ix - jx) ** 2 + (iy - jy) ** 2
                            if d_sq < r_sq:
                                yield i, j, math.sqrt(d_sq)
