"""lumen-grid - Spring-damper wave lattice reacting to the cursor."""
from __future__ import annotations

from lumen_grid.components import GridPoint, Lattice, WaveGridConfig
from lumen_grid.lattice import build_lattice, lattice_shape
from lumen_grid.simulator import WaveGrid
from lumen_grid.systems import cursor_influence, step_grid, wave_offset

__all__ = [
    "GridPoint",
    "Lattice",
    "WaveGrid",
    "WaveGridConfig",
    "build_lattice",
    "cursor_influence",
    "lattice_shape",
    "step_grid",
    "wave_offset",
]
