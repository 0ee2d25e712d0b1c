"""Wave grid entities and configuration."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class WaveGridConfig:
    """Immutable tuning for the wave grid.

    Attributes:
        spacing: Lattice pitch in logical pixels.
        wave_frequency: Spatial frequency of the traveling wave (radians/px).
        wave_amplitude: Peak wave offset in pixels.
        influence_radius: Cursor reach in pixels.
        influence_strength: Downward push at zero distance, in pixels.
        spring: Spring constant pulling a point toward its target.
        friction: Velocity retained per step (damper).
        dt_scale: Multiplier turning dt (seconds) into 60 Hz step units.
        max_displacement: Largest allowed distance from rest.
        connect_factor: Edges longer than spacing * connect_factor are skipped.
        base_hue: Hue (degrees) at the left edge.
        hue_spread: Hue change across the full width.
        size_range: Point radius range.
        opacity_base: Resting opacity.
        opacity_jitter: Random shimmer added each step.
        opacity_influence: Extra opacity at full cursor influence.
    """

    spacing: float = 60.0
    wave_frequency: float = 0.01
    wave_amplitude: float = 8.0
    influence_radius: float = 150.0
    influence_strength: float = 30.0
    spring: float = 0.08
    friction: float = 0.9
    dt_scale: float = 60.0
    max_displacement: float = 40.0
    connect_factor: float = 1.5
    base_hue: float = 220.0
    hue_spread: float = 80.0
    size_range: tuple[float, float] = (1.0, 2.5)
    opacity_base: float = 0.25
    opacity_jitter: float = 0.15
    opacity_influence: float = 0.6

    def __post_init__(self) -> None:
        if self.spacing <= 0:
            raise ValueError("spacing must be positive")
        if not 0.0 < self.friction < 1.0:
            raise ValueError("friction must be within (0, 1)")
        if self.max_displacement <= 0:
            raise ValueError("max_displacement must be positive")
        if self.influence_radius <= 0:
            raise ValueError("influence_radius must be positive")
        if self.influence_strength < 0:
            raise ValueError("influence_strength must be non-negative")

    @property
    def connect_distance(self) -> float:
        return self.spacing * self.connect_factor


@dataclass
class GridPoint:
    x: float
    y: float
    original_y: float
    row: int
    col: int
    size: float
    hue: float
    color: tuple[int, int, int]
    opacity: float
    max_displacement: float
    velocity: float = 0.0

    @property
    def displacement(self) -> float:
        return self.y - self.original_y


@dataclass
class Lattice:
    """A regenerated-on-resize mesh of GridPoints plus its simulation clock."""

    rows: int
    cols: int
    spacing: float
    points: list[GridPoint] = field(default_factory=list)
    clock: float = 0.0
    _index: dict[tuple[int, int], GridPoint] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.reindex()

    def reindex(self) -> None:
        self._index = {(p.row, p.col): p for p in self.points}

    def at(self, row: int, col: int) -> GridPoint | None:
        return self._index.get((row, col))

    def right_of(self, point: GridPoint) -> GridPoint | None:
        return self.at(point.row, point.col + 1)

    def below(self, point: GridPoint) -> GridPoint | None:
        return self.at(point.row + 1, point.col)

    def __len__(self) -> int:
        return len(self.points)
