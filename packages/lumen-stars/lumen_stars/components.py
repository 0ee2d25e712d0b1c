"""Star entities and configuration."""
from __future__ import annotations

from dataclasses import dataclass, field

from lumen.palette import STAR_TINT_TOKENS, Color
from lumen.types import Size


@dataclass(frozen=True)
class StarConfig:
    """Immutable tuning for the star field.

    Attributes:
        area_per_star: Surface area (px²) per star.
        radius_range: Star radius range.
        speed_range: Downward drift in px/s.
        min_band: Lowest opacity a star may reach.
        max_band: Highest opacity a star may reach.
        twinkle_speed_range: Opacity change per second.
        tint_chance: Tint probability for the largest stars; smaller stars
            scale it down by (radius / max radius)².
        backdrop_top: Backdrop color at the top edge.
        backdrop_bottom: Backdrop color at the bottom edge.
        tint_tokens: Palette tokens for tinted stars.
    """

    area_per_star: float = 20000.0
    radius_range: tuple[float, float] = (0.3, 1.8)
    speed_range: tuple[float, float] = (2.0, 9.0)
    min_band: float = 0.15
    max_band: float = 1.0
    twinkle_speed_range: tuple[float, float] = (0.2, 0.9)
    tint_chance: float = 0.3
    backdrop_top: Color = (8, 10, 28)
    backdrop_bottom: Color = (2, 2, 8)
    tint_tokens: tuple[str, ...] = STAR_TINT_TOKENS

    def __post_init__(self) -> None:
        if self.area_per_star <= 0:
            raise ValueError("area_per_star must be positive")
        if not 0.0 <= self.min_band < self.max_band <= 1.0:
            raise ValueError("opacity band must satisfy 0 <= min_band < max_band <= 1")

    @property
    def mid_band(self) -> float:
        return (self.min_band + self.max_band) / 2

    def population(self, size: Size) -> int:
        if size.is_degenerate:
            return 0
        return int(size.area // self.area_per_star)


@dataclass
class Star:
    x: float
    y: float
    radius: float
    color: Color
    speed: float
    opacity: float
    twinkle_speed: float
    twinkle_up: bool
    floor: float
    ceiling: float


@dataclass
class StarState:
    size: Size
    stars: list[Star] = field(default_factory=list)
