"""Particle entities and configuration."""
from __future__ import annotations

from dataclasses import dataclass, field

from lumen.palette import FLOATING_TOKENS, SWARM_TOKENS
from lumen.types import Size


@dataclass(frozen=True)
class FloatingConfig:
    """Immutable tuning for the floating particle field.

    Attributes:
        area_per_particle: Surface area (px²) per ambient particle.
        max_particles: Upper bound on the ambient pool.
        speed_range: Drift speed in px/s.
        radius_range: Radius at depth 0 and depth 1.
        opacity_range: Opacity at depth 0 and depth 1.
        osc_speed_range: Vertical oscillation rate (rad/s).
        osc_distance_range: Vertical oscillation amplitude (px/s).
        wander_rate: Expected heading perturbations per second.
        wander_angle: Largest heading perturbation (radians).
        repel_radius: Cursor repulsion reach.
        repel_strength: Repulsion speed at zero distance (px/s).
        spawn_chance: Probability that one pointer-move sample spawns a trail particle.
        trail_ttl_range: Trail particle lifespan in seconds.
        max_trail: Cap on live trail particles.
        connect_distance: Particles closer than this are joined by a line.
        line_alpha: Peak opacity of connecting lines.
        tokens: Palette tokens particles draw their color from.
    """

    area_per_particle: float = 12000.0
    max_particles: int = 150
    speed_range: tuple[float, float] = (6.0, 24.0)
    radius_range: tuple[float, float] = (0.6, 3.2)
    opacity_range: tuple[float, float] = (0.15, 0.8)
    osc_speed_range: tuple[float, float] = (0.3, 1.2)
    osc_distance_range: tuple[float, float] = (2.0, 12.0)
    wander_rate: float = 1.5
    wander_angle: float = 0.6
    repel_radius: float = 120.0
    repel_strength: float = 90.0
    spawn_chance: float = 0.4
    trail_ttl_range: tuple[float, float] = (0.35, 1.2)
    max_trail: int = 60
    connect_distance: float = 100.0
    line_alpha: float = 0.15
    tokens: tuple[str, ...] = FLOATING_TOKENS

    def __post_init__(self) -> None:
        if self.area_per_particle <= 0:
            raise ValueError("area_per_particle must be positive")
        if not 0.0 <= self.spawn_chance <= 1.0:
            raise ValueError("spawn_chance must be within [0, 1]")
        if self.connect_distance <= 0:
            raise ValueError("connect_distance must be positive")

    def population(self, size: Size) -> int:
        if size.is_degenerate:
            return 0
        return min(self.max_particles, int(size.area // self.area_per_particle))

    def radius_at(self, depth: float) -> float:
        lo, hi = self.radius_range
        return lo + (hi - lo) * depth

    def opacity_at(self, depth: float) -> float:
        lo, hi = self.opacity_range
        return lo + (hi - lo) * depth


@dataclass(frozen=True)
class SwarmConfig:
    """Immutable tuning for the ambient particle swarm (per-tick units).

    Attributes:
        count: Constant population size.
        size_range: Particle radius range.
        max_life_range: Inclusive lifetime range in ticks.
        speed: Initial velocity spread per axis.
        opacity_range: Base opacity range.
        fade_ticks: Ticks spent fading in and out.
        repel_radius: Reach of the moving-cursor push.
        repel_force: Velocity added at zero distance.
        max_speed: Velocity magnitude cap.
        connect_distance: Particles closer than this are joined by a line.
        line_alpha: Opacity of connecting lines before fading.
        tick_rate: Frame rate at which one frame equals one tick of motion.
        tokens: Palette tokens particles draw their color from.
    """

    count: int = 100
    size_range: tuple[float, float] = (1.0, 4.0)
    max_life_range: tuple[int, int] = (50, 250)
    speed: float = 0.5
    opacity_range: tuple[float, float] = (0.1, 0.6)
    fade_ticks: int = 10
    repel_radius: float = 150.0
    repel_force: float = 0.2
    max_speed: float = 3.0
    connect_distance: float = 150.0
    line_alpha: float = 0.1
    tick_rate: float = 60.0
    tokens: tuple[str, ...] = SWARM_TOKENS

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must be non-negative")
        lo, hi = self.max_life_range
        if lo < 1 or hi < lo:
            raise ValueError("max_life_range must be positive and ordered")
        if self.fade_ticks < 0:
            raise ValueError("fade_ticks must be non-negative")


@dataclass
class FloatingParticle:
    x: float
    y: float
    radius: float
    color: tuple[int, int, int]
    speed: float
    angle: float
    osc_speed: float
    osc_distance: float
    osc_phase: float
    depth: float
    base_opacity: float
    ttl: float | None = None
    lifespan: float | None = None

    @property
    def is_trail(self) -> bool:
        return self.ttl is not None

    @property
    def opacity(self) -> float:
        if self.ttl is None or not self.lifespan:
            return self.base_opacity
        return self.base_opacity * max(0.0, self.ttl / self.lifespan)


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    color: tuple[int, int, int]
    opacity: float
    max_life: int
    life: int = 0

    def fade(self, fade_ticks: int) -> float:
        if fade_ticks <= 0:
            return 1.0
        if self.life < fade_ticks:
            return self.life / fade_ticks
        if self.life > self.max_life - fade_ticks:
            return (self.max_life - self.life) / fade_ticks
        return 1.0


@dataclass
class FloatingState:
    size: Size
    particles: list[FloatingParticle] = field(default_factory=list)

    @property
    def trail_count(self) -> int:
        return sum(1 for p in self.particles if p.is_trail)


@dataclass
class SwarmState:
    size: Size
    particles: list[Particle] = field(default_factory=list)
    ticks: int = 0
