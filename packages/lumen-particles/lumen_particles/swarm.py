"""Ambient particle swarm: fixed-size population with per-tick lifetimes."""
from __future__ import annotations

import math
import random

from lumen import palette, vec
from lumen.canvas import Canvas
from lumen.spatial import SpatialHash
from lumen.types import Cursor, FrameContext, Size

from lumen_particles.components import Particle, SwarmConfig, SwarmState


def make_particle(size: Size, config: SwarmConfig, rng: random.Random) -> Particle:
    lo, hi = config.opacity_range
    return Particle(
        x=rng.random() * size.width,
        y=rng.random() * size.height,
        vx=(rng.random() - 0.5) * config.speed,
        vy=(rng.random() - 0.5) * config.speed,
        radius=rng.uniform(*config.size_range),
        color=palette.pick(config.tokens, rng).color,
        opacity=rng.uniform(lo, hi),
        max_life=rng.randint(*config.max_life_range),
    )


def populate(size: Size, config: SwarmConfig, rng: random.Random) -> SwarmState:
    state = SwarmState(size=size)
    if size.is_degenerate:
        return state
    state.particles = [make_particle(size, config, rng) for _ in range(config.count)]
    return state


def _bounce(p: Particle, width: float, height: float) -> None:
    if p.x <= 0:
        p.vx = abs(p.vx)
    elif p.x >= width:
        p.vx = -abs(p.vx)
    if p.y <= 0:
        p.vy = abs(p.vy)
    elif p.y >= height:
        p.vy = -abs(p.vy)


def step_swarm(
    state: SwarmState,
    ctx: FrameContext,
    cursor: Cursor,
    config: SwarmConfig,
) -> SwarmState:
    """One tick: age every particle, replacing the expired in place, then
    push, move and bounce the rest. Motion is scaled to ``tick_rate``."""
    rng = ctx.random
    steps = ctx.dt * config.tick_rate
    width, height = state.size.width, state.size.height
    particles = state.particles

    for i, p in enumerate(particles):
        p.life += 1
        if p.life >= p.max_life:
            particles[i] = make_particle(state.size, config, rng)
            continue

        if cursor.moving:
            d = vec.distance(p.x, p.y, cursor.x, cursor.y)
            if d < config.repel_radius:
                force = (config.repel_radius - d) / config.repel_radius
                angle = math.atan2(p.y - cursor.y, p.x - cursor.x)
                p.vx += math.cos(angle) * force * config.repel_force * steps
                p.vy += math.sin(angle) * force * config.repel_force * steps
                speed = math.hypot(p.vx, p.vy)
                if speed > config.max_speed:
                    p.vx *= config.max_speed / speed
                    p.vy *= config.max_speed / speed

        p.x += p.vx * steps
        p.y += p.vy * steps
        _bounce(p, width, height)

    state.ticks += 1
    return state


def draw_swarm(canvas: Canvas, state: SwarmState, config: SwarmConfig) -> None:
    if not canvas.available or not state.particles:
        return
    particles = state.particles
    fades = [p.fade(config.fade_ticks) for p in particles]

    grid = SpatialHash(config.connect_distance)
    grid.rebuild([(p.x, p.y) for p in particles])
    for i, j, _ in grid.pairs(config.connect_distance):
        alpha = config.line_alpha * min(fades[i], fades[j])
        canvas.line(particles[i].x, particles[i].y, particles[j].x, particles[j].y,
                    particles[i].color, alpha)

    for p, fade in zip(particles, fades):
        canvas.circle(p.x, p.y, p.radius, p.color, p.opacity * fade)


class Swarm:
    def __init__(self, config: SwarmConfig | None = None) -> None:
        self._config = config or SwarmConfig()
        self._state = SwarmState(size=Size(0.0, 0.0))

    @property
    def config(self) -> SwarmConfig:
        return self._config

    @property
    def state(self) -> SwarmState:
        return self._state

    def init(self, size: Size, rng: random.Random) -> None:
        self._state = populate(size, self._config, rng)

    def tick(self, ctx: FrameContext, cursor: Cursor) -> None:
        step_swarm(self._state, ctx, cursor, self._config)

    def draw(self, canvas: Canvas) -> None:
        draw_swarm(canvas, self._state, self._config)
