"""Floating particle field: depth-layered drifters with cursor trails."""
from __future__ import annotations

import math
import random

from lumen import palette, vec
from lumen.canvas import Canvas
from lumen.spatial import SpatialHash
from lumen.types import Cursor, FrameContext, Size

from lumen_particles.components import FloatingConfig, FloatingParticle, FloatingState


def make_floating(
    x: float,
    y: float,
    config: FloatingConfig,
    rng: random.Random,
    depth: float | None = None,
    ttl: float | None = None,
) -> FloatingParticle:
    if depth is None:
        depth = rng.random()
    return FloatingParticle(
        x=x,
        y=y,
        radius=config.radius_at(depth),
        color=palette.pick(config.tokens, rng).color,
        speed=rng.uniform(*config.speed_range),
        angle=rng.uniform(0.0, math.tau),
        osc_speed=rng.uniform(*config.osc_speed_range),
        osc_distance=rng.uniform(*config.osc_distance_range),
        osc_phase=rng.uniform(0.0, math.tau),
        depth=depth,
        base_opacity=config.opacity_at(depth),
        ttl=ttl,
        lifespan=ttl,
    )


def populate(size: Size, config: FloatingConfig, rng: random.Random) -> FloatingState:
    state = FloatingState(size=size)
    for _ in range(config.population(size)):
        state.particles.append(
            make_floating(
                rng.uniform(0.0, size.width), rng.uniform(0.0, size.height), config, rng
            )
        )
    return state


def spawn_trail(
    state: FloatingState, x: float, y: float, config: FloatingConfig, rng: random.Random
) -> FloatingParticle | None:
    """Inject a short-lived particle at the cursor, unless the trail cap is reached."""
    if state.trail_count >= config.max_trail:
        return None
    particle = make_floating(
        x,
        y,
        config,
        rng,
        depth=rng.uniform(0.5, 1.0),
        ttl=rng.uniform(*config.trail_ttl_range),
    )
    state.particles.append(particle)
    return particle


def _wrap(p: FloatingParticle, width: float, height: float) -> None:
    margin = 2 * p.radius
    if p.x < -margin:
        p.x = width + margin
    elif p.x > width + margin:
        p.x = -margin
    if p.y < -margin:
        p.y = height + margin
    elif p.y > height + margin:
        p.y = -margin


def _off_surface(p: FloatingParticle, width: float, height: float) -> bool:
    margin = 2 * p.radius
    return p.x < -margin or p.x > width + margin or p.y < -margin or p.y > height + margin


def step_floating(
    state: FloatingState,
    ctx: FrameContext,
    cursor: Cursor,
    config: FloatingConfig,
) -> FloatingState:
    """Advance every particle by ``ctx.dt``; spawn trails for this frame's
    pointer moves. Trail particles expire or leave; ambient ones wrap."""
    rng = ctx.random
    dt = ctx.dt
    width, height = state.size.width, state.size.height

    for mx, my in cursor.moves:
        if rng.random() < config.spawn_chance:
            spawn_trail(state, mx, my, config, rng)

    survivors: list[FloatingParticle] = []
    for p in state.particles:
        if p.ttl is not None:
            p.ttl -= dt
            if p.ttl <= 0:
                continue

        p.x += math.cos(p.angle) * p.speed * dt
        p.y += (
            math.sin(p.angle) * p.speed * dt
            + math.sin(ctx.elapsed * p.osc_speed + p.osc_phase) * p.osc_distance * dt
        )

        if rng.random() < config.wander_rate * dt:
            p.angle += rng.uniform(-config.wander_angle, config.wander_angle)

        if cursor.active:
            d = vec.distance(cursor.x, cursor.y, p.x, p.y)
            if d < config.repel_radius:
                push = (1.0 - d / config.repel_radius) * config.repel_strength * (0.5 + p.depth)
                ux, uy = vec.away(cursor.x, cursor.y, p.x, p.y)
                p.x += ux * push * dt
                p.y += uy * push * dt

        if p.is_trail:
            if _off_surface(p, width, height):
                continue
        else:
            _wrap(p, width, height)
        survivors.append(p)

    state.particles = survivors
    return state


def draw_floating(canvas: Canvas, state: FloatingState, config: FloatingConfig) -> None:
    if not canvas.available or not state.particles:
        return
    particles = state.particles
    grid = SpatialHash(config.connect_distance)
    grid.rebuild([(p.x, p.y) for p in particles])
    for i, j, d in grid.pairs(config.connect_distance):
        a, b = particles[i], particles[j]
        alpha = config.line_alpha * (1.0 - d / config.connect_distance) * min(a.opacity, b.opacity)
        canvas.line(a.x, a.y, b.x, b.y, a.color, alpha)
    for p in sorted(particles, key=lambda q: q.depth):
        canvas.circle(p.x, p.y, p.radius, p.color, p.opacity)


class FloatingField:
    def __init__(self, config: FloatingConfig | None = None) -> None:
        self._config = config or FloatingConfig()
        self._state = FloatingState(size=Size(0.0, 0.0))

    @property
    def config(self) -> FloatingConfig:
        return self._config

    @property
    def state(self) -> FloatingState:
        return self._state

    def init(self, size: Size, rng: random.Random) -> None:
        self._state = populate(size, self._config, rng)

    def tick(self, ctx: FrameContext, cursor: Cursor) -> None:
        step_floating(self._state, ctx, cursor, self._config)

    def draw(self, canvas: Canvas) -> None:
        draw_floating(canvas, self._state, self._config)
