"""Star field: slow vertical drift, irregular twinkle, gradient backdrop."""
from __future__ import annotations

import random

import pygame

from lumen import palette
from lumen.canvas import Canvas
from lumen.types import Cursor, FrameContext, Size
from lumen_field import gradient

from lumen_stars.components import Star, StarConfig, StarState

WHITE = palette.resolve("white").color


def make_star(x: float, y: float, config: StarConfig, rng: random.Random) -> Star:
    lo, hi = config.radius_range
    radius = rng.uniform(lo, hi)
    weight = (radius / hi) ** 2
    if rng.random() < config.tint_chance * weight:
        color = palette.pick(config.tint_tokens, rng).color
    else:
        color = WHITE
    floor = rng.uniform(config.min_band, config.mid_band)
    ceiling = rng.uniform(config.mid_band, config.max_band)
    return Star(
        x=x,
        y=y,
        radius=radius,
        color=color,
        speed=rng.uniform(*config.speed_range),
        opacity=rng.uniform(floor, ceiling),
        twinkle_speed=rng.uniform(*config.twinkle_speed_range),
        twinkle_up=rng.random() < 0.5,
        floor=floor,
        ceiling=ceiling,
    )


def populate(size: Size, config: StarConfig, rng: random.Random) -> StarState:
    state = StarState(size=size)
    for _ in range(config.population(size)):
        state.stars.append(
            make_star(
                rng.uniform(0.0, size.width), rng.uniform(0.0, size.height), config, rng
            )
        )
    return state


def twinkle(star: Star, dt: float, config: StarConfig, rng: random.Random) -> None:
    """Move opacity toward the current bound; on reaching it, flip and
    re-roll the opposite bound inside the band."""
    step = star.twinkle_speed * dt
    if star.twinkle_up:
        star.opacity += step
        if star.opacity >= star.ceiling:
            star.opacity = star.ceiling
            star.twinkle_up = False
            star.floor = rng.uniform(config.min_band, config.mid_band)
    else:
        star.opacity -= step
        if star.opacity <= star.floor:
            star.opacity = star.floor
            star.twinkle_up = True
            star.ceiling = rng.uniform(config.mid_band, config.max_band)


def step_stars(state: StarState, ctx: FrameContext, config: StarConfig) -> StarState:
    rng = ctx.random
    width, height = state.size.width, state.size.height
    for star in state.stars:
        star.y += star.speed * ctx.dt
        if star.y > height:
            star.y = 0.0
            star.x = rng.uniform(0.0, width)
        twinkle(star, ctx.dt, config, rng)
    return state


def draw_stars(canvas: Canvas, state: StarState) -> None:
    if not canvas.available:
        return
    for star in state.stars:
        canvas.circle(star.x, star.y, star.radius, star.color, star.opacity)


class StarField:
    def __init__(self, config: StarConfig | None = None) -> None:
        self._config = config or StarConfig()
        self._state = StarState(size=Size(0.0, 0.0))
        self._backdrop: pygame.Surface | None = None

    @property
    def config(self) -> StarConfig:
        return self._config

    @property
    def state(self) -> StarState:
        return self._state

    def init(self, size: Size, rng: random.Random) -> None:
        self._state = populate(size, self._config, rng)
        self._backdrop = None

    def tick(self, ctx: FrameContext, cursor: Cursor) -> None:
        step_stars(self._state, ctx, self._config)

    def draw(self, canvas: Canvas) -> None:
        if not canvas.available:
            return
        canvas.blit(self._backdrop_for(canvas))
        draw_stars(canvas, self._state)

    def _backdrop_for(self, canvas: Canvas) -> pygame.Surface:
        width, height = canvas.physical_size
        if self._backdrop is None or self._backdrop.get_size() != (width, height):
            pixels = gradient.to_pixels(
                gradient.vertical_gradient(
                    width, height, self._config.backdrop_top, self._config.backdrop_bottom
                )
            )
            self._backdrop = pygame.surfarray.make_surface(pixels)
        return self._backdrop
