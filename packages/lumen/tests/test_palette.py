"""Tests for the color token table and color helpers."""

import random

import pytest
from lumen import palette


def test_every_token_group_resolves():
    for group in (palette.SWARM_TOKENS, palette.FLOATING_TOKENS, palette.STAR_TINT_TOKENS):
        for token in group:
            style = palette.resolve(token)
            assert len(style.color) == 3
            assert all(0 <= c <= 255 for c in style.color)


def test_unknown_token_raises():
    with pytest.raises(KeyError, match="plaid"):
        palette.resolve("plaid")


def test_pick_draws_from_group():
    rng = random.Random(3)
    allowed = {palette.resolve(t).color for t in palette.SWARM_TOKENS}
    for _ in range(20):
        assert palette.pick(palette.SWARM_TOKENS, rng).color in allowed


def test_hsl_primaries():
    assert palette.hsl(0, 1.0, 0.5) == (255, 0, 0)
    assert palette.hsl(120, 1.0, 0.5) == (0, 255, 0)
    assert palette.hsl(240, 1.0, 0.5) == (0, 0, 255)


def test_hsl_wraps_hue():
    assert palette.hsl(360, 1.0, 0.5) == palette.hsl(0, 1.0, 0.5)
    assert palette.hsl(-120, 1.0, 0.5) == palette.hsl(240, 1.0, 0.5)


def test_mix_endpoints_and_midpoint():
    a, b = (0, 0, 0), (200, 100, 50)
    assert palette.mix(a, b, 0.0) == a
    assert palette.mix(a, b, 1.0) == b
    assert palette.mix(a, b, 0.5) == (100, 50, 25)
