"""Tests for frame delta clamping and FrameClock."""

import random

import pytest
from lumen.clock import MAX_FRAME_DELTA, FrameClock, clamp_delta
from lumen.types import FrameContext


def test_clamp_delta_passes_normal_frames():
    assert clamp_delta(0.016) == 0.016


def test_clamp_delta_caps_at_100ms():
    assert clamp_delta(5.0) == MAX_FRAME_DELTA
    assert MAX_FRAME_DELTA == 0.1


def test_clamp_delta_floors_negative_gap():
    assert clamp_delta(-0.5) == 0.0


def test_clamp_delta_is_idempotent():
    for raw in (-1.0, 0.0, 0.03, 0.1, 0.25, 5.0):
        once = clamp_delta(raw)
        assert clamp_delta(once) == once
        assert 0.0 <= once <= MAX_FRAME_DELTA


def test_first_advance_yields_zero():
    clock = FrameClock()
    assert clock.advance(12.0) == 0.0
    assert clock.frame_number == 1


def test_advance_measures_gap():
    clock = FrameClock()
    clock.advance(1.0)
    dt = clock.advance(1.016)
    assert dt == pytest.approx(0.016)
    assert clock.elapsed == pytest.approx(0.016)


def test_backgrounded_gap_is_clamped():
    """A 5 second stall feeds the same delta as exactly 100 ms."""
    stalled = FrameClock()
    stalled.advance(0.0)
    stalled.advance(5.0)

    exact = FrameClock()
    exact.advance(0.0)
    exact.advance(0.1)

    assert stalled.dt == exact.dt == 0.1
    assert stalled.elapsed == exact.elapsed


def test_timestamp_going_backwards_yields_zero():
    clock = FrameClock()
    clock.advance(10.0)
    assert clock.advance(9.0) == 0.0


def test_custom_max_delta():
    clock = FrameClock(max_delta=0.05)
    clock.advance(0.0)
    assert clock.advance(1.0) == 0.05


def test_invalid_max_delta():
    with pytest.raises(ValueError):
        FrameClock(max_delta=0)


def test_context_snapshot():
    clock = FrameClock()
    rng = random.Random(1)
    clock.advance(0.0)
    clock.advance(0.02)
    ctx = clock.context(rng)
    assert isinstance(ctx, FrameContext)
    assert ctx.frame_number == 2
    assert ctx.dt == pytest.approx(0.02)
    assert ctx.elapsed == pytest.approx(0.02)
    assert ctx.random is rng


def test_reset():
    clock = FrameClock()
    clock.advance(0.0)
    clock.advance(0.05)
    clock.reset()
    assert clock.frame_number == 0
    assert clock.elapsed == 0.0
    assert clock.advance(100.0) == 0.0
