"""Tests for the numpy gradient helpers."""

import numpy as np
import pytest
from lumen_field import gradient


def test_radial_distance_is_normalized():
    d = gradient.radial_distance(50, 40)
    assert d.shape == (50, 40)
    assert d.min() < 0.05
    assert d.max() <= 1.0
    assert d.max() > 0.95


def test_radial_distance_off_center():
    d = gradient.radial_distance(100, 100, center=(0.0, 0.0))
    assert d[0, 0] < d[99, 99]
    assert d[99, 99] == pytest.approx(1.0, abs=0.02)


def test_radial_gradient_endpoints():
    buf = gradient.radial_gradient(41, 41, (200, 200, 200), (0, 0, 0))
    assert buf.shape == (41, 41, 3)
    assert buf[20, 20, 0] > 190
    assert buf[0, 0, 0] < 10


def test_vertical_gradient_runs_top_to_bottom():
    buf = gradient.vertical_gradient(4, 11, (0, 0, 100), (0, 0, 0))
    assert buf[0, 0, 2] == pytest.approx(100.0)
    assert buf[3, 10, 2] == pytest.approx(0.0)
    assert buf[1, 5, 2] == pytest.approx(50.0)


def test_vertical_gradient_single_row():
    buf = gradient.vertical_gradient(3, 1, (10, 20, 30), (0, 0, 0))
    assert buf.shape == (3, 1, 3)
    assert tuple(buf[0, 0]) == (10.0, 20.0, 30.0)


def test_composite_with_scalar_and_map():
    base = np.zeros((2, 2, 3))
    half = gradient.composite(base, (100, 100, 100), 0.5)
    assert np.allclose(half, 50.0)
    alpha = np.array([[0.0, 1.0], [0.25, 0.0]])
    mixed = gradient.composite(base, (100, 0, 0), alpha)
    assert mixed[0, 1, 0] == pytest.approx(100.0)
    assert mixed[1, 0, 0] == pytest.approx(25.0)
    assert mixed[0, 0, 0] == 0.0


def test_vignette_is_clear_in_the_middle():
    a = gradient.vignette_alpha(60, 60, 0.5, 0.4)
    assert a[30, 30] == 0.0
    assert a[0, 0] == pytest.approx(0.5, abs=0.05)
    assert a.max() <= 0.5


def test_to_pixels_clips_and_quantizes():
    out = gradient.to_pixels(np.array([[[-4.0, 127.6, 300.0]]]))
    assert out.dtype == np.uint8
    assert out.tolist() == [[[0, 128, 255]]]
