"""Tests for SpatialHash near-neighbour queries."""
from __future__ import annotations

import itertools
import math
import random

import pytest
from lumen.spatial import SpatialHash


class TestSpatialHash:
    def test_invalid_cell_size(self) -> None:
        with pytest.raises(ValueError):
            SpatialHash(0)

    def test_insert_returns_indices(self) -> None:
        grid = SpatialHash(10.0)
        assert grid.insert(0.0, 0.0) == 0
        assert grid.insert(5.0, 5.0) == 1
        assert len(grid) == 2

    def test_pairs_find_close_items_only(self) -> None:
        grid = SpatialHash(10.0)
        grid.rebuild([(0.0, 0.0), (3.0, 4.0), (30.0, 30.0)])
        assert [(i, j) for i, j, _ in grid.pairs(6.0)] == [(0, 1)]

    def test_pairs_are_strict(self) -> None:
        grid = SpatialHash(10.0)
        grid.rebuild([(0.0, 0.0), (5.0, 0.0)])
        assert list(grid.pairs(5.0)) == []

    def test_radius_larger_than_cell(self) -> None:
        grid = SpatialHash(5.0)
        grid.rebuild([(0.0, 0.0), (18.0, 0.0)])
        assert [(i, j) for i, j, _ in grid.pairs(20.0)] == [(0, 1)]

    def test_negative_coordinates(self) -> None:
        grid = SpatialHash(10.0)
        grid.rebuild([(-1.0, -1.0), (1.0, 1.0)])
        pairs = list(grid.pairs(5.0))
        assert len(pairs) == 1
        i, j, d = pairs[0]
        assert (i, j) == (0, 1)
        assert math.isclose(d, math.sqrt(8.0))

    def test_rebuild_replaces_contents(self) -> None:
        grid = SpatialHash(10.0)
        grid.rebuild([(0.0, 0.0), (1.0, 1.0)])
        grid.rebuild([(50.0, 50.0)])
        assert len(grid) == 1
        assert list(grid.pairs(5.0)) == []

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_pairs_match_brute_force(self, seed: int) -> None:
        rng = random.Random(seed)
        points = [(rng.uniform(-50, 400), rng.uniform(-50, 300)) for _ in range(120)]
        radius = 60.0
        grid = SpatialHash(radius)
        grid.rebuild(points)

        found = {(i, j) for i, j, _ in grid.pairs(radius)}
        expected = {
            (i, j)
            for i, j in itertools.combinations(range(len(points)), 2)
            if math.dist(points[i], points[j]) < radius
        }
        assert found == expected

    def test_pairs_reported_once(self) -> None:
        grid = SpatialHash(10.0)
        grid.rebuild([(9.0, 9.0), (11.0, 11.0), (12.0, 9.0)])
        pairs = [(i, j) for i, j, _ in grid.pairs(10.0)]
        assert len(pairs) == len(set(pairs)) == 3
