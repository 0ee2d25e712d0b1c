"""lumen-stars - Drifting, twinkling star field for lumen."""
from __future__ import annotations

from lumen_stars.components import Star, StarConfig, StarState
from lumen_stars.field import StarField, make_star, step_stars, twinkle

__all__ = ["Star", "StarConfig", "StarField", "StarState", "make_star", "step_stars", "twinkle"]
