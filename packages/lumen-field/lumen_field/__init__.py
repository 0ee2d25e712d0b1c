"""lumen-field - Static gradient, vignette and grain backdrop for lumen."""
from __future__ import annotations

from lumen_field import gradient
from lumen_field.renderer import FieldConfig, FieldRenderer

__all__ = ["FieldConfig", "FieldRenderer", "gradient"]
