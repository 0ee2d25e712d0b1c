"""Viewport - logical vs. physical surface size and the layers sized from it."""
from __future__ import annotations

import logging

import pygame

from lumen.canvas import Canvas
from lumen.types import Size, ViewportError

logger = logging.getLogger(__name__)


class Viewport:
    def __init__(self, width: float, height: float, dpr: float = 1.0) -> None:
        self._size = Size(0.0, 0.0)
        self._dpr = 1.0
        self._generation = 0
        self._layers: list[Canvas] = []
        self.resize(width, height, dpr)

    @property
    def size(self) -> Size:
        return self._size

    @property
    def width(self) -> float:
        return self._size.width

    @property
    def height(self) -> float:
        return self._size.height

    @property
    def dpr(self) -> float:
        return self._dpr

    @property
    def physical_size(self) -> tuple[int, int]:
        return (
            int(round(self._size.width * self._dpr)),
            int(round(self._size.height * self._dpr)),
        )

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_degenerate(self) -> bool:
        return self._size.is_degenerate

    @property
    def layers(self) -> tuple[Canvas, ...]:
        return tuple(self._layers)

    def resize(self, width: float, height: float, dpr: float | None = None) -> None:
        """Re-read dimensions and reallocate every layer at physical size."""
        if width < 0 or height < 0:
            raise ViewportError(f"Negative viewport size {width}x{height}")
        if dpr is not None:
            if dpr <= 0:
                raise ViewportError(f"Device pixel ratio must be positive, got {dpr}")
            self._dpr = float(dpr)
        self._size = Size(float(width), float(height))
        self._generation += 1
        for layer in self._layers:
            self._allocate(layer)
        logger.debug(
            "viewport resized to %sx%s @%sx (physical %s, generation %d)",
            width, height, self._dpr, self.physical_size, self._generation,
        )

    def create_layer(self, opaque: bool = False) -> Canvas:
        layer = Canvas(opaque=opaque)
        self._allocate(layer)
        self._layers.append(layer)
        return layer

    def release(self) -> None:
        for layer in self._layers:
            layer.detach()
        self._layers.clear()

    def _allocate(self, layer: Canvas) -> None:
        if self.is_degenerate:
            layer.attach(None, self._dpr)
            return
        flags = 0 if layer.opaque else pygame.SRCALPHA
        layer.attach(pygame.Surface(self.physical_size, flags, 32), self._dpr)
        layer.clear()
