"""Shared value types and protocols for the lumen engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lumen.canvas import Canvas


@dataclass(frozen=True, slots=True)
class Size:
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True, slots=True)
class FrameContext:
    frame_number: int
    dt: float
    elapsed: float
    random: _random.Random


@dataclass(frozen=True, slots=True)
class Cursor:
    """Pointer state for one frame, in logical surface coordinates.

    ``moves`` holds every pointer-move sample received since the previous
    frame; ``moving`` is true while the pointer moved recently.
    """

    x: float = 0.0
    y: float = 0.0
    active: bool = False
    moving: bool = False
    moves: tuple[tuple[float, float], ...] = ()


IDLE_CURSOR = Cursor()


class ViewportError(ValueError):
    """Raised on invalid viewport dimensions or device pixel ratio."""


class Simulator(Protocol):
    def init(self, size: Size, rng: _random.Random) -> None: ...

    def tick(self, ctx: FrameContext, cursor: Cursor) -> None: ...

    def draw(self, canvas: Canvas) -> None: ...
