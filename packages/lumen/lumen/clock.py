"""Frame clock with clamped, variable time steps."""

import random

from lumen.types import FrameContext

MAX_FRAME_DELTA = 0.1


def clamp_delta(raw: float, max_delta: float = MAX_FRAME_DELTA) -> float:
    if raw < 0.0:
        return 0.0
    if raw > max_delta:
        return max_delta
    return raw


class FrameClock:
    def __init__(self, max_delta: float = MAX_FRAME_DELTA) -> None:
        if max_delta <= 0:
            raise ValueError("max_delta must be positive")
        self._max_delta = max_delta
        self._last: float | None = None
        self._dt = 0.0
        self._elapsed = 0.0
        self._frame_number = 0

    @property
    def max_delta(self) -> float:
        return self._max_delta

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def frame_number(self) -> int:
        return self._frame_number

    def advance(self, now: float) -> float:
        """Record a frame timestamp (seconds) and return the clamped delta.

        The first call after a reset yields zero.
        """
        if self._last is None:
            raw = 0.0
        else:
            raw = now - self._last
        self._last = now
        self._dt = clamp_delta(raw, self._max_delta)
        self._elapsed += self._dt
        self._frame_number += 1
        return self._dt

    def context(self, rng: random.Random) -> FrameContext:
        return FrameContext(
            frame_number=self._frame_number,
            dt=self._dt,
            elapsed=self._elapsed,
            random=rng,
        )

    def reset(self) -> None:
        self._last = None
        self._dt = 0.0
        self._elapsed = 0.0
        self._frame_number = 0
